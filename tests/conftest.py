import matplotlib

matplotlib.use("Agg")

import random

import pytest

from neuralnet import Config, HiddenSpec, InputSpec, Layer, LayerKind, Network, Neuron, OutputSpec


class SeededConfig(Config):
    seed = 1234
    log_path = None


@pytest.fixture
def config():
    return SeededConfig()


@pytest.fixture
def rng():
    return random.Random(42)


def make_known_neuron(activation="none"):
    """1 * 10 + 2 * 20 + 3 * 30 + 5 = 145"""
    n = Neuron(3, activation, rng=random.Random(0))
    n.inputs[:] = [1.0, 2.0, 3.0]
    n.weights[:] = [10.0, 20.0, 30.0]
    n.bias = 5.0
    return n


@pytest.fixture
def known_neuron():
    return make_known_neuron()


@pytest.fixture
def known_layer():
    layer = Layer(LayerKind.HIDDEN, 3, 3, "none", rng=random.Random(0))
    layer.neurons = [make_known_neuron() for _ in range(3)]
    layer.inputs[:] = [1.0, 2.0, 3.0]
    return layer


@pytest.fixture
def deep_network(config, rng):
    return Network.build(
        InputSpec(3),
        [HiddenSpec(10, "sigmoid"), HiddenSpec(20, "step")],
        OutputSpec(2, "sigmoid"),
        config=config,
        rng=rng,
    )


@pytest.fixture
def neuron_factory():
    return make_known_neuron
