import copy
import logging
import random
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .. import activation as act
from ..config import Config
from ..errors import ConfigError, StructuralCorruptionError, ValidationError
from .layers import Layer, LayerKind
from .specs import HiddenSpec, InputSpec, OutputSpec, coerce_spec

logger = logging.getLogger("NeuralNet.Network")

def _check_count(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning(f"Rejected network config: {name}={value!r}")
        raise ConfigError(name, value, f"{name} must be > 0 and is: {value!r}")


def _check_activation(name: str, value) -> None:
    if not act.is_recognized(value):
        logger.warning(f"Rejected network config: {name}={value!r}")
        raise ConfigError(name, value, f"{name} is unknown: {value!r}")


class Network:
    """
    A feed-forward network: an input layer, zero or more hidden layers and an
    output layer linked into a single chain through prev/next.

    Use Network.build to get an instance. The network owns every layer in
    `layers`; prev/next are plain references into that list.
    """
    def __init__(self, input_layer: Layer, hidden_layers: List[Layer], output_layer: Layer, max_depth: int = Config.max_depth):
        self.input_layer = input_layer
        self.hidden_layers = hidden_layers
        self.output_layer = output_layer
        self.max_depth = max_depth

    @property
    def layers(self) -> List[Layer]:
        return [self.input_layer, *self.hidden_layers, self.output_layer]

    @property
    def num_neurons(self) -> int:
        return sum(layer.num_neurons for layer in self.layers)

    @property
    def outputs(self) -> List[float]:
        return list(self.output_layer.outputs)

    # --- construction ---
    @classmethod
    def build(
        cls,
        input_spec: InputSpec,
        hidden_specs: Optional[Sequence[HiddenSpec]],
        output_spec: OutputSpec,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ) -> "Network":
        """
        Build and link a network from layer specs.

        Every count and activation is checked before any layer is created, so
        a ConfigError never leaves a half linked network behind.

        Args:
            input_spec: width of the input vector.
            hidden_specs: hidden layers in order, may be empty or None.
            output_spec: width and activation of the output layer.
            config: settings for bias, seeding and the depth bound.
            rng: random source for the initial weights, shared by all layers.
        """
        config = config or Config()
        rng = rng or random.Random(getattr(config, "seed", None))
        max_depth = getattr(config, "max_depth", Config.max_depth)

        input_spec = coerce_spec(input_spec, InputSpec, "input_spec")
        hidden_specs = [
            coerce_spec(spec, HiddenSpec, f"hidden_specs[{i}]") for i, spec in enumerate(hidden_specs or [])
        ]
        output_spec = coerce_spec(output_spec, OutputSpec, "output_spec")

        # Validate
        _check_count("input_spec.num_inputs", input_spec.num_inputs)
        for i, spec in enumerate(hidden_specs):
            _check_count(f"hidden_specs[{i}].num_neurons", spec.num_neurons)
            _check_activation(f"hidden_specs[{i}].activation", spec.activation)
        _check_count("output_spec.num_outputs", output_spec.num_outputs)
        _check_activation("output_spec.activation", output_spec.activation)

        depth = len(hidden_specs) + 2
        if depth >= max_depth:
            logger.warning(f"Rejected network config: {depth} layers reaches max_depth={max_depth}")
            raise ConfigError("hidden_specs", len(hidden_specs), f"Network of {depth} layers reaches max_depth={max_depth}")

        # Input layer, one pass-through neuron per input
        input_layer = Layer(
            LayerKind.INPUT,
            input_spec.num_inputs,
            input_spec.num_inputs,
            act.ActivationFunction.NONE.value,
            config=config,
            rng=rng,
        )

        # Hidden layers, each fed by the previous layer's outputs
        hidden_layers: List[Layer] = []
        prev = input_layer
        for spec in hidden_specs:
            layer = Layer(LayerKind.HIDDEN, spec.num_neurons, prev.num_neurons, spec.activation, config=config, rng=rng)
            cls._link(prev, layer)
            hidden_layers.append(layer)
            prev = layer

        # Output layer closes the chain
        output_layer = Layer(
            LayerKind.OUTPUT, output_spec.num_outputs, prev.num_neurons, output_spec.activation, config=config, rng=rng
        )
        cls._link(prev, output_layer)

        network = cls(input_layer, hidden_layers, output_layer, max_depth=max_depth)
        logger.info(f"Built network: {network.shape()} ({network.num_neurons} neurons)")
        return network

    @staticmethod
    def _link(prev: Layer, layer: Layer) -> None:
        prev.next = layer
        layer.prev = prev
        logger.debug(f"Linked {prev.kind.value} layer -> {layer.kind.value} layer")

    # --- validation ---
    def validate(self) -> None:
        """
        Walk the chain from the input layer to the output layer and raise on
        the first inconsistency.

        Raises:
            StructuralCorruptionError: the walk reached max_depth layers without finishing.
            ValidationError: a layer is invalid, a link/shape check failed, or the chain strays from self.layers.
        """
        layers = self.layers
        prev = None
        layer = self.input_layer
        depth = 1
        while True:
            if depth >= self.max_depth:
                raise StructuralCorruptionError(f"Max depth {self.max_depth} reached while validating, chain is cyclic or unterminated")
            if layer is None:
                raise ValidationError(f"At depth {depth}, layer is missing")
            if depth > len(layers) or layer is not layers[depth - 1]:
                raise ValidationError(f"At depth {depth}, chain does not follow the network's layers")

            valid, msg = layer.validate()
            if not valid:
                raise ValidationError(f"At depth {depth}, {msg}")
            if layer.prev is not prev:
                raise ValidationError(f"At depth {depth}, layer.prev does not match the preceding layer")

            if layer.kind == LayerKind.OUTPUT:
                if layer is not self.output_layer:
                    raise ValidationError(f"At depth {depth}, reached an output layer that is not the network's output layer")
                if depth != len(layers):
                    raise ValidationError(f"Reached the output layer after {depth - 1} hops, expected {len(layers) - 1}")
                return

            if layer.next is None:
                raise ValidationError(f"At depth {depth}, next layer is missing before the output layer")
            if len(layer.outputs) != layer.next.num_inputs:
                raise ValidationError(
                    f"At depth {depth}, len(layer.outputs) != layer.next.num_inputs: {len(layer.outputs)}, {layer.next.num_inputs}"
                )

            prev = layer
            layer = layer.next
            depth += 1

    def is_valid(self) -> Tuple[bool, str]:
        try:
            self.validate()
        except ValidationError as e:
            return False, str(e)
        return True, ""

    # --- forward pass ---
    def compute(self) -> None:
        """Run input_layer.inputs through every layer, leaving the result in output_layer.outputs."""
        try:
            self.validate()
        except ValidationError as e:
            logger.warning(f"Refusing to compute invalid network: {e}")
            raise

        layer = self.input_layer
        depth = 1
        while True:
            if depth >= self.max_depth:
                raise StructuralCorruptionError(f"Max depth {self.max_depth} reached while computing")

            layer.compute()
            logger.debug(f"Computed layer at depth {depth}: {layer!r}")
            if layer.kind == LayerKind.OUTPUT:
                return

            layer.next.inputs[:] = layer.outputs
            layer = layer.next
            depth += 1

    def set_inputs(self, values: Sequence[float]) -> None:
        values = list(values)
        if len(values) != self.input_layer.num_inputs:
            raise ValidationError(f"Expected {self.input_layer.num_inputs} input values, got {len(values)}")
        self.input_layer.inputs[:] = values

    # --- utils ---
    def clone(self) -> "Network":
        """Independent copy with the same weights, safe to compute alongside the original."""
        return copy.deepcopy(self)

    def shape(self) -> str:
        return " -> ".join(str(layer.num_neurons) for layer in self.layers)

    def summary(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "layer": list(range(len(self.layers))),
                "kind": [layer.kind.value for layer in self.layers],
                "num_neurons": [layer.num_neurons for layer in self.layers],
                "num_inputs": [layer.num_inputs for layer in self.layers],
                "activation": [layer.activation for layer in self.layers],
            }
        )

    def __repr__(self):
        return f"Network({self.shape()})"
