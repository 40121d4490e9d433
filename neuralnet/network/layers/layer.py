import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from ... import activation as act
from ...config import Config
from ...errors import ConfigError, ValidationError
from .neuron import Neuron

logger = logging.getLogger("NeuralNet.Layer")

class LayerKind(str, Enum):
    INPUT = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"


def is_valid_kind(kind) -> bool:
    try:
        LayerKind(kind)
    except ValueError:
        return False
    return True


class Layer:
    """
    An ordered group of neurons sharing a fan-in and an activation function.

    prev and next are set by the owning Network once the chain is built,
    both are None on a standalone layer.
    """
    def __init__(
        self,
        kind,
        num_neurons: int,
        num_inputs: int,
        activation: str,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ):
        if not is_valid_kind(kind):
            raise ConfigError("kind", kind, f"Unknown layer kind: {kind!r}")
        if isinstance(num_neurons, bool) or not isinstance(num_neurons, int) or num_neurons < 1:
            raise ConfigError("num_neurons", num_neurons, f"num_neurons must be >= 1, got {num_neurons!r}")
        if isinstance(num_inputs, bool) or not isinstance(num_inputs, int) or num_inputs < 1:
            raise ConfigError("num_inputs", num_inputs, f"num_inputs must be >= 1, got {num_inputs!r}")
        if not act.is_recognized(activation):
            raise ConfigError("activation", activation, f"Unknown activation function: {activation!r}")

        config = config or Config()
        rng = rng or random.Random(getattr(config, "seed", None))

        self.kind = LayerKind(kind)
        # Input layers pass values through unmodified
        if self.kind is LayerKind.INPUT:
            self.activation = act.ActivationFunction.NONE.value
        else:
            self.activation = act.ActivationFunction(activation).value

        self.num_neurons = num_neurons
        self.num_inputs = num_inputs
        self.neurons: List[Neuron] = [
            Neuron(num_inputs, self.activation, config=config, rng=rng) for _ in range(num_neurons)
        ]
        self.inputs: List[float] = [0.0] * num_inputs
        self.outputs: List[float] = [0.0] * num_neurons

        self.prev: Optional["Layer"] = None
        self.next: Optional["Layer"] = None

        logger.debug(f"Created {self.kind.value} layer: {num_neurons} neurons, {num_inputs} inputs, act={self.activation}")

    def validate(self) -> Tuple[bool, str]:
        if not is_valid_kind(self.kind):
            return False, f"Invalid layer kind: {self.kind!r}"
        if not isinstance(self.num_neurons, int) or self.num_neurons < 1:
            return False, f"num_neurons must be > 0 but is: {self.num_neurons!r}"
        if len(self.neurons) != self.num_neurons:
            return False, f"len(neurons) != num_neurons: {len(self.neurons)}, {self.num_neurons}"
        if len(self.outputs) != self.num_neurons:
            return False, f"len(outputs) != num_neurons: {len(self.outputs)}, {self.num_neurons}"
        if not isinstance(self.num_inputs, int) or self.num_inputs < 1:
            return False, f"num_inputs must be > 0 but is: {self.num_inputs!r}"
        if len(self.inputs) != self.num_inputs:
            return False, f"len(inputs) != num_inputs: {len(self.inputs)}, {self.num_inputs}"
        if not act.is_recognized(self.activation):
            return False, f"Invalid activation function: {self.activation!r}"

        for i, neuron in enumerate(self.neurons):
            if neuron.num_inputs != self.num_inputs:
                return False, f"Neuron {i}: num_inputs != layer num_inputs: {neuron.num_inputs}, {self.num_inputs}"
            valid, msg = neuron.validate()
            if not valid:
                return False, f"Neuron {i}: {msg}"

        return True, ""

    def compute(self) -> None:
        valid, msg = self.validate()
        if not valid:
            raise ValidationError(msg)

        for i, neuron in enumerate(self.neurons):
            neuron.inputs[:] = self.inputs
            neuron.compute()
            self.outputs[i] = neuron.output

    def __repr__(self):
        return f"Layer(kind='{getattr(self.kind, 'value', self.kind)}', neurons={self.num_neurons}, inputs={self.num_inputs}, act='{self.activation}')"
