import random
from typing import List, Optional, Tuple

from ... import activation as act
from ...config import Config
from ...errors import ConfigError, ValidationError

class Neuron:
    """A single neuron: weighted sum of its inputs plus a bias, then an activation."""
    def __init__(self, num_inputs: int, activation: str, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        if isinstance(num_inputs, bool) or not isinstance(num_inputs, int) or num_inputs < 1:
            raise ConfigError("num_inputs", num_inputs, f"num_inputs must be a positive integer, got {num_inputs!r}")

        config = config or Config()
        rng = rng or random.Random(getattr(config, "seed", None))

        self.num_inputs = num_inputs
        self.weights: List[float] = [rng.random() for _ in range(num_inputs)]
        self.inputs: List[float] = [0.0] * num_inputs
        self.bias: float = getattr(config, "initial_bias", 0.0)
        self.activation = activation

        self.output_before_activation = 0.0
        self.output = 0.0

    def validate(self) -> Tuple[bool, str]:
        if not isinstance(self.num_inputs, int) or self.num_inputs < 1:
            return False, f"Invalid neuron: num_inputs must be a positive integer but is {self.num_inputs!r}"
        if len(self.weights) != self.num_inputs:
            return False, f"Invalid neuron: len(weights) != num_inputs: {len(self.weights)}, {self.num_inputs}"
        if len(self.inputs) != self.num_inputs:
            return False, f"Invalid neuron: len(inputs) != num_inputs: {len(self.inputs)}, {self.num_inputs}"
        return True, ""

    def compute(self) -> None:
        valid, msg = self.validate()
        if not valid:
            raise ValidationError(msg)

        total = self.bias
        for x, w in zip(self.inputs, self.weights):
            total += x * w

        self.output_before_activation = total
        self.output = act.apply(self.activation, total)

    def __repr__(self):
        return f"Neuron(inputs={self.num_inputs}, bias={self.bias:.2f}, act='{self.activation}')"
