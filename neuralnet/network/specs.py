from dataclasses import dataclass
from typing import Mapping, Union

from ..activation import ActivationFunction
from ..errors import ConfigError

@dataclass
class InputSpec:
    num_inputs: int


@dataclass
class HiddenSpec:
    num_neurons: int
    activation: str = ActivationFunction.SIGMOID.value


@dataclass
class OutputSpec:
    num_outputs: int
    activation: str = ActivationFunction.NONE.value


def coerce_spec(spec: Union[InputSpec, HiddenSpec, OutputSpec, Mapping], spec_type: type, name: str):
    """Accept either a spec dataclass or a plain mapping with the same keys."""
    if isinstance(spec, spec_type):
        return spec
    if isinstance(spec, Mapping):
        try:
            return spec_type(**spec)
        except TypeError as e:
            raise ConfigError(name, dict(spec), f"{name} has invalid keys: {e}") from e
    raise ConfigError(name, spec, f"{name} must be a {spec_type.__name__} or a mapping, got {type(spec).__name__}")
