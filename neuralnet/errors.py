class NeuralNetError(Exception):
    """Base class for every error raised by neuralnet."""


class ConfigError(NeuralNetError, ValueError):
    """Invalid construction parameter (counts, layer kind, activation)."""
    def __init__(self, parameter: str, value, message: str = None):
        self.parameter = parameter
        self.value = value
        super().__init__(message or f"{parameter} is invalid: {value!r}")


class ValidationError(NeuralNetError):
    """Structural inconsistency found right before a compute."""


class StructuralCorruptionError(ValidationError):
    """The layer chain did not reach the output layer within the depth bound."""
