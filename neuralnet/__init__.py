from .activation import ActivationFunction
from .config import Config
from .errors import ConfigError, NeuralNetError, StructuralCorruptionError, ValidationError
from .evaluate import evaluate, log_result
from .logging_utils import setup_logging
from .network import HiddenSpec, InputSpec, Layer, LayerKind, Network, Neuron, OutputSpec

__all__ = [
    "ActivationFunction",
    "Config",
    "ConfigError",
    "NeuralNetError",
    "StructuralCorruptionError",
    "ValidationError",
    "evaluate",
    "log_result",
    "setup_logging",
    "Network",
    "Layer",
    "LayerKind",
    "Neuron",
    "InputSpec",
    "HiddenSpec",
    "OutputSpec",
]
