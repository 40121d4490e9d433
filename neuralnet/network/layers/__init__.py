from .layer import Layer, LayerKind
from .neuron import Neuron

__all__ = ["Layer", "LayerKind", "Neuron"]
