from .layers import Layer, LayerKind, Neuron
from .network import Network
from .specs import HiddenSpec, InputSpec, OutputSpec
from .topology import to_digraph, visualize_network

__all__ = [
    "Network",
    "Layer",
    "LayerKind",
    "Neuron",
    "InputSpec",
    "HiddenSpec",
    "OutputSpec",
    "to_digraph",
    "visualize_network",
]
