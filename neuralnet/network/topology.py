import matplotlib.pyplot as plt
import networkx as nx

from .layers import LayerKind
from .network import Network

def to_digraph(network: Network) -> nx.DiGraph:
    """
    Layer graph of a network: one node per layer (indexed by position in
    network.layers) and one edge per next link.
    """
    G = nx.DiGraph()
    index = {id(layer): i for i, layer in enumerate(network.layers)}

    for i, layer in enumerate(network.layers):
        G.add_node(
            i,
            kind=layer.kind.value,
            num_neurons=layer.num_neurons,
            num_inputs=layer.num_inputs,
            activation=layer.activation,
        )

    for i, layer in enumerate(network.layers):
        if layer.next is not None and id(layer.next) in index:
            G.add_edge(i, index[id(layer.next)], width=len(layer.outputs))

    return G


def visualize_network(network: Network, ax=None):
    """
    Visualize the layer chain of a Network.
    Input = green, hidden = blue, output = red. Node labels show the neuron
    count and activation, edge labels the number of values passed along.
    """
    G = to_digraph(network)

    colors = {
        LayerKind.INPUT.value: "lightgreen",
        LayerKind.HIDDEN.value: "lightblue",
        LayerKind.OUTPUT.value: "salmon",
    }
    node_colors = [colors[G.nodes[n]["kind"]] for n in G.nodes()]

    # Layers left to right
    pos = {n: (n, 0) for n in G.nodes()}

    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=1500, ax=ax)
    nx.draw_networkx_edges(G, pos, edgelist=G.edges(), edge_color="black", ax=ax)

    labels = {n: f"{G.nodes[n]['num_neurons']}\n{G.nodes[n]['activation']}" for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, ax=ax)

    edge_labels = {(u, v): str(data["width"]) for u, v, data in G.edges(data=True)}
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7, ax=ax)

    if ax is None:
        plt.show()
