import random

import networkx as nx

from neuralnet import Config, HiddenSpec, InputSpec, Network, OutputSpec, evaluate, log_result, setup_logging
from neuralnet.network import to_digraph, visualize_network

if __name__ == "__main__":
    config = Config()
    logger = setup_logging(config)

    network = Network.build(
        InputSpec(config.input_size),
        [HiddenSpec(n, a) for n, a in config.hidden_layers],
        OutputSpec(config.output_size, config.output_activation),
        config=config,
    )
    logger.info(f"\n{network.summary().to_string(index=False)}")

    G = to_digraph(network)
    logger.info(f"Layer path: {nx.shortest_path(G, 0, G.number_of_nodes() - 1)}")
    if config.plot_network:
        visualize_network(network)

    values = [random.random() for _ in range(config.input_size)]
    outputs = evaluate(network, values)
    log_result(config, network, values, outputs)
    logger.info(f"Inputs {values} -> outputs {outputs}")
