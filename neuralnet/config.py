import logging

class Config:

    # =====================
    # Network
    # =====================
    input_size = 3
    hidden_layers = [(10, "sigmoid"), (20, "sigmoid")]    # (num_neurons, activation) per hidden layer
    output_size = 2
    output_activation = "none"

    # =====================
    # Neuron
    # =====================
    initial_bias = 0.0
    seed = None                     # None seeds the weight generator from OS entropy

    # =====================
    # Validation
    # =====================
    max_depth = 30                  # A chain must have fewer layers than this

    # =====================
    # Logging
    # =====================
    log_path = "out/network.log"
    log_level = logging.INFO
    stats_path = "out/stats.csv"
    plot_network = False            # Draw the layer graph with matplotlib after building
