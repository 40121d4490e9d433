import logging
import os
import time
from typing import List, Optional, Sequence

import pandas as pd

from .config import Config
from .network import Network

logger = logging.getLogger("NeuralNet.Evaluate")

STATS_HEADERS = ["timestamp", "shape", "inputs", "outputs"]

def evaluate(network: Network, values: Sequence[float]) -> List[float]:
    """Load values into the input layer, run a forward pass and return the outputs."""
    network.set_inputs(values)
    network.compute()
    outputs = network.outputs
    logger.debug(f"Evaluated {list(values)} -> {outputs}")
    return outputs


def log_result(config: Optional[Config], network: Network, values: Sequence[float], outputs: Sequence[float]) -> None:
    """Append one evaluation to the stats CSV, writing the header on first use."""
    stats_path = getattr(config or Config(), "stats_path", Config.stats_path)

    stats_dir = os.path.dirname(stats_path)
    if stats_dir:
        os.makedirs(stats_dir, exist_ok=True)
    if not os.path.exists(stats_path):
        pd.DataFrame(columns=STATS_HEADERS).to_csv(stats_path, index=False)

    df = pd.DataFrame(
        {
            "timestamp": [time.time()],
            "shape": [network.shape()],
            "inputs": [" ".join(str(v) for v in values)],
            "outputs": [" ".join(str(v) for v in outputs)],
        }
    )
    df.to_csv(stats_path, mode="a", header=False, index=False)
