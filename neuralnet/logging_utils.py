import logging
import os
from typing import Optional

from .config import Config

LOG_FORMAT = "[%(asctime)s][%(name)s][%(levelname)s] %(message)s"

def setup_logging(config: Optional[Config] = None) -> logging.Logger:
    """
    Send the "NeuralNet" logger to the console and to config.log_path.

    Safe to call more than once, existing handlers are replaced. Set
    config.log_path to None for console only output.
    """
    config = config or Config()
    level = getattr(config, "log_level", logging.INFO)
    log_path = getattr(config, "log_path", None)

    logger = logging.getLogger("NeuralNet")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_path:
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
