"""
Logging Configuration
Routes every simulation module logger to stdout.
"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the root logger; modules log under their own dotted names
    (world.world, main, ...) and propagate here.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    root = logging.getLogger()
    root.setLevel(level)

    # main() may run more than once in a process
    if root.hasHandlers():
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    root.addHandler(handler)
