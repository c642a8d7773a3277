"""
Logging setup module.
All engine modules log through loggers obtained here.
"""
import logging
import sys

LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

def setup_logger(level=logging.INFO):
    """Configure the root logger once."""
    root_logger = logging.getLogger()

    # Do not stack handlers when called twice
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(console_handler)

    return root_logger

def get_logger(name):
    """Get a module logger."""
    return logging.getLogger(name)
