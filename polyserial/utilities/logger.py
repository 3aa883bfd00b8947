"""
Package logger for polyserial.

Registration and discovery log what they registered at DEBUG, resolution logs each step it takes.
Modules fetch the logger through get_logger() whenever they log, so a logger installed with set_logger()
is picked up everywhere, including by registries created before the swap.
"""

import logging

_logger: logging.Logger = logging.getLogger('polyserial')
_logger.setLevel(logging.WARNING)  # Quiet unless the host application asks for more

def get_logger() -> logging.Logger:
    """Return the logger polyserial currently writes to."""
    return _logger

def set_logger(custom_logger: logging.Logger) -> None:
    """Route all polyserial logging to custom_logger."""
    global _logger
    _logger = custom_logger

def set_log_level(level: int) -> None:
    """Set the level of the logger polyserial currently writes to.
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    _logger.setLevel(level)
