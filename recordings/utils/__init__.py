"""
Utilities package for the recordings client.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from recordings.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
