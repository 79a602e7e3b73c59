"""Utility functions for nibblefont.

This module provides logging setup and run statistics.
"""

from nibblefont.utils.logging import ConversionStats, configure_logging

__all__ = [
    "ConversionStats",
    "configure_logging",
]
