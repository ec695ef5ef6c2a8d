"""Utility modules for environment lookup, argument parsing and logging."""

from .environment import get_current_directory, get_home_directory
from .logging_wrapper import LoggingPathCompressor
from .parsing import atoi, is_percentage, parse_target_length

__all__ = [
    "get_current_directory",
    "get_home_directory",
    "LoggingPathCompressor",
    "atoi",
    "is_percentage",
    "parse_target_length",
]
