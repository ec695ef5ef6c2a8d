"""Command-line interface for ppwd."""

from .parser import apply_cli_settings, create_cli_parser
from .runner import run_cli, setup_logging

__all__ = ["create_cli_parser", "apply_cli_settings", "run_cli", "setup_logging"]
