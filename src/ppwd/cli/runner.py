"""CLI runner for ppwd."""

import argparse
import logging
import sys
from collections.abc import Mapping

from ..compressor import PathCompressor
from ..config.constants import (
    EXIT_ENVIRONMENT_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    LOG_FORMAT,
)
from ..config.settings import AppSettings, SettingsManager
from ..errors import EnvironmentUnavailableError, InvalidArgumentError
from ..utils import (
    LoggingPathCompressor,
    get_current_directory,
    get_home_directory,
    is_percentage,
    parse_target_length,
)
from .parser import apply_cli_settings

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
}


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout carries only the path."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def log_step(message: str, level: str) -> None:
    """Forward a compressor step to the module logger."""
    logger.log(LOG_LEVELS.get(level, logging.INFO), message)


def resolve_target_length(args: argparse.Namespace, settings: AppSettings) -> int:
    """Work out the signed target length from LENGTH, --always and settings."""
    if args.length is None and isinstance(settings.default_length, int):
        target = settings.default_length
    elif args.length is None and settings.default_length is not None:
        # Saved percentages are re-evaluated against the current terminal
        target = parse_target_length(settings.default_length)
    else:
        target = parse_target_length(args.length, strict=settings.strict)

    if args.always:
        target = -abs(target)
    return target


def length_to_save(
    args: argparse.Namespace, settings: AppSettings, target: int
) -> int | str:
    """Return the LENGTH to store as a default: percentages stay relative."""
    if settings.strict and is_percentage(args.length):
        magnitude = args.length.strip().lstrip("+-")
        forced = args.always or args.length.strip().startswith("-")
        return f"-{magnitude}" if forced else magnitude
    return target


def create_compressor(settings: AppSettings) -> LoggingPathCompressor:
    """Create a compressor that logs its steps."""
    return LoggingPathCompressor(
        PathCompressor(home_marker=settings.home_marker), log_step
    )


def run_cli(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    """Print the compressed working directory and return the exit code."""
    settings_manager = SettingsManager()
    settings = apply_cli_settings(args, settings_manager.load())

    try:
        target = resolve_target_length(args, settings)
    except InvalidArgumentError as e:
        print(f"ppwd: error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        current_directory = get_current_directory(
            physical=settings.physical, environ=environ
        )
    except EnvironmentUnavailableError as e:
        print(f"ppwd: error: {e}", file=sys.stderr)
        return EXIT_ENVIRONMENT_ERROR

    home_directory = get_home_directory(environ) if settings.use_home else None

    compressor = create_compressor(settings)
    print(compressor.compress(current_directory, home_directory, target))

    if args.save_defaults:
        if args.length is not None:
            settings.default_length = length_to_save(args, settings, target)
        try:
            settings_manager.save(settings)
        except OSError as e:
            print(f"ppwd: error: cannot save settings: {e}", file=sys.stderr)
            return EXIT_ENVIRONMENT_ERROR
        logger.info("Saved defaults to %s", settings_manager.config_file)

    return EXIT_OK
