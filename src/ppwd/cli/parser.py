"""Command-line argument parser for ppwd."""

import argparse

from .. import __version__
from ..config.settings import AppSettings


def create_cli_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="ppwd",
        description="ppwd - print the working directory, shortened for a prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full path, home directory shown as ~ only when compressing
  ppwd

  # Fit the path in 12 characters: /usr/local/share/man -> /u/l/s/man
  ppwd 12

  # Always compress, even if the path already fits
  ppwd -20
  ppwd --always 20

  # A third of the terminal width
  ppwd 33%
  ppwd -- -33%

  # Remember options as defaults
  ppwd 30 --logical --save-defaults
        """,
    )

    parser.add_argument(
        "length",
        nargs="?",
        default=None,
        metavar="LENGTH",
        help="Target length in characters or N%% of the terminal width; "
        "negative forces compression (default: never compress)",
    )
    parser.add_argument(
        "--always",
        "-f",
        action="store_true",
        help="Compress even if the path already fits (same as a negative LENGTH)",
    )

    # Directory lookup
    lookup_group = parser.add_argument_group("directory settings")
    mode = lookup_group.add_mutually_exclusive_group()
    mode.add_argument(
        "--physical",
        "-P",
        dest="physical",
        action="store_const",
        const=True,
        default=None,
        help="Show the path with symlinks resolved",
    )
    mode.add_argument(
        "--logical",
        "-L",
        dest="physical",
        action="store_const",
        const=False,
        help="Show the path from $PWD when it names the current directory",
    )

    # Home substitution
    home_group = parser.add_argument_group("home directory settings")
    home_group.add_argument(
        "--no-home",
        action="store_true",
        help="Do not replace the home directory with a marker",
    )
    home_group.add_argument(
        "--home-marker", help="Marker that replaces the home directory (default: ~)"
    )

    # Parsing and persistence
    misc_group = parser.add_argument_group("other settings")
    misc_group.add_argument(
        "--compat",
        action="store_true",
        help="Treat a malformed LENGTH as its leading digits (or 0) "
        "instead of an error",
    )
    misc_group.add_argument(
        "--save-defaults",
        action="store_true",
        help="Save the given options as defaults for later runs",
    )
    misc_group.add_argument(
        "--verbose", "-v", action="store_true", help="Log compression steps to stderr"
    )
    misc_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def apply_cli_settings(args: argparse.Namespace, settings: AppSettings) -> AppSettings:
    """Apply CLI arguments to settings object."""
    if args.physical is not None:
        settings.physical = args.physical

    if args.no_home:
        settings.use_home = False
    if args.home_marker is not None:
        settings.home_marker = args.home_marker

    if args.compat:
        settings.strict = False

    return settings
