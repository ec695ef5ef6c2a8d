"""Entry point for the ppwd command."""

import sys

from .cli import create_cli_parser, run_cli, setup_logging


def main(argv=None):
    """Main entry point."""
    parser = create_cli_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    return run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
