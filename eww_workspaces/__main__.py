"""CLI entry point for the Eww workspace strip.

Usage:
    python -m eww_workspaces DP-1
    python -m eww_workspaces HDMI-A-1 --config ~/.config/eww/workspaces.json --log-level DEBUG

Eww usage:
    (deflisten workspaces_dp1 "eww-workspaces DP-1")
    (literal :content workspaces_dp1)
"""

import argparse
import signal
import sys
from pathlib import Path

from . import __version__, configure_logging
from .config import load_widget_config
from .errors import WorkspaceStripError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="eww-workspaces",
        description="Stream Eww markup for the i3/sway workspaces of one output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s DP-1
      Stream the workspace strip for output DP-1

  %(prog)s eDP-1 --once
      Print the current strip for eDP-1 and exit
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "monitor",
        help="Output (monitor) name whose workspaces are shown",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="JSON file with widget markup settings",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level, logs go to stderr (default: WARNING)",
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the current strip and exit without listening for events",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    logger = configure_logging(args.log_level)

    try:
        config = load_widget_config(args.config)
    except WorkspaceStripError as e:
        logger.error(str(e))
        return 1

    from .daemon import WorkspaceStripDaemon

    signal.signal(signal.SIGINT, lambda *_args: sys.exit(0))
    signal.signal(signal.SIGTERM, lambda *_args: sys.exit(0))

    logger.info(f"eww-workspaces v{__version__} for output {args.monitor}")
    daemon = WorkspaceStripDaemon(args.monitor, config)
    try:
        daemon.run(once=args.once)
    except WorkspaceStripError as e:
        logger.error(f"Stopping: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
