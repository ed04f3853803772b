"""i3/sway workspace strip for Eww.

This package listens to workspace events from the window manager IPC socket
and streams one line of Eww widget markup per change, describing the
workspaces assigned to a single output.

Modules:
    - models: Pydantic data models (VisibilityState, WorkspaceSummary, WorkspaceEvent)
    - identity: Workspace name parsing and per-id memoization
    - visibility: Flag and live-lookup visibility classification
    - registry: Ordered map of rendered workspace buttons
    - reducer: Incremental event state machine
    - renderer: Eww markup serialization
    - daemon: Seed, IPC connections and the event loop
"""

import logging

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "configure_logging",
]


def configure_logging(
    level: str = "WARNING",
    format_string: str | None = None,
) -> logging.Logger:
    """Configure package-level logging.

    Log records go to stderr; stdout carries the widget markup stream.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string. Defaults to standard format
            with timestamp, level, module, and message.

    Returns:
        Configured logger instance for the eww_workspaces package.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    logger = logging.getLogger("eww_workspaces")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)

    return logger

