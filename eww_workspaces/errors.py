"""
Error taxonomy for the workspace strip.

Every error here is terminal for the process: the strip never recovers
partial state, it expects to be restarted by its supervisor (eww or systemd).
"""

from typing import Optional


class WorkspaceStripError(Exception):
    """Base class for all workspace strip errors."""


class ParseError(WorkspaceStripError):
    """Workspace name does not start with a non-negative workspace number."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        message = f"Cannot parse workspace number from name {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedEventError(WorkspaceStripError):
    """A workspace event is missing the payload its change kind requires."""

    def __init__(self, change: str, missing: str):
        self.change = change
        self.missing = missing
        super().__init__(f"workspace::{change} event has no {missing}")


class TransportError(WorkspaceStripError):
    """Connecting to, querying or listening on the IPC socket failed."""


class ConfigError(WorkspaceStripError):
    """Widget configuration file is unreadable or invalid."""
