"""Workspace strip daemon.

Owns the IPC connections, seeds the registry from a full workspace listing,
then feeds every workspace event through the reducer and prints a new strip
line whenever the reducer reports a change.

Two connections are used: one answers synchronous get_workspaces queries,
the other blocks on the event stream. Processing is strictly sequential;
each event, including any nested query, finishes before the next is read.
"""

import logging
from typing import Any, Callable, List, Optional, TextIO

import i3ipc
from i3ipc import Event

from .errors import TransportError
from .identity import IdentityResolver
from .models import WidgetConfig, WorkspaceEvent, WorkspaceSummary
from .reducer import EventReducer
from .registry import WorkspaceRegistry
from .renderer import Renderer
from .visibility import classify_summary

logger = logging.getLogger(__name__)


class WorkspaceStripDaemon:
    """Event loop for one output's workspace strip.

    Args:
        monitor: Output name to show workspaces for (e.g. "DP-1")
        config: Widget markup settings
        stream: Where strip lines are written (default: stdout)
        connection_factory: Creates IPC connections (default: i3ipc.Connection)
    """

    def __init__(
        self,
        monitor: str,
        config: Optional[WidgetConfig] = None,
        stream: Optional[TextIO] = None,
        connection_factory: Callable[[], Any] = i3ipc.Connection,
    ) -> None:
        self.monitor = monitor
        self.config = config or WidgetConfig()
        self.renderer = Renderer(self.config, stream)
        self.registry = WorkspaceRegistry()
        self.resolver = IdentityResolver(self.config.placeholder_glyph)
        self.reducer = EventReducer(
            monitor,
            self.registry,
            self.resolver,
            self.renderer,
            self.fetch_workspaces,
        )

        self._connection_factory = connection_factory
        self.query_conn: Optional[Any] = None
        self.event_conn: Optional[Any] = None
        self._fatal: Optional[Exception] = None

    def _connect(self, purpose: str) -> Any:
        try:
            conn = self._connection_factory()
        except Exception as e:
            raise TransportError(f"Failed to open {purpose} connection to window manager IPC: {e}") from e
        logger.info(f"Opened {purpose} connection")
        return conn

    def connect(self) -> None:
        """Open the query connection."""
        if self.query_conn is None:
            self.query_conn = self._connect("query")

    def fetch_workspaces(self) -> List[WorkspaceSummary]:
        """Query the live workspace list.

        Raises:
            TransportError: If the query fails
        """
        if self.query_conn is None:
            raise TransportError("Query connection is not open")
        try:
            replies = self.query_conn.get_workspaces()
        except Exception as e:
            raise TransportError(f"get_workspaces failed: {e}") from e
        return [WorkspaceSummary.from_reply(reply) for reply in replies]

    def seed(self) -> str:
        """Populate the registry from a full listing and render once."""
        for workspace in self.fetch_workspaces():
            if workspace.output != self.monitor:
                continue
            key, label = self.resolver.resolve(workspace.id, workspace.name)
            state = classify_summary(workspace)
            self.registry.upsert(key, self.renderer.render_button(key, label, state))

        logger.info(f"Seeded {len(self.registry)} workspace(s) on {self.monitor}: {self.registry.keys()}")
        return self.render()

    def render(self) -> str:
        return self.renderer.write(self.registry.render_all())

    def handle_event(self, event: WorkspaceEvent) -> bool:
        """Apply one event and render if it changed the strip.

        Returns:
            True if a line was written
        """
        if self.reducer.apply(event):
            self.render()
            return True
        return False

    def _on_workspace(self, conn: Any, ipc_event: Any) -> None:
        try:
            self.handle_event(WorkspaceEvent.from_ipc(ipc_event))
        except Exception as e:
            logger.error(f"Fatal error handling workspace::{getattr(ipc_event, 'change', '?')}: {e}")
            self._fatal = e
            conn.main_quit()

    def listen(self) -> None:
        """Subscribe to workspace events and block until the stream ends.

        Raises:
            TransportError: If the event connection fails
            WorkspaceStripError: Re-raised from event handling
        """
        self.event_conn = self._connect("event")
        self.event_conn.on(Event.WORKSPACE, self._on_workspace)

        try:
            self.event_conn.main()
        except Exception as e:
            if self._fatal is None:
                raise TransportError(f"Event stream failed: {e}") from e

        if self._fatal is not None:
            raise self._fatal
        logger.info("Event stream closed")

    def run(self, once: bool = False) -> None:
        """Connect, seed and (unless `once`) process events until the stream ends."""
        self.connect()
        self.seed()
        if once:
            return
        self.listen()
