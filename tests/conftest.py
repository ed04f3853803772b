"""Pytest configuration and mock i3 IPC objects for workspace strip tests."""

import io
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import pytest

from eww_workspaces.identity import IdentityResolver
from eww_workspaces.models import WidgetConfig, WorkspaceEvent, WorkspaceNode, WorkspaceSummary
from eww_workspaces.reducer import EventReducer
from eww_workspaces.registry import WorkspaceRegistry
from eww_workspaces.renderer import Renderer


@dataclass
class MockWorkspaceReply:
    """Mock i3ipc WorkspaceReply (get_workspaces entry)."""
    id: int
    name: str
    output: str = "DP-1"
    focused: bool = False
    urgent: bool = False
    visible: bool = False

    @property
    def ipc_data(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "output": self.output,
            "focused": self.focused,
            "urgent": self.urgent,
            "visible": self.visible,
        }


@dataclass
class MockCon:
    """Mock i3ipc Con for a workspace node inside an event."""
    id: int
    name: Optional[str]
    output: Optional[str] = None

    @property
    def ipc_data(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "name": self.name, "type": "workspace"}
        if self.output is not None:
            data["output"] = self.output
        return data


@dataclass
class MockWorkspaceEvent:
    """Mock i3ipc WorkspaceEvent."""
    change: str
    current: Optional[MockCon] = None
    old: Optional[MockCon] = None


class MockI3Connection:
    """Mock synchronous i3ipc.Connection.

    Events queued with `queue_event` are dispatched to the registered
    handlers when `main()` runs, until the queue drains or `main_quit()`
    is called.
    """

    def __init__(self, workspaces: List[MockWorkspaceReply]):
        self.workspaces = workspaces
        self.handlers: Dict[Any, List[Callable]] = {}
        self.events: List[MockWorkspaceEvent] = []
        self.query_count = 0
        self.quit = False
        self.before_event: Optional[Callable[[MockWorkspaceEvent], None]] = None

    def get_workspaces(self) -> List[MockWorkspaceReply]:
        self.query_count += 1
        return list(self.workspaces)

    def on(self, event_type: Any, handler: Callable) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def queue_event(self, event: MockWorkspaceEvent) -> None:
        self.events.append(event)

    def main(self) -> None:
        while self.events and not self.quit:
            event = self.events.pop(0)
            if self.before_event is not None:
                self.before_event(event)
            for handlers in self.handlers.values():
                for handler in handlers:
                    handler(self, event)

    def main_quit(self) -> None:
        self.quit = True


def summary(id: int, name: str, output: str = "DP-1", **flags: bool) -> WorkspaceSummary:
    """Build a WorkspaceSummary with default flags."""
    return WorkspaceSummary(id=id, name=name, output=output, **flags)


def node(id: int, name: Optional[str], output: Optional[str] = None) -> WorkspaceNode:
    return WorkspaceNode(id=id, name=name, output=output)


def event(change: str, current: Optional[WorkspaceNode] = None, old: Optional[WorkspaceNode] = None) -> WorkspaceEvent:
    return WorkspaceEvent(change=change, current=current, old=old)


class LiveWorkspaces:
    """Stand-in for the live get_workspaces query used by the reducer."""

    def __init__(self, workspaces: Optional[List[WorkspaceSummary]] = None):
        self.workspaces = workspaces or []
        self.calls = 0

    def __call__(self) -> List[WorkspaceSummary]:
        self.calls += 1
        return list(self.workspaces)


@pytest.fixture
def renderer() -> Renderer:
    return Renderer(WidgetConfig(), io.StringIO())


@pytest.fixture
def live() -> LiveWorkspaces:
    return LiveWorkspaces()


@pytest.fixture
def reducer(renderer: Renderer, live: LiveWorkspaces) -> EventReducer:
    """Reducer bound to output DP-1 with an empty registry."""
    return EventReducer("DP-1", WorkspaceRegistry(), IdentityResolver(), renderer, live)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()
