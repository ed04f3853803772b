"""Incremental workspace state machine.

Consumes workspace events one at a time and mutates the registry so that it
always describes the workspaces on one output, in key order, with their last
known visibility. The full workspace list is only re-fetched when an event
payload cannot answer a visibility or existence question on its own.

Change kinds handled:
    urgent  - mark the workspace urgent
    empty   - drop the workspace (name is parsed directly, bypassing the cache)
    focus   - refresh the previously focused workspace, focus the new one
    init    - register a new workspace without rendering
    move    - add or drop a workspace moving between outputs
Everything else is ignored.
"""

import logging
from typing import Callable, List, Optional

from .errors import MalformedEventError
from .identity import IdentityResolver, Identity, parse_key
from .models import VisibilityState, WorkspaceChange, WorkspaceEvent, WorkspaceNode, WorkspaceSummary
from .registry import WorkspaceRegistry
from .renderer import Renderer
from .visibility import classify_live

logger = logging.getLogger(__name__)

FetchWorkspaces = Callable[[], List[WorkspaceSummary]]


class EventReducer:
    """Applies workspace events to a WorkspaceRegistry.

    Args:
        monitor: Output name the strip is bound to
        registry: Registry to mutate
        resolver: Identity cache shared with the seed
        renderer: Used to build button markup
        fetch_workspaces: Synchronous live snapshot of all workspaces
    """

    def __init__(
        self,
        monitor: str,
        registry: WorkspaceRegistry,
        resolver: IdentityResolver,
        renderer: Renderer,
        fetch_workspaces: FetchWorkspaces,
    ) -> None:
        self.monitor = monitor
        self.registry = registry
        self.resolver = resolver
        self.renderer = renderer
        self.fetch_workspaces = fetch_workspaces

        self._handlers = {
            WorkspaceChange.URGENT: self._on_urgent,
            WorkspaceChange.EMPTY: self._on_empty,
            WorkspaceChange.FOCUS: self._on_focus,
            WorkspaceChange.INIT: self._on_init,
            WorkspaceChange.MOVE: self._on_move,
        }

    def apply(self, event: WorkspaceEvent) -> bool:
        """Apply one event.

        Returns:
            True if the registry's visible content may have changed and the
            strip should be rendered.

        Raises:
            ParseError: If a workspace name cannot be parsed
            MalformedEventError: If the event lacks a required node
        """
        handler = self._handlers.get(event.kind)
        if handler is None:
            logger.debug(f"Ignoring workspace::{event.change}")
            return False
        dirty = handler(event)
        logger.debug(f"workspace::{event.change} applied (dirty={dirty}, keys={self.registry.keys()})")
        return dirty

    # -- helpers --

    def _require(self, event: WorkspaceEvent, attr: str) -> WorkspaceNode:
        node: Optional[WorkspaceNode] = getattr(event, attr)
        if node is None:
            raise MalformedEventError(event.change, attr)
        return node

    def _identity(self, event: WorkspaceEvent, node: WorkspaceNode) -> Identity:
        if node.name is None:
            raise MalformedEventError(event.change, "workspace name")
        return self.resolver.resolve(node.id, node.name)

    def _store(self, key: int, label: str, state: VisibilityState) -> None:
        self.registry.upsert(key, self.renderer.render_button(key, label, state))

    def _live_visibility(self, node: WorkspaceNode, workspaces: Optional[List[WorkspaceSummary]] = None) -> VisibilityState:
        if workspaces is None:
            workspaces = self.fetch_workspaces()
        state = classify_live(node.id, workspaces)
        if state is VisibilityState.UNKNOWN:
            logger.info(f"Workspace id {node.id} ({node.name!r}) not found in live workspace list")
        return state

    # -- change kinds --

    def _on_urgent(self, event: WorkspaceEvent) -> bool:
        current = self._require(event, "current")
        key, label = self._identity(event, current)
        self._store(key, label, VisibilityState.URGENT)
        return True

    def _on_empty(self, event: WorkspaceEvent) -> bool:
        # An emptied workspace is reported under its bare number, so the
        # identity cache is not consulted.
        current = self._require(event, "current")
        if current.name is None:
            raise MalformedEventError(event.change, "workspace name")
        key = parse_key(current.name)
        removed = self.registry.remove(key)
        if removed:
            logger.debug(f"Workspace {key} emptied")
        return removed

    def _on_focus(self, event: WorkspaceEvent) -> bool:
        old = self._require(event, "old")
        current = self._require(event, "current")
        dirty = False

        key, label = self._identity(event, old)
        if self.registry.contains_key(key):
            workspaces = self.fetch_workspaces()
            if any(ws.name == old.name for ws in workspaces):
                self._store(key, label, self._live_visibility(old, workspaces))
            else:
                self.registry.remove(key)
                logger.debug(f"Previously focused workspace {key} no longer exists")
            dirty = True

        key, label = self._identity(event, current)
        if self.registry.contains_key(key):
            self._store(key, label, VisibilityState.FOCUSED)
            dirty = True

        return dirty

    def _on_init(self, event: WorkspaceEvent) -> bool:
        # Creation alone does not render; the focus or urgent event that
        # follows a new workspace does.
        current = self._require(event, "current")
        key, label = self._identity(event, current)
        self._store(key, label, self._live_visibility(current))
        return False

    def _on_move(self, event: WorkspaceEvent) -> bool:
        current = self._require(event, "current")
        key, label = self._identity(event, current)
        output = current.output

        if output is None:
            return self.registry.remove(key)

        tracked = self.registry.contains_key(key)
        if output == self.monitor and not tracked:
            self._store(key, label, self._live_visibility(current))
            logger.debug(f"Workspace {key} moved onto {self.monitor}")
            return True
        if output != self.monitor and tracked:
            self.registry.remove(key)
            logger.debug(f"Workspace {key} moved away to {output}")
            return True
        return False
