"""Visibility classification for workspace buttons."""

from typing import Iterable

from .models import VisibilityState, WorkspaceSummary


def classify(focused: bool, urgent: bool, visible: bool) -> VisibilityState:
    """Map workspace flags to a visibility state, highest priority first."""
    if focused:
        return VisibilityState.FOCUSED
    if urgent:
        return VisibilityState.URGENT
    if visible:
        return VisibilityState.VISIBLE
    return VisibilityState.HIDDEN


def classify_summary(workspace: WorkspaceSummary) -> VisibilityState:
    return classify(workspace.focused, workspace.urgent, workspace.visible)


def classify_live(workspace_id: int, workspaces: Iterable[WorkspaceSummary]) -> VisibilityState:
    """Classify a workspace from a freshly fetched workspace list.

    Returns UNKNOWN when the id is not in the list, which happens when the
    workspace vanished between the event and the query.
    """
    for workspace in workspaces:
        if workspace.id == workspace_id:
            return classify_summary(workspace)
    return VisibilityState.UNKNOWN
