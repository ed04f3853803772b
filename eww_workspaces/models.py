"""Pydantic data models for the workspace strip.

This module defines the structures passed between the IPC boundary and the
state engine:
- VisibilityState: Visual state of one workspace button
- WorkspaceChange: Workspace event change kinds
- WorkspaceSummary: One entry of a get_workspaces reply
- WorkspaceNode: Workspace container carried by an event
- WorkspaceEvent: A workspace event with its current/old nodes
- WidgetConfig: Eww markup settings

i3ipc objects are converted here so the reducer only ever sees these models.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VisibilityState(str, Enum):
    """Visual state of a workspace button.

    Priority when several flags hold: FOCUSED > URGENT > VISIBLE > HIDDEN.
    UNKNOWN is produced when a live lookup cannot find the workspace and
    renders as an empty class token.
    """

    FOCUSED = "focused"
    URGENT = "urgent"
    VISIBLE = "visible"
    HIDDEN = "hidden"
    UNKNOWN = ""


class WorkspaceChange(str, Enum):
    """Change kinds of the i3/sway `workspace` event."""

    FOCUS = "focus"
    INIT = "init"
    EMPTY = "empty"
    URGENT = "urgent"
    MOVE = "move"
    RENAME = "rename"
    RELOAD = "reload"
    RESTORED = "restored"


class WorkspaceSummary(BaseModel):
    """A workspace as reported by the get_workspaces query."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Window manager container id")
    name: str = Field(..., description="Workspace name, e.g. '3' or '3;web'")
    output: str = Field(default="", description="Output (monitor) name")
    focused: bool = False
    urgent: bool = False
    visible: bool = False

    @classmethod
    def from_reply(cls, reply: Any) -> "WorkspaceSummary":
        """Build from an i3ipc WorkspaceReply.

        The container id is not a WorkspaceReply attribute, so it is read
        from the raw reply data.
        """
        return cls(
            id=reply.ipc_data["id"],
            name=reply.name,
            output=reply.output or "",
            focused=bool(reply.focused),
            urgent=bool(reply.urgent),
            visible=bool(reply.visible),
        )


class WorkspaceNode(BaseModel):
    """Workspace container attached to a workspace event."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    output: Optional[str] = None

    @classmethod
    def from_con(cls, con: Any) -> Optional["WorkspaceNode"]:
        """Build from an i3ipc Con, or None when the event carries no node."""
        if con is None:
            return None
        ipc_data = getattr(con, "ipc_data", None) or {}
        return cls(id=con.id, name=con.name, output=ipc_data.get("output"))


class WorkspaceEvent(BaseModel):
    """A workspace event.

    `change` keeps the raw string so kinds this strip does not know about
    still parse and can be ignored by the reducer.
    """

    model_config = ConfigDict(frozen=True)

    change: str
    current: Optional[WorkspaceNode] = None
    old: Optional[WorkspaceNode] = None

    @property
    def kind(self) -> Optional[WorkspaceChange]:
        """Known change kind, or None for anything else."""
        try:
            return WorkspaceChange(self.change)
        except ValueError:
            return None

    @classmethod
    def from_ipc(cls, event: Any) -> "WorkspaceEvent":
        """Build from an i3ipc WorkspaceEvent."""
        return cls(
            change=event.change,
            current=WorkspaceNode.from_con(getattr(event, "current", None)),
            old=WorkspaceNode.from_con(getattr(event, "old", None)),
        )


class WidgetConfig(BaseModel):
    """Eww markup settings for the workspace strip.

    Defaults reproduce the stock `i3wm-workspaces` widget.
    """

    model_config = ConfigDict(extra="forbid")

    box_class: str = Field(default="i3wm-workspaces", description="Class of the outer box")
    orientation: str = Field(default="h", pattern=r"^(h|v|horizontal|vertical)$", description="Box orientation")
    spacing: int = Field(default=5, ge=0, description="Spacing between buttons (px)")
    space_evenly: bool = Field(default=False, description="Distribute buttons evenly")
    button_class_prefix: str = Field(default="i3wm-workspace-", description="Button class, visibility token appended")
    onclick_template: str = Field(
        default="i3-msg -t run_command workspace {key}",
        description="Command run on click; {key} is the workspace number",
    )
    placeholder_glyph: str = Field(default="\uf111", min_length=1, description="Label used when a name has no glyph")

    @field_validator("onclick_template")
    @classmethod
    def _template_has_key(cls, value: str) -> str:
        if "{key}" not in value:
            raise ValueError("onclick_template must contain '{key}'")
        try:
            value.format(key=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"onclick_template may only use the {{key}} field: {e!r}")
        return value
