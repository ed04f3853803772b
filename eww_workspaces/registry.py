"""Ordered registry of rendered workspace buttons."""

from typing import Dict, List


class WorkspaceRegistry:
    """Map of workspace key -> rendered button markup.

    Only workspaces believed to be on the strip's output are stored.
    Iteration is always in ascending key order.
    """

    def __init__(self) -> None:
        self._widgets: Dict[int, str] = {}

    def upsert(self, key: int, widget: str) -> None:
        self._widgets[key] = widget

    def remove(self, key: int) -> bool:
        """Remove a key. Returns True if it was present."""
        return self._widgets.pop(key, None) is not None

    def contains_key(self, key: int) -> bool:
        return key in self._widgets

    def keys(self) -> List[int]:
        return sorted(self._widgets)

    def render_all(self) -> List[str]:
        """Rendered widgets in ascending key order."""
        return [self._widgets[key] for key in sorted(self._widgets)]

    def __len__(self) -> int:
        return len(self._widgets)
