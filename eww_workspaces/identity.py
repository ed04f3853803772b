"""Workspace identity resolution.

A workspace name is either a bare number ("3") or a number followed by a
`;` and a description whose non-ASCII characters are the display glyph
("3;web" followed by an icon). The parsed (key, label) pair is cached per window
manager container id and never recomputed, even if the workspace is later
renamed in place.
"""

import logging
import re
from typing import Dict, Optional, Tuple

from .errors import ParseError
from .models import WidgetConfig

logger = logging.getLogger(__name__)

SEPARATOR = ";"
PLACEHOLDER_GLYPH = WidgetConfig.model_fields["placeholder_glyph"].default

_KEY_PATTERN = re.compile(r"[0-9]+")

Identity = Tuple[int, str]


def parse_key(text: str, name: Optional[str] = None) -> int:
    """Parse a workspace number.

    Args:
        text: Text that must consist solely of ASCII digits
        name: Full workspace name, used in the error message

    Raises:
        ParseError: If text is not a non-negative integer
    """
    if not _KEY_PATTERN.fullmatch(text):
        raise ParseError(name if name is not None else text, "expected a non-negative integer")
    return int(text)


def strip_ascii(text: str) -> str:
    """Drop every ASCII character, keeping glyphs only."""
    return "".join(ch for ch in text if not ch.isascii())


def parse_workspace_name(name: str, placeholder: str = PLACEHOLDER_GLYPH) -> Identity:
    """Split a raw workspace name into (key, label).

    >>> parse_workspace_name("4")
    (4, '4')
    >>> parse_workspace_name("4;mail")[0]
    4
    """
    number, sep, rest = name.partition(SEPARATOR)
    if not sep:
        return parse_key(name), name

    key = parse_key(number, name)
    label = strip_ascii(rest)
    if not label:
        label = placeholder
    return key, label


class IdentityResolver:
    """Write-once cache of container id -> (key, label)."""

    def __init__(self, placeholder: str = PLACEHOLDER_GLYPH) -> None:
        self.placeholder = placeholder
        self._cache: Dict[int, Identity] = {}

    def resolve(self, workspace_id: int, name: str) -> Identity:
        """Return the cached identity for an id, parsing `name` on first sight.

        Once an id is cached, `name` is ignored.
        """
        cached = self._cache.get(workspace_id)
        if cached is not None:
            return cached

        identity = parse_workspace_name(name, self.placeholder)
        self._cache[workspace_id] = identity
        logger.debug(f"Resolved workspace id {workspace_id} ({name!r}) -> key={identity[0]} label={identity[1]!r}")
        return identity
