"""Eww markup for the workspace strip.

Produces yuck literals of the form:

    (box :class 'i3wm-workspaces' :orientation 'h' :spacing 5 :space-evenly 'false'
      (button :class 'i3wm-workspace-focused' :onclick 'i3-msg -t run_command workspace 1' '1')
      ...)

Each line written is a complete replacement of the strip, meant to be fed to
an Eww `deflisten` variable and shown through `(literal :content ...)`.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from .errors import TransportError
from .models import VisibilityState, WidgetConfig

logger = logging.getLogger(__name__)

_LINE_BREAKS = str.maketrans("", "", "\r\n")


def _quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class Renderer:
    """Builds button and strip markup and writes strip lines."""

    def __init__(self, config: Optional[WidgetConfig] = None, stream: Optional[TextIO] = None) -> None:
        self.config = config or WidgetConfig()
        self.stream = stream
        self.lines_written = 0

    def render_button(self, key: int, label: str, state: VisibilityState) -> str:
        """Markup for one workspace button.

        UNKNOWN appends an empty token to the class prefix, giving an
        unstyled button.
        """
        css_class = f"{self.config.button_class_prefix}{state.value}"
        onclick = self.config.onclick_template.format(key=key)
        return f"(button :class {_quote(css_class)} :onclick {_quote(onclick)} {_quote(label)})"

    def render_strip(self, widgets: Iterable[str]) -> str:
        """Wrap buttons in the container box as a single line."""
        cfg = self.config
        header = (
            f"(box :class {_quote(cfg.box_class)}"
            f" :orientation {_quote(cfg.orientation)}"
            f" :spacing {cfg.spacing}"
            f" :space-evenly {_quote('true' if cfg.space_evenly else 'false')}"
        )
        body = " ".join(widgets)
        markup = f"{header} {body})" if body else f"{header})"
        return markup.translate(_LINE_BREAKS)

    def write(self, widgets: Iterable[str]) -> str:
        """Render the strip and write it as one flushed line.

        Raises:
            TransportError: If the output stream is closed (e.g. eww exited)
        """
        line = self.render_strip(widgets)
        stream = self.stream if self.stream is not None else sys.stdout
        try:
            print(line, file=stream, flush=True)
        except (OSError, ValueError) as e:
            raise TransportError(f"Failed to write strip to output: {e}") from e
        self.lines_written += 1
        logger.debug(f"Rendered strip #{self.lines_written}: {line}")
        return line
