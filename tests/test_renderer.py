"""Unit tests for Eww markup rendering."""

import io

import pytest

from eww_workspaces.errors import TransportError
from eww_workspaces.models import VisibilityState, WidgetConfig
from eww_workspaces.renderer import Renderer

BOX = "(box :class 'i3wm-workspaces' :orientation 'h' :spacing 5 :space-evenly 'false'"


class TestRenderButton:
    def test_focused_button(self, renderer):
        assert renderer.render_button(1, "1", VisibilityState.FOCUSED) == (
            "(button :class 'i3wm-workspace-focused' "
            ":onclick 'i3-msg -t run_command workspace 1' '1')"
        )

    def test_unknown_has_bare_prefix(self, renderer):
        markup = renderer.render_button(2, "★", VisibilityState.UNKNOWN)
        assert ":class 'i3wm-workspace-'" in markup
        assert markup.endswith("'★')")

    def test_quotes_are_escaped(self, renderer):
        markup = renderer.render_button(3, "it's", VisibilityState.HIDDEN)
        assert "'it\\'s'" in markup

    def test_custom_onclick(self):
        renderer = Renderer(WidgetConfig(onclick_template="swaymsg workspace number {key}"))
        markup = renderer.render_button(4, "4", VisibilityState.VISIBLE)
        assert ":onclick 'swaymsg workspace number 4'" in markup


class TestRenderStrip:
    def test_empty_strip(self, renderer):
        assert renderer.render_strip([]) == BOX + ")"

    def test_buttons_joined(self, renderer):
        assert renderer.render_strip(["(a)", "(b)"]) == BOX + " (a) (b))"

    def test_line_breaks_stripped(self, renderer):
        line = renderer.render_strip(["(a\n)", "(b\r\n)"])
        assert "\n" not in line and "\r" not in line

    def test_box_attributes_from_config(self):
        config = WidgetConfig(box_class="bar", orientation="v", spacing=0, space_evenly=True)
        line = Renderer(config).render_strip([])
        assert line == "(box :class 'bar' :orientation 'v' :spacing 0 :space-evenly 'true')"


class TestWrite:
    def test_writes_one_line(self):
        stream = io.StringIO()
        renderer = Renderer(stream=stream)
        line = renderer.write(["(a)"])
        assert stream.getvalue() == line + "\n"
        assert renderer.lines_written == 1

    def test_defaults_to_stdout(self, capsys):
        Renderer().write([])
        assert capsys.readouterr().out == BOX + ")\n"


class ClosedStream(io.StringIO):
    """Stream whose reader went away, like stdout after eww exits."""

    def write(self, text):
        raise BrokenPipeError(32, "Broken pipe")


class TestWriteFailure:
    def test_closed_stream_is_transport_error(self):
        renderer = Renderer(stream=ClosedStream())
        with pytest.raises(TransportError, match="Broken pipe"):
            renderer.write(["(a)"])
        assert renderer.lines_written == 0

    def test_closed_file_is_transport_error(self):
        stream = io.StringIO()
        stream.close()
        with pytest.raises(TransportError):
            Renderer(stream=stream).write([])
