"""Splash widget - logo and spinner while skills load, or the load error."""

from typing import Optional

from rich.align import Align
from rich.console import Group, RenderableType
from rich.spinner import Spinner
from rich.text import Text
from textual.widget import Widget

from ...config import DEFAULT_CONFIG, Palette

LOGO = r"""
     _____ __ __ _____ __    __    _____ __ __
    |   __|  |  |     |  |  |  |  |   __|  |  |
    |__   |    -|-   -|  |__|  |__|   __|-   -|
    |_____|__|__|_____|_____|_____|_____|__|__|
"""

TAGLINE = "Claude Code skill explorer"


class Splash(Widget):
    """Full-screen loading and error view."""

    DEFAULT_CSS = """
    Splash {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, *args, palette: Palette = DEFAULT_CONFIG.palette, **kwargs):
        super().__init__(*args, **kwargs)
        self.palette = palette
        self.error_message: Optional[str] = None
        self._spinner = Spinner(
            "dots", text=Text(" Discovering skills...", style=palette.tagline),
            style=palette.logo,
        )

    def on_mount(self) -> None:
        self.auto_refresh = 1 / 12

    def show_error(self, message: str) -> None:
        self.error_message = message
        self.auto_refresh = None
        self.refresh()

    def build_content(self) -> RenderableType:
        if self.error_message is not None:
            return Text(f"\n  Error: {self.error_message}\n\n  Press q to quit.\n")

        content = Group(
            Align.center(Text(LOGO, style=self.palette.logo)),
            Align.center(Text(TAGLINE, style=self.palette.tagline)),
            Text(""),
            Align.center(self._spinner),
        )
        return Align.center(content, vertical="middle")

    def render(self) -> RenderableType:
        return self.build_content()
