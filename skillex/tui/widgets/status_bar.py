"""Status bar widget - one-row key help at the bottom of the screen."""

from typing import List, Tuple

from rich.text import Text
from textual.widgets import Static

from ...config import DEFAULT_CONFIG, Palette
from ..state import BrowserState, Focus, Phase


def help_entries(state: BrowserState) -> List[Tuple[str, str]]:
    """(key, description) pairs for the current state"""
    if state.phase is not Phase.READY:
        return [("q", "quit")]
    if state.filtering:
        return [("enter", "apply filter"), ("esc", "cancel"), ("ctrl+c", "quit")]
    if state.focus is Focus.VIEWER:
        return [("j/k", "scroll"), ("h", "back to list"), ("q", "quit")]
    return [("j/k", "navigate"), ("l", "read preview"), ("/", "filter"), ("q", "quit")]


class StatusBar(Static):
    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        width: 100%;
        height: 1;
        background: #303030;
        padding: 0 1;
    }
    """

    def __init__(self, *args, palette: Palette = DEFAULT_CONFIG.palette, **kwargs):
        super().__init__(*args, **kwargs)
        self.palette = palette

    def build_content(self, state: BrowserState) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        for n, (key, description) in enumerate(help_entries(state)):
            if n:
                text.append("  ", style=self.palette.help_text)
            text.append(key, style=self.palette.help_key)
            text.append(f" {description}", style=self.palette.help_text)
        return text

    def show(self, state: BrowserState) -> None:
        self.update(self.build_content(state))
