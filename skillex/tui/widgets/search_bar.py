"""Search bar widget - shows the list filter while it is being typed."""

from rich.text import Text
from textual.widgets import Static


class SearchBar(Static):
    """One-line readout of the list filter"""

    DEFAULT_CSS = """
    SearchBar {
        dock: top;
        width: 100%;
        height: 1;
    }
    """

    def build_content(self, query: str, filtering: bool) -> Text:
        text = Text()
        text.append("Filter: ", style="bold")
        text.append(query)
        if filtering:
            text.append("█", style="blink")
        else:
            text.append("  (esc to clear)", style="dim")
        return text

    def show(self, query: str, filtering: bool) -> None:
        """Show the filter, or hide the bar when no filter is active"""
        self.display = filtering or bool(query)
        self.update(self.build_content(query, filtering))
