"""SKILL.md viewer widget."""

from rich.text import Text
from textual.widgets import Static

from ..state import ViewerState


class SkillViewer(Static):
    """Shows the visible window of the rendered SKILL.md."""

    DEFAULT_CSS = """
    SkillViewer {
        width: 100%;
        height: 1fr;
    }
    """

    def build_content(self, viewer: ViewerState) -> Text:
        return Text.from_ansi("\n".join(viewer.visible_lines()), no_wrap=True)

    def show(self, viewer: ViewerState) -> None:
        self.update(self.build_content(viewer))
