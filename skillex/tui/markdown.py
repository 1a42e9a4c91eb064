"""Markdown rendering for the SKILL.md viewer."""

import io

from rich.console import Console
from rich.markdown import Markdown

from ..models import Skill


class MarkdownRenderer:
    """Renders markdown to ANSI text wrapped at a fixed width.

    Building the console is the expensive part, so one renderer is kept per
    width and reused across skills.
    """

    def __init__(self, width: int, code_theme: str = "monokai"):
        if width < 1:
            raise ValueError(f"render width must be positive, got {width}")
        self.width = width
        self.code_theme = code_theme
        self._console = Console(
            file=io.StringIO(),
            width=width,
            force_terminal=True,
            color_system="256",
            highlight=False,
            legacy_windows=False,
        )

    def render(self, markdown: str) -> str:
        with self._console.capture() as capture:
            self._console.print(Markdown(markdown, code_theme=self.code_theme))
        return capture.get().rstrip("\n")


def render_frontmatter(raw_header: str) -> str:
    """Turn simple `key: value` header lines into bold markdown pairs.

    Nested lines, list items, block scalars and keys without an inline value
    are dropped.
    """
    if not raw_header:
        return ""

    lines = []
    for line in raw_header.split("\n"):
        if not line.strip() or line[0] in " \t":
            continue
        stripped = line.strip()
        if stripped.startswith(("-", "#")):
            continue

        key, sep, value = stripped.partition(":")
        key = key.strip()
        value = value.strip()
        if not sep or not key or not value:
            continue
        if value[0] in "|>[{":
            continue

        value = value.strip("\"'")
        lines.append(f"**{key}:** {value}\n\n")

    return "".join(lines)


def compose_markdown(skill: Skill) -> str:
    """Header block (when present) followed by the skill body."""
    header = render_frontmatter(skill.raw_header)
    if not header:
        return skill.content
    return f"---\n\n{header}---\n\n{skill.content}"
