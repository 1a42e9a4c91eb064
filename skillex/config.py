"""Read-only configuration for skillex.

All tables here are frozen dataclasses built once at import time and passed by
reference to the layout calculator, the browser model and the widgets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .models import LocalSkillsDir

# Fallback character budget for all skill descriptions combined in the
# available-skills section of Claude Code's system prompt. Skills that don't
# fit are excluded without warning.
DESC_BUDGET_LIMIT = 16_000


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed pane geometry allowances."""

    status_bar_rows: int = 1
    border_columns: int = 4  # left/right border + left/right padding
    border_rows: int = 2  # top/bottom border
    analytics_inner_rows: int = 6
    min_content_width: int = 1
    render_margin: int = 2
    min_render_width: int = 20
    item_height: int = 2
    item_spacing: int = 1
    label_width: int = 13

    @property
    def analytics_rows(self) -> int:
        return self.analytics_inner_rows + self.border_rows


@dataclass(frozen=True)
class Palette:
    """Colors used across the catalog (Rich color names)."""

    focused_border: str = "color(62)"
    blurred_border: str = "color(240)"
    cursor: str = "bold color(62)"
    title: str = "color(252)"
    selected_title: str = "bold color(62)"
    plugin: str = "color(240)"
    selected_plugin: str = "color(243)"
    label: str = "bold color(243)"
    dim: str = "color(240)"
    directive: str = "color(35)"
    passive: str = "color(214)"
    neutral: str = "color(242)"
    over_budget: str = "color(196)"
    help_key: str = "bold color(252) on color(236)"
    help_text: str = "color(243) on color(236)"
    logo: str = "bold color(62)"
    tagline: str = "italic color(243)"


@dataclass(frozen=True)
class KeyMap:
    """Key names (as reported by Textual) for each browser action."""

    quit: Tuple[str, ...] = ("q", "ctrl+c")
    force_quit: Tuple[str, ...] = ("ctrl+c",)
    enter_detail: Tuple[str, ...] = ("l", "enter", "right")
    back: Tuple[str, ...] = ("h", "left", "escape")
    filter: Tuple[str, ...] = ("slash",)
    up: Tuple[str, ...] = ("up", "k")
    down: Tuple[str, ...] = ("down", "j")
    page_up: Tuple[str, ...] = ("pageup", "b")
    page_down: Tuple[str, ...] = ("pagedown", "f", "space")
    top: Tuple[str, ...] = ("home", "g")
    bottom: Tuple[str, ...] = ("end", "G", "shift+g")
    accept_filter: Tuple[str, ...] = ("enter",)
    cancel_filter: Tuple[str, ...] = ("escape",)
    delete_char: Tuple[str, ...] = ("backspace",)


@dataclass(frozen=True)
class SkillexConfig:
    """Top-level configuration bundle."""

    budget_limit: int = DESC_BUDGET_LIMIT
    code_theme: str = "monokai"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    palette: Palette = field(default_factory=Palette)
    keys: KeyMap = field(default_factory=KeyMap)


DEFAULT_CONFIG = SkillexConfig()


def default_plugins_file(home: Path) -> Path:
    """Location of Claude Code's plugin registry."""
    return home / ".claude" / "plugins" / "installed_plugins.json"


def default_local_dirs(home: Path, cwd: Optional[Path] = None) -> List[LocalSkillsDir]:
    """Collect the home-level and project-level skill directories that exist.

    The project directory is labelled with the working directory's name and is
    skipped when the working directory is the home directory itself.
    """
    local_dirs: List[LocalSkillsDir] = []

    home_skills = home / ".claude" / "skills"
    if home_skills.is_dir():
        local_dirs.append(LocalSkillsDir(path=home_skills, name="local"))

    if cwd is not None and cwd != home:
        project_skills = cwd / ".claude" / "skills"
        if project_skills.is_dir():
            local_dirs.append(LocalSkillsDir(path=project_skills, name=cwd.name))

    return local_dirs
