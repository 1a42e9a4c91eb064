"""Skill list widget - the paged, filterable list pane."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from ...config import DEFAULT_CONFIG, Palette
from ...models import ActivationStyle, Skill
from ...scanners.activation import activation_label
from ..state import ListState


def activation_color(style: ActivationStyle, palette: Palette = DEFAULT_CONFIG.palette) -> str:
    if style is ActivationStyle.DIRECTIVE:
        return palette.directive
    if style is ActivationStyle.PASSIVE:
        return palette.passive
    return palette.neutral


def activation_tag(style: ActivationStyle, palette: Palette = DEFAULT_CONFIG.palette) -> Text:
    """Colored word indicating auto-activation reliability."""
    return Text(activation_label(style), style=activation_color(style, palette))


class SkillItemRenderer:
    """Draws one list entry: skill name, then plugin label and activation tag."""

    def __init__(self, palette: Palette = DEFAULT_CONFIG.palette):
        self.palette = palette

    def render(self, skill: Skill, is_selected: bool) -> Text:
        p = self.palette
        text = Text(no_wrap=True, overflow="ellipsis")
        if is_selected:
            text.append("> ", style=p.cursor)
            title_style, plugin_style = p.selected_title, p.selected_plugin
        else:
            text.append("  ")
            title_style, plugin_style = p.title, p.plugin

        text.append(skill.name, style=title_style)
        text.append("\n  ")
        text.append(skill.plugin, style=plugin_style)
        text.append(" ")
        text.append_text(activation_tag(skill.activation_style, p))
        return text


class SkillList(Static):
    """Shows the page of the list that holds the cursor."""

    DEFAULT_CSS = """
    SkillList {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, *args, item_renderer: Optional[SkillItemRenderer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.item_renderer = item_renderer or SkillItemRenderer()

    def build_page(self, list_state: ListState) -> Text:
        page = list_state.page()
        if not page:
            return Text("No matching skills.", style="dim italic")

        gap = "\n" * (1 + list_state.item_spacing)
        text = Text(no_wrap=True, overflow="ellipsis")
        for n, (position, skill) in enumerate(page):
            if n:
                text.append(gap)
            text.append_text(
                self.item_renderer.render(skill, position == list_state.cursor)
            )
        return text

    def show(self, list_state: ListState) -> None:
        self.update(self.build_page(list_state))
