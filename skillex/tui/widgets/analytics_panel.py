"""Analytics panel widget - activation style and description budget for a skill."""

from typing import Optional, Sequence

from rich.text import Text
from textual.widgets import Static

from ...config import DEFAULT_CONFIG, SkillexConfig
from ...layout import BudgetBand, BudgetStatus, assess_budget, bar_cells
from ...models import Skill
from ...scanners.activation import activation_advice
from .skill_list import activation_color, activation_tag

_LEGENDS = {
    BudgetBand.OVER: "Over limit, skills are being silently excluded",
    BudgetBand.APPROACHING: "Approaching limit, consider shortening descriptions",
    BudgetBand.WITHIN: "Within budget, all skill descriptions fit",
}


def budget_color(band: BudgetBand, config: SkillexConfig = DEFAULT_CONFIG) -> str:
    palette = config.palette
    if band is BudgetBand.OVER:
        return palette.over_budget
    if band is BudgetBand.APPROACHING:
        return palette.passive
    return palette.directive


def progress_bar(status: BudgetStatus, width: int, config: SkillexConfig = DEFAULT_CONFIG) -> Text:
    """Filled and empty blocks for the budget fraction, colored by band."""
    filled, empty = bar_cells(status.fraction, width)
    bar = Text()
    bar.append("█" * filled, style=budget_color(status.band, config))
    bar.append("░" * empty, style=config.palette.dim)
    return bar


def build_analytics(
    skill: Skill,
    budget: BudgetStatus,
    width: int,
    config: SkillexConfig = DEFAULT_CONFIG,
) -> Text:
    """Five lines: activation, description size, budget, bar, legend."""
    palette = config.palette
    label_width = config.layout.label_width
    indent = " " * label_width

    def label(name: str) -> Text:
        return Text(name.ljust(label_width), style=palette.label)

    text = Text(no_wrap=True, overflow="ellipsis")

    text.append_text(label("Activation"))
    text.append_text(activation_tag(skill.activation_style, palette))
    text.append(" - ", style=palette.dim)
    text.append(
        activation_advice(skill.activation_style),
        style=activation_color(skill.activation_style, palette),
    )
    text.append("\n")

    text.append_text(label("Description"))
    text.append(f"{skill.description_chars} chars\n")

    text.append_text(label("Budget"))
    text.append(f"{budget.total} / {budget.limit} chars\n")

    # label column plus " NNN%" suffix
    bar_width = max(width - label_width - 6, 10)
    text.append(indent)
    text.append_text(progress_bar(budget, bar_width, config))
    text.append(f" {budget.percent}%\n")

    band = budget.band
    legend_style = palette.dim if band is BudgetBand.WITHIN else budget_color(band, config)
    text.append(indent + _LEGENDS[band], style=legend_style)
    return text


class AnalyticsPanel(Static):
    """Skill Analytics panel above the SKILL.md viewer."""

    DEFAULT_CSS = """
    AnalyticsPanel {
        width: 100%;
        height: 8;
    }
    """

    def __init__(self, *args, config: SkillexConfig = DEFAULT_CONFIG, **kwargs):
        super().__init__(*args, **kwargs)
        self.settings = config

    def show(
        self,
        skill: Optional[Skill],
        skills: Sequence[Skill],
        width: int,
        budget: Optional[BudgetStatus] = None,
    ) -> None:
        if skill is None:
            self.update(Text("No skill selected.", style=self.settings.palette.label))
            return
        if budget is None:
            budget = assess_budget(skills, self.settings.budget_limit)
        self.update(build_analytics(skill, budget, width, self.settings))
