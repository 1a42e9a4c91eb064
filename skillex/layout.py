"""Pane geometry and description-budget accounting for the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .config import DEFAULT_CONFIG, DESC_BUDGET_LIMIT, LayoutConfig
from .models import Skill


@dataclass(frozen=True)
class PaneLayout:
    """Geometry derived from the terminal size.

    ``*_width``/``*_height`` are outer pane sizes including borders;
    ``*_content_*`` are the usable sizes inside borders and padding.
    """

    width: int
    height: int
    content_height: int
    list_width: int
    list_content_width: int
    list_content_height: int
    detail_width: int
    analytics_height: int
    analytics_content_width: int
    viewer_height: int
    viewer_content_width: int
    viewer_content_height: int
    render_width: int


def compute_layout(width: int, height: int, config: LayoutConfig = DEFAULT_CONFIG.layout) -> PaneLayout:
    """Split the terminal into the list pane and the detail column.

    The list gets a third of the width; the detail column gets the rest and
    stacks the analytics panel above the content viewer. One row is kept for
    the status bar. No returned dimension is negative, content widths never
    drop below ``min_content_width`` and the render width never drops below
    ``min_render_width``.
    """
    width = max(width, 0)
    height = max(height, 0)

    content_height = max(height - config.status_bar_rows, 0)
    list_width = width // 3
    detail_width = width - list_width

    list_content_width = _clamp_width(list_width - config.border_columns, config)
    detail_content_width = _clamp_width(detail_width - config.border_columns, config)
    list_content_height = max(content_height - config.border_rows, 0)

    analytics_height = min(config.analytics_rows, content_height)
    viewer_height = max(content_height - analytics_height, 0)
    viewer_content_height = max(viewer_height - config.border_rows, 0)

    render_width = max(
        detail_content_width - config.render_margin, config.min_render_width
    )

    return PaneLayout(
        width=width,
        height=height,
        content_height=content_height,
        list_width=list_width,
        list_content_width=list_content_width,
        list_content_height=list_content_height,
        detail_width=detail_width,
        analytics_height=analytics_height,
        analytics_content_width=detail_content_width,
        viewer_height=viewer_height,
        viewer_content_width=detail_content_width,
        viewer_content_height=viewer_content_height,
        render_width=render_width,
    )


def _clamp_width(value: int, config: LayoutConfig) -> int:
    return value if value >= config.min_content_width else config.min_content_width


class BudgetBand(Enum):
    WITHIN = "within"
    APPROACHING = "approaching"  # above 80% of the limit
    OVER = "over"


@dataclass(frozen=True)
class BudgetStatus:
    """Aggregate description size compared against the platform limit."""

    total: int
    limit: int

    @property
    def fraction(self) -> float:
        if self.limit <= 0:
            return 1.0
        return self.total / self.limit

    @property
    def percent(self) -> int:
        return int(self.fraction * 100)

    @property
    def band(self) -> BudgetBand:
        return budget_band(self.total, self.limit)


def total_description_chars(skills: Iterable[Skill]) -> int:
    """Sum of description lengths (in characters) across the catalog."""
    return sum(skill.description_chars for skill in skills)


def budget_band(total: int, limit: int) -> BudgetBand:
    if total >= limit:
        return BudgetBand.OVER
    if total > limit * 8 // 10:
        return BudgetBand.APPROACHING
    return BudgetBand.WITHIN


def assess_budget(skills: Iterable[Skill], limit: int = DESC_BUDGET_LIMIT) -> BudgetStatus:
    return BudgetStatus(total=total_description_chars(skills), limit=limit)


def bar_cells(fraction: float, width: int) -> Tuple[int, int]:
    """Split a bar of ``width`` cells into (filled, empty) for ``fraction``."""
    fraction = min(max(fraction, 0.0), 1.0)
    width = max(width, 0)
    filled = int(fraction * width)
    return filled, width - filled
