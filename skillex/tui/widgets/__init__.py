"""TUI widgets for the skill catalog."""

from .analytics_panel import AnalyticsPanel
from .search_bar import SearchBar
from .skill_list import SkillItemRenderer, SkillList
from .splash import Splash
from .status_bar import StatusBar
from .viewer import SkillViewer

__all__ = [
    "AnalyticsPanel",
    "SearchBar",
    "SkillItemRenderer",
    "SkillList",
    "SkillViewer",
    "Splash",
    "StatusBar",
]
