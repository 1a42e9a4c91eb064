"""Terminal UI for browsing discovered skills."""

from .app import SkillexApp

__all__ = ["SkillexApp"]
