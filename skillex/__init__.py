"""skillex.

Discover Claude Code skills and browse them in a terminal catalog.
"""

__version__ = "0.3.0"

from .errors import DiscoveryError, FrontmatterError, RegistryError, SkillexError
from .models import ActivationStyle, LocalSkillsDir, RegistryEntry, Skill
from .scanner import SkillDiscovery, discover

__all__ = [
    "discover",
    "SkillDiscovery",
    "Skill",
    "ActivationStyle",
    "RegistryEntry",
    "LocalSkillsDir",
    "SkillexError",
    "DiscoveryError",
    "RegistryError",
    "FrontmatterError",
]
