"""Scanner modules for the registry and skill directories"""

from .activation import activation_advice, activation_label, assess_activation_style
from .frontmatter import Frontmatter, ParsedFrontmatter, parse_frontmatter
from .registry import RegistryScanner, plugin_display_name
from .skills import SkillScanner

__all__ = [
    "RegistryScanner",
    "SkillScanner",
    "parse_frontmatter",
    "Frontmatter",
    "ParsedFrontmatter",
    "plugin_display_name",
    "assess_activation_style",
    "activation_label",
    "activation_advice",
]
