"""Data models for discovered skills
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ActivationStyle(Enum):
    """How reliably a skill description triggers automatic invocation"""

    DIRECTIVE = "directive"  # imperative wording ("ALWAYS", "MUST")
    PASSIVE = "passive"  # descriptive wording ("Use when", "Helps")
    NEUTRAL = "neutral"  # no recognised signal words


@dataclass(frozen=True)
class Skill:
    """A single skill discovered from a `SKILL.md` file"""

    name: str
    description: str
    plugin: str  # registry plugin short name or local directory label
    file_path: Path
    content: str  # body after the header block
    raw_header: str = ""
    activation_style: ActivationStyle = ActivationStyle.NEUTRAL

    @property
    def description_chars(self) -> int:
        return len(self.description)

    @property
    def filter_value(self) -> str:
        """Text matched by the list filter"""
        return f"{self.name} {self.plugin}"


@dataclass(frozen=True)
class RegistryEntry:
    """First install record of a plugin in `installed_plugins.json`"""

    key: str  # e.g. "superpowers@claude-plugins-official"
    plugin: str  # display name, e.g. "superpowers"
    install_path: str
    version: str = ""

    @property
    def skills_dir(self) -> Path:
        return Path(self.install_path) / "skills"


@dataclass(frozen=True)
class LocalSkillsDir:
    """A non-plugin skills directory paired with its display label"""

    path: Path
    name: str
