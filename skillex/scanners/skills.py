"""Skill scanner - builds `Skill` records from `SKILL.md` files."""

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import FrontmatterError
from ..models import Skill
from .activation import assess_activation_style
from .frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"


class SkillScanner:
    """Scan a skills directory; each immediate subdirectory is one skill."""

    def __init__(self, skills_dir: Path, plugin: str):
        self.skills_dir = Path(skills_dir)
        self.plugin = plugin

    def scan(self) -> List[Skill]:
        """Scan all skills in the skills directory.

        A missing or unlistable directory yields no skills. Subdirectories
        without a readable `SKILL.md`, or with a malformed header, are skipped.
        """
        try:
            skill_paths = sorted(self.skills_dir.iterdir())
        except OSError:
            logger.debug("Skills directory not readable: %s", self.skills_dir)
            return []

        skills = []
        for skill_path in skill_paths:
            try:
                if not skill_path.is_dir():
                    continue
            except OSError as e:
                logger.debug("Skipping %s: %s", skill_path, e)
                continue

            skill = self._scan_skill(skill_path)
            if skill:
                skills.append(skill)

        logger.debug(
            "Found %d skill(s) in %s (%s)", len(skills), self.skills_dir, self.plugin
        )
        return skills

    def _scan_skill(self, skill_path: Path) -> Optional[Skill]:
        """Scan a single skill directory."""
        skill_md = skill_path / SKILL_FILE
        try:
            content = skill_md.read_bytes()
        except OSError:
            return None

        try:
            parsed = parse_frontmatter(content)
        except FrontmatterError as e:
            logger.debug("Skipping %s: %s", skill_md, e)
            return None

        header = parsed.header
        return Skill(
            name=header.name or skill_path.name,
            description=header.description,
            plugin=self.plugin,
            file_path=skill_md.absolute(),
            content=parsed.body,
            raw_header=parsed.raw_header,
            activation_style=assess_activation_style(header.description),
        )
