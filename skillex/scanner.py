"""Discovery orchestrator - combines registry plugins and local skill directories"""

import logging
from pathlib import Path
from typing import Iterable, List

from .models import LocalSkillsDir, Skill
from .scanners import RegistryScanner, SkillScanner

logger = logging.getLogger(__name__)


class SkillDiscovery:
    """Finds every skill reachable from the plugin registry and local directories"""

    def __init__(self, plugins_file: Path, local_dirs: Iterable[LocalSkillsDir] = ()):
        self.plugins_file = Path(plugins_file)
        self.local_dirs = list(local_dirs)
        self.registry_scanner = RegistryScanner(self.plugins_file)

    def discover(self) -> List[Skill]:
        """
        Discover all skills.

        Registry plugins come first, then each local directory in the order
        given, labelled with that directory's name.

        Returns:
            Flat list of skills; empty when nothing was found.

        Raises:
            RegistryError: if the registry file can't be read or parsed.
        """
        entries = self.registry_scanner.scan()

        skills: List[Skill] = []
        for entry in entries:
            if not entry.install_path:
                logger.debug("Plugin %s has no install path", entry.key)
                continue
            skills.extend(SkillScanner(entry.skills_dir, entry.plugin).scan())

        for local_dir in self.local_dirs:
            skills.extend(SkillScanner(local_dir.path, local_dir.name).scan())

        logger.info(
            "Discovered %d skill(s) from %d plugin(s) and %d local dir(s)",
            len(skills),
            len(entries),
            len(self.local_dirs),
        )
        return skills


def discover(plugins_file: Path, local_dirs: Iterable[LocalSkillsDir] = ()) -> List[Skill]:
    """Discover skills from a registry file plus optional local directories."""
    return SkillDiscovery(plugins_file, local_dirs).discover()
