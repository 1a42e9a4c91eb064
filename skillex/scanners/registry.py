"""Registry scanner - reads plugin install records from `installed_plugins.json`."""

import json
import logging
from pathlib import Path
from typing import List

from ..errors import RegistryError
from ..models import RegistryEntry

logger = logging.getLogger(__name__)


def plugin_display_name(plugin_key: str) -> str:
    """Short plugin name: the key up to its first `@` ("name@marketplace")."""
    name, _, _ = plugin_key.partition("@")
    return name


class RegistryScanner:
    """Load the first install record of every plugin in the registry file."""

    def __init__(self, plugins_file: Path):
        self.plugins_file = Path(plugins_file)

    def scan(self) -> List[RegistryEntry]:
        """Parse the registry file.

        Only the first install record of each plugin key is kept; later
        records for the same key are discarded.

        Raises:
            RegistryError: if the file can't be read or isn't a valid registry.
        """
        try:
            with open(self.plugins_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise RegistryError(f"reading plugins file: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RegistryError(f"parsing plugins file: {e}") from e

        if not isinstance(data, dict):
            raise RegistryError("parsing plugins file: expected a JSON object")

        plugins_data = data.get("plugins", {})
        if not isinstance(plugins_data, dict):
            raise RegistryError("parsing plugins file: 'plugins' must be an object")

        entries = []
        for plugin_key, plugin_entries in plugins_data.items():
            if not isinstance(plugin_entries, list):
                raise RegistryError(
                    f"parsing plugins file: install records for {plugin_key!r} must be a list"
                )
            if not plugin_entries:
                continue

            entry = self._parse_plugin_entry(plugin_key, plugin_entries[0])
            if len(plugin_entries) > 1:
                logger.debug(
                    "Ignoring %d extra install record(s) for %s",
                    len(plugin_entries) - 1,
                    plugin_key,
                )
            entries.append(entry)

        return entries

    def _parse_plugin_entry(self, plugin_key: str, entry: object) -> RegistryEntry:
        """Parse a single install record."""
        if not isinstance(entry, dict):
            raise RegistryError(
                f"parsing plugins file: install record for {plugin_key!r} must be an object"
            )

        install_path = entry.get("installPath") or ""
        if not isinstance(install_path, str):
            raise RegistryError(
                f"parsing plugins file: installPath for {plugin_key!r} must be a string"
            )

        version = entry.get("version") or ""

        return RegistryEntry(
            key=plugin_key,
            plugin=plugin_display_name(plugin_key),
            install_path=install_path,
            version=str(version),
        )
