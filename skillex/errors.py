"""Exception types raised by skill discovery."""


class SkillexError(Exception):
    """Base class for skillex errors."""


class DiscoveryError(SkillexError):
    """Raised when discovery cannot produce a catalog at all."""


class RegistryError(DiscoveryError):
    """Raised when the plugin registry file can't be read or parsed."""


class FrontmatterError(SkillexError):
    """Raised when a `SKILL.md` header block is structurally invalid."""
