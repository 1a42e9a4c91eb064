"""Parse the YAML header block at the top of a `SKILL.md` file."""

import logging
from dataclasses import dataclass, field
from typing import Any, Union

import yaml

from ..errors import FrontmatterError

logger = logging.getLogger(__name__)

_DELIMITER = "---"


@dataclass(frozen=True)
class Frontmatter:
    """Header fields skillex cares about."""

    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class ParsedFrontmatter:
    header: Frontmatter = field(default_factory=Frontmatter)
    raw_header: str = ""
    body: str = ""


def parse_frontmatter(content: Union[bytes, str]) -> ParsedFrontmatter:
    """Split `SKILL.md` content into header fields, raw header text and body.

    The header is delimited by a leading ``---`` line and the next ``\\n---``.
    Content without an opening delimiter, or with an opening delimiter that is
    never closed, is returned as plain body with an empty header.

    Raises:
        FrontmatterError: if the header block is not a valid YAML mapping.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    trimmed = content.strip()
    first_line = trimmed.split("\n", 1)[0]
    if first_line.rstrip() != _DELIMITER:
        return ParsedFrontmatter(body=trimmed)

    after_open = trimmed[len(first_line):]
    close_idx = after_open.find(f"\n{_DELIMITER}")
    if close_idx == -1:
        return ParsedFrontmatter(body=trimmed)

    yaml_block = after_open[:close_idx]
    body = after_open[close_idx + 1 + len(_DELIMITER):]

    try:
        data = yaml.safe_load(yaml_block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"invalid YAML header: {e}") from e
    except (ValueError, TypeError, RecursionError) as e:
        # e.g. out-of-range timestamps such as 2024-13-45
        raise FrontmatterError(f"invalid header value: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"header must be a mapping, got {type(data).__name__}"
        )

    header = Frontmatter(
        name=_string_field(data, "name"),
        description=_string_field(data, "description"),
    )
    return ParsedFrontmatter(
        header=header, raw_header=yaml_block.strip(), body=body.strip()
    )


def _string_field(data: dict, key: str) -> str:
    value: Any = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        raise FrontmatterError(f"header field {key!r} must be a string")
    return str(value)
