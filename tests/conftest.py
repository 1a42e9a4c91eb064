"""Shared pytest fixtures for skillex tests."""

import json
from pathlib import Path
from typing import Callable, Dict, List

import pytest


@pytest.fixture
def mock_claude_home(tmp_path: Path) -> Path:
    """Create a mock ~/.claude directory structure."""
    claude_home = tmp_path / ".claude"
    claude_home.mkdir()

    (claude_home / "skills").mkdir()
    (claude_home / "plugins").mkdir()

    return claude_home


@pytest.fixture
def write_skill() -> Callable[..., Path]:
    """Write `<skills_dir>/<dirname>/SKILL.md` and return the skill directory."""

    def _write(skills_dir: Path, dirname: str, content: str) -> Path:
        skill_dir = skills_dir / dirname
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / "SKILL.md").write_text(content)
        return skill_dir

    return _write


@pytest.fixture
def write_registry(mock_claude_home: Path) -> Callable[[Dict[str, List[dict]]], Path]:
    """Write an `installed_plugins.json` with the given plugins mapping."""

    def _write(plugins: Dict[str, List[dict]]) -> Path:
        registry = mock_claude_home / "plugins" / "installed_plugins.json"
        registry.write_text(json.dumps({"version": 2, "plugins": plugins}, indent=2))
        return registry

    return _write


@pytest.fixture
def sample_skill_md() -> str:
    return """---
name: brainstorming
description: "Explores user intent before implementation."
---

# Brainstorming

Some content here.
"""
