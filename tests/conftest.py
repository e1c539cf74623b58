"""Shared fixtures for agent_scaffold tests."""

from __future__ import annotations

import argparse
import importlib.util
import json
import sys
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Load the script as a module (not in a package).
# Register in sys.modules so all test files share the SAME instance.
# ---------------------------------------------------------------------------

_SCRIPT = Path(__file__).parent.parent / "scripts" / "agent_scaffold.py"

if "agent_scaffold" not in sys.modules:
    _spec = importlib.util.spec_from_file_location("agent_scaffold", _SCRIPT)
    _mod = importlib.util.module_from_spec(_spec)
    sys.modules["agent_scaffold"] = _mod
    _spec.loader.exec_module(_mod)

mod = sys.modules["agent_scaffold"]

BUNDLED_TEMPLATES = Path(__file__).parent.parent / "templates"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project(tmp_path):
    """An empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def templates(tmp_path, monkeypatch):
    """A small template tree with one profile per platform, patched in as TEMPLATES_DIR."""
    root = tmp_path / "templates"
    for platform in mod.PLATFORMS:
        write_profile(root, platform)

    write_template(root, "command", "review", "# Review\nReview the diff.\n")
    write_template(root, "command", "plan", "# Plan\nPlan the work.\n")
    write_template(root, "command", "_blank", "# {{NAME_TITLE}}\n/{{name}} runs {{NAME}}. {{OTHER}}\n")
    write_template(root, "rule", "base", "# Base\nBe careful.\n")
    write_template(root, "skill", "debug", "# Debug\nReproduce first.\n")
    write_template(root, "agent", "helper", "# Helper\nHelps.\n")

    monkeypatch.setattr(mod, "TEMPLATES_DIR", root)
    return root


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def write_profile(templates_dir: Path, identifier: str, **overrides: Any) -> dict[str, Any]:
    """Write templates/platforms/<platform>.json. Overrides of None drop the key."""
    data: dict[str, Any] = {
        "platform": identifier,
        "displayName": identifier.capitalize(),
        "installType": "full",
        "folderStructure": {
            "root": mod.PLATFORM_DIRS.get(identifier, f".{identifier}"),
            "commands": "commands",
            "rules": "rules",
            "skills": "skills",
            "agents": "agents",
        },
        "features": {
            "commands": True,
            "rules": True,
            "skills": True,
            "subagents": True,
        },
    }
    for key, value in overrides.items():
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
    path = templates_dir / "platforms" / f"{identifier}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")
    return data


def write_template(templates_dir: Path, category: str, name: str, content: str) -> Path:
    path = templates_dir / f"{category}s" / f"{name}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def make_args(**overrides: Any) -> argparse.Namespace:
    """Create an argparse.Namespace with sensible test defaults."""
    defaults: dict[str, Any] = {
        "target": None,
        "templates_dir": None,
        "dry_run": False,
        "verbose": False,
        "yes": True,
        "force": False,
        "command": "init",
    }
    defaults.update(overrides)
    return argparse.Namespace(**defaults)
