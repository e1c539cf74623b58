#!/usr/bin/env python3
"""MCP server exposing agent-scaffold operations as structured tools."""

from __future__ import annotations

import argparse
import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any

SCRIPT_DIR = Path(__file__).resolve().parent.parent / "scripts"
sys.path.insert(0, str(SCRIPT_DIR))

import agent_scaffold as scaffold  # noqa: E402
from mcp.server.fastmcp import FastMCP  # noqa: E402

mcp = FastMCP(
    "agent-scaffold",
    instructions="Install and manage commands, rules, skills and agents for Cursor, Claude Code and Windsurf projects.",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_args(**kwargs: Any) -> argparse.Namespace:
    defaults = {
        "target": ".",
        "templates_dir": None,
        "dry_run": False,
        "verbose": False,
        "yes": True,
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


@contextmanager
def _capture_output():
    old_out, old_err = sys.stdout, sys.stderr
    sys.stdout = buf_out = io.StringIO()
    sys.stderr = buf_err = io.StringIO()
    try:
        yield buf_out, buf_err
    finally:
        sys.stdout, sys.stderr = old_out, old_err


def _run_cmd(fn, args: argparse.Namespace) -> dict[str, Any]:
    with _capture_output() as (out, err):
        try:
            fn(args)
        except SystemExit as e:
            return {
                "success": False,
                "error": err.getvalue().strip() or out.getvalue().strip() or f"exit code {e.code}",
            }
    return {
        "success": True,
        "output": out.getvalue().strip(),
    }


# ---------------------------------------------------------------------------
# Read-only tools
# ---------------------------------------------------------------------------


@mcp.tool()
def scaffold_detect(target: str = ".") -> dict[str, Any]:
    """Report which AI tool directories exist in a project.

    Args:
        target: Project directory to inspect.
    """
    result = scaffold.detect_platforms(Path(target).expanduser().resolve())
    return {
        "detected": result.detected,
        "suggested": result.suggested,
        "platforms": list(scaffold.PLATFORMS),
    }


@mcp.tool()
def scaffold_templates() -> dict[str, Any]:
    """List the bundled templates per component type and the platform profiles."""
    platforms: dict[str, Any] = {}
    for platform in scaffold.PLATFORMS:
        try:
            profile = scaffold.resolve_profile(platform)
        except scaffold.ScaffoldError as e:
            platforms[platform] = {"error": str(e)}
            continue
        platforms[platform] = {
            "display_name": profile.display_name,
            "install_type": profile.install_type,
            "root": profile.root,
            "folders": profile.folders,
            "features": profile.features,
            "rules_file": profile.rules_file,
        }
    return {
        "templates": {c: scaffold.list_templates(c) for c in scaffold.CATEGORIES},
        "platforms": platforms,
    }


@mcp.tool()
def scaffold_list(target: str = ".", type: str | None = None) -> dict[str, Any]:
    """List installed components for every AI tool detected in a project.

    Args:
        target: Project directory to inspect.
        type: Restrict to one component type (command, rule, skill, agent).
    """
    if type and type not in scaffold.CATEGORIES:
        return {"success": False, "error": f"invalid component type '{type}'"}
    target_dir = Path(target).expanduser().resolve()
    categories = [type] if type else list(scaffold.CATEGORIES)
    installed: dict[str, dict[str, list[str]]] = {}
    for platform in scaffold.detect_platforms(target_dir).detected:
        try:
            profile = scaffold.resolve_profile(platform)
        except scaffold.ScaffoldError as e:
            return {"success": False, "error": str(e)}
        installed[platform] = {
            c: scaffold.list_components(target_dir, profile, c) for c in categories
        }
    return {"success": True, "installed": installed}


@mcp.tool()
def scaffold_update_info() -> dict[str, Any]:
    """Return instructions for updating the tool and its installed templates."""
    return _run_cmd(scaffold.cmd_update, _mock_args())


# ---------------------------------------------------------------------------
# Mutating tools
# ---------------------------------------------------------------------------


@mcp.tool()
def scaffold_init(
    target: str = ".",
    tool: str | None = None,
    force: bool = False,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Install the template set for an AI tool into a project.

    Args:
        target: Project directory.
        tool: AI tool (cursor, claude, windsurf). Detected when omitted.
        force: Overwrite files that already exist.
        dry_run: Preview without writing.
    """
    args = _mock_args(target=target, tool=tool, force=force, dry_run=dry_run)
    return _run_cmd(scaffold.cmd_init, args)


@mcp.tool()
def scaffold_add(
    type: str,
    name: str,
    target: str = ".",
    tool: str | None = None,
    force: bool = False,
) -> dict[str, Any]:
    """Create a new component from its blank template.

    Args:
        type: Component type (command, rule, skill, agent).
        name: Component name, used as the filename (e.g. "deploy" -> deploy.md).
        target: Project directory.
        tool: AI tool (cursor, claude, windsurf). Detected when omitted.
        force: Overwrite the component if it already exists.
    """
    args = _mock_args(type=type, name=name, target=target, tool=tool, force=force)
    return _run_cmd(scaffold.cmd_add, args)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    mcp.run(transport="stdio")
