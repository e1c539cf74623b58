#!/usr/bin/env python3
"""Install and manage AI assistant commands, rules, skills and agents in a project."""

from __future__ import annotations

import argparse
import json
import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

try:
    import curses

    _HAS_CURSES = True
except ImportError:
    _HAS_CURSES = False

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Terminal colors (respects NO_COLOR and non-TTY)
# ---------------------------------------------------------------------------

_USE_COLOR = (
    sys.stdout.isatty()
    and os.environ.get("NO_COLOR") is None
    and os.environ.get("TERM") != "dumb"
)


def _ansi(code: str) -> str:
    return f"\033[{code}m" if _USE_COLOR else ""


class C:
    """ANSI escape sequences, empty strings when color is disabled."""
    RESET = _ansi("0")
    BOLD = _ansi("1")
    DIM = _ansi("2")
    RED = _ansi("31")
    GREEN = _ansi("32")
    YELLOW = _ansi("33")
    BLUE = _ansi("34")
    MAGENTA = _ansi("35")
    CYAN = _ansi("36")
    BOLD_RED = _ansi("1;31")
    BOLD_GREEN = _ansi("1;32")
    BOLD_YELLOW = _ansi("1;33")
    BOLD_CYAN = _ansi("1;36")


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEMPLATES_PACKAGE = "agent_scaffold_templates"


def find_templates_dir(module_file: Path) -> Path:
    """Source checkouts keep templates/ beside scripts/; installs ship them as a sibling package."""
    here = module_file.resolve().parent
    checkout = here.parent / "templates"
    if (checkout / "platforms").is_dir():
        return checkout
    return here / TEMPLATES_PACKAGE


TEMPLATES_DIR = find_templates_dir(Path(__file__))
PLATFORMS_SUBDIR = "platforms"
BLANK_TEMPLATE = "_blank"
RESERVED_PREFIX = "_"
TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")

CATEGORIES = ("command", "rule", "skill", "agent")

# Detection priority order; the first entry is the fallback suggestion.
PLATFORMS = ("cursor", "claude", "windsurf")
DEFAULT_PLATFORM = "cursor"

PLATFORM_DIRS: dict[str, str] = {
    "cursor": ".cursor",
    "claude": ".claude",
    "windsurf": ".windsurf",
}

PLATFORM_LABELS: dict[str, str] = {
    "cursor": "Cursor IDE",
    "claude": "Claude Code",
    "windsurf": "Windsurf",
}

# category -> key in the profile's folderStructure / features blocks
FOLDER_KEYS: dict[str, str] = {
    "command": "commands",
    "rule": "rules",
    "skill": "skills",
    "agent": "agents",
}
FEATURE_KEYS: dict[str, str] = {
    "command": "commands",
    "rule": "rules",
    "skill": "skills",
    "agent": "subagents",
}

INSTALL_TYPES = ("full", "reference")

RULES_FILE_TEMPLATE = (
    "# {display_name} Rules\n"
    "\n"
    "This file is auto-generated by agent-scaffold.\n"
    "Customize your project rules in {rules_dir}/\n"
)

DEFAULT_TEMPLATES: dict[str, str] = {
    "command": """---
description: Description of what the {{name}} command does
---

# {{NAME_TITLE}}

## Purpose

Describe the purpose of this command.

## Usage

```
/{{name}} [arguments]
```

## Workflow

1. First step
2. Second step
3. Third step

## Example

**Input**: `/{{name}} example`

**Output**: Expected result
""",
    "rule": """---
priority: medium
scope: project
---

# {{NAME_TITLE}}

## Description

Describe what this rule enforces.

## Guidelines

- Guideline 1
- Guideline 2
- Guideline 3

## Examples

### Good

```
Example of correct code
```

### Bad

```
Example of incorrect code
```
""",
    "skill": """---
name: {{name}}
description: Description of this skill
---

# {{NAME_TITLE}}

## Overview

Describe what this skill provides.

## Key Concepts

- Concept 1
- Concept 2
- Concept 3

## Best Practices

1. Practice 1
2. Practice 2
3. Practice 3

## Examples

Example usage and patterns.
""",
    "agent": """---
name: {{name}}
description: Description of this agent
tools: Read, Edit, Grep, Bash
---

# {{NAME_TITLE}}

## Purpose

Describe the purpose of this agent.

## Capabilities

- Capability 1
- Capability 2
- Capability 3

## When to Use

Use this agent when:
- Condition 1
- Condition 2
""",
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for configuration errors that abort a command."""


class ProfileNotFound(ScaffoldError):
    pass


class TemplateNotFound(ScaffoldError):
    pass


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlatformProfile:
    platform: str
    display_name: str
    install_type: str
    root: str
    folders: dict[str, str] = field(default_factory=dict)
    features: dict[str, bool] = field(default_factory=dict)
    rules_file: Optional[str] = None

    def subdir(self, category: str) -> str:
        return self.folders.get(category) or f"{category}s"

    def enabled(self, category: str) -> bool:
        return self.features.get(category, False)


@dataclass
class DetectionResult:
    detected: list[str]
    suggested: Optional[str]


@dataclass
class WriteOutcome:
    written: bool
    existed: bool


@dataclass
class ComponentResult:
    created: bool
    path: Path


# ---------------------------------------------------------------------------
# CLI setup
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-scaffold",
        description="Install commands, rules, skills and agents for AI coding assistants.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--target", default=".", metavar="DIR",
                        help="Project directory (default: current directory)")
    parser.add_argument("--templates-dir", metavar="DIR",
                        help="Use templates from DIR instead of the bundled set")
    parser.add_argument("--dry-run", action="store_true", help="Preview changes without writing")
    parser.add_argument("--verbose", action="store_true", help="Detailed output")
    parser.add_argument("--yes", action="store_true", help="Skip interactive prompts")

    sub = parser.add_subparsers(dest="command")

    init_p = sub.add_parser("init", help="Install the template set for an AI tool")
    init_p.add_argument("-t", "--tool", help=f"AI tool ({', '.join(PLATFORMS)})")
    init_p.add_argument("-f", "--force", action="store_true", help="Overwrite existing files")

    add_p = sub.add_parser("add", help="Add a new command, rule, skill or agent")
    add_p.add_argument("type", help=f"Component type ({', '.join(CATEGORIES)})")
    add_p.add_argument("name", help="Component name (used as filename)")
    add_p.add_argument("-t", "--tool", help=f"AI tool ({', '.join(PLATFORMS)})")
    add_p.add_argument("-f", "--force", action="store_true", help="Overwrite if it exists")

    list_p = sub.add_parser("list", help="List installed components")
    list_p.add_argument("-t", "--type", help=f"Filter by type ({', '.join(CATEGORIES)})")

    tpl_p = sub.add_parser("templates", help="List bundled templates and platforms")
    tpl_p.add_argument("-t", "--type", help=f"Filter by type ({', '.join(CATEGORIES)})")

    sub.add_parser("update", help="Show how to update installed templates")

    return parser


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def section_header(title: str) -> None:
    width = 50
    rule = "─" * max(1, width - len(title) - 5)
    print(f"\n{C.BOLD_CYAN}─── {title} {rule}{C.RESET}")


def summary_line(label: str, count: int, detail: str = "") -> None:
    extra = f"  {C.DIM}({detail}){C.RESET}" if detail else ""
    print(f"  {label:15s} {C.BOLD}{count}{C.RESET}{extra}")


def log(msg: str) -> None:
    print(f"  {msg}")


def log_verbose(msg: str, args: argparse.Namespace) -> None:
    if getattr(args, "verbose", False):
        print(f"  {C.DIM}[verbose] {msg}{C.RESET}")


def fail(msg: str) -> None:
    print(f"{C.BOLD_RED}Error:{C.RESET} {msg}")
    sys.exit(1)


def _curses_single_select(
    stdscr: Any,
    prompt: str,
    options: list[tuple[str, str]],
    default: Optional[str],
) -> Optional[str]:
    """Interactive single-select using curses. Called via curses.wrapper."""
    curses.curs_set(0)
    curses.use_default_colors()
    ids = [o for o, _ in options]
    cursor = ids.index(default) if default in ids else 0
    hint = "(↑↓ navigate, Enter confirm, q cancel)"

    while True:
        stdscr.clear()
        max_y, max_x = stdscr.getmaxyx()
        stdscr.addnstr(0, 0, prompt, max_x - 1)
        stdscr.addnstr(1, 0, hint, max_x - 1)

        for i, (_, label) in enumerate(options):
            if i + 3 >= max_y:
                break
            prefix = ">" if i == cursor else " "
            stdscr.addnstr(i + 3, 0, f"  {prefix} {label}", max_x - 1)

        stdscr.refresh()
        key = stdscr.getch()

        if key == curses.KEY_UP and cursor > 0:
            cursor -= 1
        elif key == curses.KEY_DOWN and cursor < len(options) - 1:
            cursor += 1
        elif key in (curses.KEY_ENTER, 10, 13):
            return options[cursor][0]
        elif key == ord("q") or key == 27:
            return None


def _fallback_single_select(
    prompt: str,
    options: list[tuple[str, str]],
    default: Optional[str],
) -> Optional[str]:
    """Numbered input fallback for non-TTY environments."""
    print(f"\n{prompt}")
    for i, (oid, label) in enumerate(options, 1):
        marker = "*" if oid == default else " "
        print(f"  {i}. [{marker}] {label}")
    if default:
        print(f"\n  (* = detected/suggested, press Enter to accept)")
    try:
        raw = input("\n  Select a number (or 'q' to cancel): ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    if not raw:
        return default
    if raw.isdigit():
        idx = int(raw) - 1
        if 0 <= idx < len(options):
            return options[idx][0]
    return None


def single_select(
    prompt: str,
    options: list[tuple[str, str]],
    default: Optional[str] = None,
    auto_accept: bool = False,
) -> Optional[str]:
    """Single-select with fallback chain: auto_accept -> curses -> numbered input.

    Returns None when the user cancels."""
    if not options:
        return None

    if auto_accept:
        choice = default or options[0][0]
        label = next((lbl for o, lbl in options if o == choice), choice)
        print(f"\n{prompt}")
        print(f"  {C.DIM}[auto]{C.RESET} {label}")
        return choice

    if _HAS_CURSES and sys.stdin.isatty() and sys.stdout.isatty():
        try:
            return curses.wrapper(_curses_single_select, prompt, options, default)
        except KeyboardInterrupt:
            return None
        except curses.error:
            pass

    return _fallback_single_select(prompt, options, default)


# ---------------------------------------------------------------------------
# Guarded writes
# ---------------------------------------------------------------------------


def ensure_dir(path: Path, args: argparse.Namespace) -> None:
    if getattr(args, "dry_run", False):
        if not path.exists():
            log_verbose(f"{C.MAGENTA}[dry-run]{C.RESET} Would create {path}/", args)
        return
    path.mkdir(parents=True, exist_ok=True)


def write_file_guarded(path: Path, content: str, args: argparse.Namespace) -> WriteOutcome:
    """Write content unless the file exists and args.force is unset."""
    existed = path.exists()
    if existed and not getattr(args, "force", False):
        log_verbose(f"{path} {C.DIM}(exists, skipped){C.RESET}", args)
        return WriteOutcome(written=False, existed=True)
    if getattr(args, "dry_run", False):
        log_verbose(f"{C.MAGENTA}[dry-run]{C.RESET} Would write {path} ({len(content)} bytes)", args)
        return WriteOutcome(written=True, existed=existed)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    verb = "Overwrote" if existed else "Wrote"
    log_verbose(f"{C.GREEN}{verb}{C.RESET} {path}", args)
    return WriteOutcome(written=True, existed=existed)


# ---------------------------------------------------------------------------
# Platform profiles
# ---------------------------------------------------------------------------


def _profile_path(identifier: str) -> Path:
    return TEMPLATES_DIR / PLATFORMS_SUBDIR / f"{identifier}.json"


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] in (None, ""):
        raise ProfileNotFound(f"{where}: missing required field '{key}'")
    return data[key]


def parse_profile(data: Any, identifier: str) -> PlatformProfile:
    """Build a PlatformProfile from a decoded profile definition."""
    where = f"platform '{identifier}'"
    if not isinstance(data, dict):
        raise ProfileNotFound(f"{where}: definition must be a JSON object")

    platform = _require(data, "platform", where)
    if platform != identifier:
        raise ProfileNotFound(f"{where}: definition declares platform '{platform}'")
    display_name = _require(data, "displayName", where)
    install_type = _require(data, "installType", where)
    if install_type not in INSTALL_TYPES:
        raise ProfileNotFound(f"{where}: unknown installType '{install_type}'")

    structure = _require(data, "folderStructure", where)
    features = _require(data, "features", where)
    if not isinstance(structure, dict) or not isinstance(features, dict):
        raise ProfileNotFound(f"{where}: folderStructure and features must be objects")

    root = _require(structure, "root", f"{where} folderStructure")
    folders = {
        cat: str(_require(structure, key, f"{where} folderStructure"))
        for cat, key in FOLDER_KEYS.items()
    }
    flags: dict[str, bool] = {}
    for cat, key in FEATURE_KEYS.items():
        value = _require(features, key, f"{where} features")
        if not isinstance(value, bool):
            raise ProfileNotFound(f"{where}: feature '{key}' must be true or false")
        flags[cat] = value

    rules_file = data.get("rulesFile") or None
    return PlatformProfile(
        platform=platform,
        display_name=str(display_name),
        install_type=install_type,
        root=str(root),
        folders=folders,
        features=flags,
        rules_file=rules_file,
    )


def resolve_profile(identifier: str) -> PlatformProfile:
    if identifier not in PLATFORMS:
        raise ProfileNotFound(
            f"unknown platform '{identifier}'. Options: {', '.join(PLATFORMS)}"
        )
    path = _profile_path(identifier)
    if not path.is_file():
        raise ProfileNotFound(f"no profile definition for '{identifier}' at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProfileNotFound(f"{path}: invalid JSON ({e})") from e
    return parse_profile(data, identifier)


def platform_description(platform: str) -> str:
    label = PLATFORM_LABELS.get(platform, platform)
    root = PLATFORM_DIRS.get(platform)
    return f"{label} ({root}/)" if root else label


# ---------------------------------------------------------------------------
# Template assets
# ---------------------------------------------------------------------------


def _category_dir(category: str) -> Path:
    if category not in CATEGORIES:
        raise TemplateNotFound(
            f"unknown component type '{category}'. Options: {', '.join(CATEGORIES)}"
        )
    return TEMPLATES_DIR / f"{category}s"


def list_templates(category: str) -> list[str]:
    """Template names for a category in lexical order, reserved names excluded."""
    templates_dir = _category_dir(category)
    if not templates_dir.is_dir():
        return []
    return sorted(
        f.stem for f in templates_dir.glob("*.md")
        if f.is_file() and not f.name.startswith(RESERVED_PREFIX)
    )


def load_template(category: str, name: str) -> str:
    path = _category_dir(category) / f"{name}.md"
    if not path.is_file():
        raise TemplateNotFound(f"no {category} template named '{name}'")
    return path.read_text(encoding="utf-8")


def load_blank_template(category: str) -> str:
    path = _category_dir(category) / f"{BLANK_TEMPLATE}.md"
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return DEFAULT_TEMPLATES[category]


def template_variables(name: str) -> dict[str, str]:
    return {
        "NAME": name,
        "name": name.lower(),
        "NAME_TITLE": name[:1].upper() + name[1:],
    }


def render_template(content: str, variables: dict[str, str]) -> str:
    """Replace each {{KEY}} token; unknown tokens are left as they are."""
    return TOKEN_RE.sub(lambda m: variables.get(m.group(1), m.group(0)), content)


def rules_file_content(profile: PlatformProfile) -> str:
    return RULES_FILE_TEMPLATE.format(
        display_name=profile.display_name,
        rules_dir=f"{profile.root}/{profile.subdir('rule')}",
    )


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


def detect_platforms(target_dir: Path) -> DetectionResult:
    detected = [p for p in PLATFORMS if (target_dir / PLATFORM_DIRS[p]).exists()]
    if len(detected) == 1:
        suggested: Optional[str] = detected[0]
    elif not detected:
        suggested = DEFAULT_PLATFORM
    else:
        suggested = None
    return DetectionResult(detected=detected, suggested=suggested)


def pick_platform(result: DetectionResult) -> str:
    """Single platform for commands that cannot prompt."""
    if result.suggested:
        return result.suggested
    return result.detected[0] if result.detected else DEFAULT_PLATFORM


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


def materialize(target_dir: Path, profile: PlatformProfile,
                args: argparse.Namespace) -> list[str]:
    """Create the profile's tree and copy every enabled template into it.

    Returns paths relative to target_dir, in creation order. The root is always
    the first entry, whether or not it existed before."""
    root_dir = target_dir / profile.root
    for category in CATEGORIES:
        ensure_dir(root_dir / profile.subdir(category), args)
    created = [profile.root]

    for category in CATEGORIES:
        if not profile.enabled(category):
            log_verbose(f"{category}s disabled for {profile.display_name}, skipping", args)
            continue
        subdir = profile.subdir(category)
        for name in list_templates(category):
            content = load_template(category, name)
            outcome = write_file_guarded(root_dir / subdir / f"{name}.md", content, args)
            if outcome.written:
                created.append(f"{profile.root}/{subdir}/{name}.md")

    if profile.rules_file:
        outcome = write_file_guarded(
            target_dir / profile.rules_file, rules_file_content(profile), args
        )
        if outcome.written:
            created.append(profile.rules_file)

    return created


# ---------------------------------------------------------------------------
# Component creator
# ---------------------------------------------------------------------------


def create_component(target_dir: Path, profile: PlatformProfile, category: str,
                     name: str, args: argparse.Namespace) -> ComponentResult:
    component_dir = target_dir / profile.root / profile.subdir(category)
    path = component_dir / f"{name}.md"

    if path.exists() and not getattr(args, "force", False):
        return ComponentResult(created=False, path=path)

    content = render_template(load_blank_template(category), template_variables(name))
    ensure_dir(component_dir, args)
    write_file_guarded(path, content, args)
    return ComponentResult(created=True, path=path)


def list_components(target_dir: Path, profile: PlatformProfile, category: str) -> list[str]:
    component_dir = target_dir / profile.root / profile.subdir(category)
    if not component_dir.is_dir():
        return []
    return sorted(f.stem for f in component_dir.glob("*.md") if f.is_file())


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _target(args: argparse.Namespace) -> Path:
    return Path(getattr(args, "target", None) or ".").expanduser().resolve()


def _check_tool(tool: Optional[str]) -> None:
    if tool and tool not in PLATFORMS:
        fail(f"invalid AI tool '{tool}'. Valid tools: {', '.join(PLATFORMS)}")


def _check_type(category: Optional[str]) -> None:
    if category and category not in CATEGORIES:
        fail(f"invalid component type '{category}'. Valid types: {', '.join(CATEGORIES)}")


def _check_name(name: str) -> None:
    if not name or name.startswith(".") or "/" in name or "\\" in name:
        fail(f"invalid component name '{name}': use a plain file name")


def _check_root(target: Path, profile: PlatformProfile) -> None:
    root = target / profile.root
    if root.exists() and not root.is_dir():
        fail(f"{root} exists and is not a directory")


def cmd_init(args: argparse.Namespace) -> None:
    print(f"\n{C.BOLD_CYAN}=== Agent Scaffold Installer ==={C.RESET}")
    target = _target(args)
    tool = args.tool
    _check_tool(tool)

    if not tool:
        result = detect_platforms(target)
        if result.detected:
            log(f"Detected: {', '.join(C.CYAN + d + C.RESET for d in result.detected)}")
        tool = single_select(
            "Select AI tool to install for:",
            [(p, platform_description(p)) for p in PLATFORMS],
            default=pick_platform(result),
            auto_accept=args.yes,
        )
        if not tool:
            print(f"  {C.YELLOW}Installation cancelled{C.RESET}")
            return

    log(f"Installing for: {C.CYAN}{platform_description(tool)}{C.RESET}")
    try:
        profile = resolve_profile(tool)
        _check_root(target, profile)
        created = materialize(target, profile, args)
    except ScaffoldError as e:
        fail(str(e))

    section_header(f"Created ({len(created)})")
    for item in created:
        print(f"  {C.GREEN}+{C.RESET} {item}")

    section_header("Summary")
    written = len(created) - 1
    summary_line(profile.display_name, written, "files written")
    dry = f" {C.MAGENTA}(dry-run){C.RESET}" if getattr(args, "dry_run", False) else ""
    print(f"\n{C.BOLD_GREEN}Done!{C.RESET} Installed into {target / profile.root}{dry}")
    print(f"\n{C.BOLD}Next steps:{C.RESET}")
    print(f"  {C.DIM}1. Restart your AI coding assistant{C.RESET}")
    print(f"  {C.DIM}2. Customize rules in {profile.root}/{profile.subdir('rule')}/{C.RESET}")
    print(f"  {C.DIM}3. Add your own with: agent-scaffold add command my-command{C.RESET}")
    print()


def cmd_add(args: argparse.Namespace) -> None:
    category, name = args.type, args.name
    _check_type(category)
    _check_name(name)
    _check_tool(args.tool)
    target = _target(args)

    tool = args.tool or pick_platform(detect_platforms(target))
    log(f"Using: {C.CYAN}{platform_description(tool)}{C.RESET}")

    try:
        profile = resolve_profile(tool)
        _check_root(target, profile)
        result = create_component(target, profile, category, name, args)
    except ScaffoldError as e:
        fail(str(e))

    if not result.created:
        log(f"{C.YELLOW}{category} '{name}' already exists{C.RESET} {C.DIM}({result.path}){C.RESET}")
        log(f"{C.DIM}Use --force to overwrite{C.RESET}")
        return

    dry = f" {C.MAGENTA}(dry-run){C.RESET}" if getattr(args, "dry_run", False) else ""
    log(f"{C.GREEN}Created{C.RESET} {category} '{name}'{dry}")
    log(f"File: {C.CYAN}{result.path}{C.RESET}")
    log(f"{C.DIM}Edit the file to customize your component.{C.RESET}")


def cmd_list(args: argparse.Namespace) -> None:
    category = getattr(args, "type", None)
    _check_type(category)
    target = _target(args)

    detected = detect_platforms(target).detected
    if not detected:
        print(f"  {C.BOLD_YELLOW}Warning:{C.RESET} no AI tool detected. Run 'agent-scaffold init' first.")
        return

    categories = [category] if category else list(CATEGORIES)
    for platform in detected:
        try:
            profile = resolve_profile(platform)
        except ScaffoldError as e:
            fail(str(e))
        section_header(platform_description(platform))
        total = 0
        for cat in categories:
            names = list_components(target, profile, cat)
            if not names:
                continue
            total += len(names)
            print(f"\n  {C.YELLOW}{cat.capitalize()}s ({len(names)}){C.RESET}")
            for n in names:
                print(f"    {C.DIM}•{C.RESET} {n}")
        if not total:
            print(f"  {C.DIM}(none){C.RESET}")
    print()


def cmd_templates(args: argparse.Namespace) -> None:
    category = getattr(args, "type", None)
    _check_type(category)

    section_header("Platforms")
    for platform in PLATFORMS:
        try:
            profile = resolve_profile(platform)
        except ScaffoldError as e:
            print(f"  {C.BOLD}{platform:10s}{C.RESET} {C.RED}{e}{C.RESET}")
            continue
        enabled = ", ".join(c for c in CATEGORIES if profile.enabled(c))
        print(f"  {C.BOLD}{platform:10s}{C.RESET} {profile.root:12s} "
              f"{C.DIM}[{profile.install_type}]{C.RESET}  {enabled}")

    for cat in [category] if category else CATEGORIES:
        names = list_templates(cat)
        section_header(f"{cat.capitalize()} templates ({len(names)})")
        if names:
            for n in names:
                print(f"  {n}")
        else:
            print(f"  {C.DIM}(none){C.RESET}")
    print()


def cmd_update(args: argparse.Namespace) -> None:
    section_header("Update")
    print(f"  {C.BOLD}To update agent-scaffold:{C.RESET}\n")
    print(f"  {C.DIM}# Upgrade the tool{C.RESET}")
    print("  pip install --upgrade agent-scaffold\n")
    print(f"  {C.DIM}# Then re-install the templates in your project{C.RESET}")
    print("  agent-scaffold init --force\n")
    log(f"{C.BOLD_YELLOW}Note:{C.RESET} --force overwrites installed templates, "
        "including any local edits to them.")
    print()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


COMMANDS: dict[str, Any] = {
    "init": cmd_init,
    "add": cmd_add,
    "list": cmd_list,
    "templates": cmd_templates,
    "update": cmd_update,
}


def main(argv: Optional[list[str]] = None) -> None:
    global TEMPLATES_DIR
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.templates_dir:
        TEMPLATES_DIR = Path(args.templates_dir).expanduser().resolve()

    COMMANDS[args.command](args)


if __name__ == "__main__":
    main()
