#!/usr/bin/env python3
"""
taskpane: terminal project/task manager.

Projects, tasks and tags live in a local SQLite database; the TUI is the
primary interface, ``list`` prints the same sorted projections as plain text.
"""

import argparse
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from pathlib import Path

from config import get_db_path, get_log_dir, get_user_lang, get_user_theme, set_user_lang, set_user_theme
from core import StorageError, by_name
from application.workspace import Workspace
from infrastructure.sqlite_storage import SqliteStorage
from util.logging_setup import setup_logging

from .cli_parser import build_parser as build_cli_parser
from .constants import LANG_PACK
from .i18n import translate
from .tui_app import cmd_tui, TaskPaneTUI
from .tui_themes import THEMES, DEFAULT_THEME

__all__ = [
    "cmd_tui",
    "cmd_list",
    "cmd_settings",
    "TaskPaneTUI",
    "THEMES",
    "DEFAULT_THEME",
    "build_parser",
    "main",
]


def _db_path(args) -> Path:
    raw = getattr(args, "db", None)
    return Path(raw).expanduser() if raw else get_db_path()


def cmd_list(args) -> int:
    """Print every project (sorted by name) with its tasks and tags."""
    workspace = Workspace.load(SqliteStorage(_db_path(args)))
    try:
        store = workspace.store
        projects = sorted(store.projects.values(), key=by_name)
        wanted = getattr(args, "project", None)
        if wanted:
            projects = [p for p in projects if p.name == wanted]
            if not projects:
                print(f"project not found: {wanted}", file=sys.stderr)
                return 1
        if not projects:
            print(translate("EMPTY_PROJECTS"))
            return 0
        for project in projects:
            print(project.name)
            for task in sorted(store.project_tasks(project.id), key=by_name):
                tags = sorted(store.tag(tag_id).name for tag_id in task.tags)
                suffix = f"  [{', '.join(tags)}]" if tags else ""
                print(f"  * {task.name}{suffix}")
    finally:
        workspace.close()
    return 0


def cmd_settings(args) -> int:
    """Persist the chosen theme/language and print what is now in effect."""
    if args.reset:
        set_user_theme("")
        set_user_lang("")
    if args.theme:
        set_user_theme(args.theme)
    if args.lang:
        set_user_lang(args.lang)
    theme = get_user_theme()
    print(f"theme: {theme if theme in THEMES else DEFAULT_THEME}")
    print(f"lang: {get_user_lang() or 'en'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    theme = get_user_theme()
    default_theme = theme if theme in THEMES else DEFAULT_THEME
    parser = build_cli_parser(
        commands=sys.modules[__name__],
        themes=THEMES,
        default_theme=default_theme,
        langs=LANG_PACK.keys(),
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("taskpane"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    setup_logging(log_dir=get_log_dir(), level=args.log_level)
    try:
        return args.func(args)
    except StorageError as exc:
        print(translate("ERR_STORAGE", error=exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
