"""CLI parser construction for taskpane."""

import argparse
from typing import Any, Iterable, Mapping


def build_parser(
    commands: Any,
    themes: Mapping[str, Any],
    default_theme: str,
    langs: Iterable[str] = ("en",),
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskpane",
        description="taskpane: terminal project/task manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--db", help="path to the SQLite database (default: config db_path or ~/.taskpane/local.db)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    parser.set_defaults(func=commands.cmd_tui, theme=default_theme)

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Start the TUI (default)")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="interface palette")
    tui_p.set_defaults(func=commands.cmd_tui)

    # list
    lp = sub.add_parser("list", help="Print projects and their tasks")
    lp.add_argument("--project", help="only this project (exact name)")
    lp.set_defaults(func=commands.cmd_list)

    # settings
    sp = sub.add_parser("settings", help="Save preferred theme and language")
    sp.add_argument("--theme", choices=list(themes.keys()), default=None, help="palette used by tui")
    sp.add_argument("--lang", choices=list(langs), default=None, help="interface language")
    sp.add_argument("--reset", action="store_true", help="forget saved theme and language first")
    sp.set_defaults(func=commands.cmd_settings)

    return parser
