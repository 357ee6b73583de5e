"""CLI: argparse and command dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_value, list_values, load_settings, set_value, unset_value
from .constants import OUTPUT_FORMATS, FORMAT_JSON
from .errors import CommitGraphError, HistoryParseError, InvalidHistoryWindowError
from .history import paginate, parse_rev_list
from .layout import layout
from .render import render_ascii, to_json

logger = logging.getLogger(__name__)


def _read_history(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_layout(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    try:
        text = _read_history(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e.strerror or e}")
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: history is not valid UTF-8: {e}")
        return 1
    try:
        commits = parse_rev_list(text)
    except HistoryParseError as e:
        print(f"Error: {e}")
        return 1

    limit = args.max_count if args.max_count is not None else settings.page_size
    try:
        window = paginate(commits, offset=args.offset, limit=limit)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    is_head = window.is_head and settings.head and not args.no_head
    logger.debug("window: offset %d, %d commits, head=%s", window.offset, len(window.commits), is_head)

    try:
        graph = layout(window.commits, is_head=is_head)
    except InvalidHistoryWindowError as e:
        print(f"Error: {e}")
        return 1

    fmt = args.format or settings.format
    if fmt == FORMAT_JSON:
        print(to_json(graph, indent=2))
    elif len(graph):
        abbrev = args.abbrev if args.abbrev is not None else settings.abbrev
        print(render_ascii(graph, abbrev=abbrev))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    get_ = getattr(args, "get", False)
    set_ = getattr(args, "config_set", False)
    unset_ = getattr(args, "unset", False)
    list_ = getattr(args, "list", False)
    count = sum([get_, set_, unset_, list_])
    if count != 1:
        print("Error: exactly one of --get, --set, --unset, --list required")
        return 1
    if get_:
        if not args.key:
            print("Error: --get requires <key>")
            return 1
        value = get_value(args.key, args.config)
        if value is None:
            return 1
        print(value)
    elif set_:
        if not args.key or args.value is None:
            print("Error: --set requires <key> <value>")
            return 1
        set_value(args.key, args.value, args.config)
    elif unset_:
        if not args.key:
            print("Error: --unset requires <key>")
            return 1
        if not unset_value(args.key, args.config):
            return 1
    else:
        for key, value in list_values(args.config):
            print(f"{key}={value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitgraph",
        description="Lay out commit history as a branch/merge graph (input: git rev-list --parents output).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    parser.add_argument("--config", default=None, help="Config file (default: $COMMITGRAPH_CONFIG or ~/.commitgraph.ini)")
    sub = parser.add_subparsers(dest="command", help="Commands")
    # layout
    p_layout = sub.add_parser("layout", help="Lay out history read from a file or stdin")
    p_layout.add_argument("file", nargs="?", default=None, help="rev-list --parents output (default: stdin)")
    p_layout.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (default: graph.format or ascii)")
    p_layout.add_argument("--no-head", action="store_true", help="First row is not the head of history (threads may continue above)")
    p_layout.add_argument("--offset", type=int, default=0, help="Skip this many commits (start of the window)")
    p_layout.add_argument("-n", "--max-count", type=int, default=None, help="Window size (default: graph.page-size, 0 = all)")
    p_layout.add_argument("--abbrev", type=int, default=None, help="Identifier length in ascii output")
    # config
    p_config = sub.add_parser("config", help="Read or write the config file")
    p_config.add_argument("--get", action="store_true", help="Get value for key")
    p_config.add_argument("--set", dest="config_set", action="store_true", help="Set key to value")
    p_config.add_argument("--unset", action="store_true", help="Unset key")
    p_config.add_argument("--list", action="store_true", help="List all key=value")
    p_config.add_argument("key", nargs="?", default=None, help="Config key (section.option)")
    p_config.add_argument("value", nargs="?", default=None, help="Value (for --set)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )
    handlers = {
        "layout": cmd_layout,
        "config": cmd_config,
    }
    handler = handlers.get(args.command)
    if not handler:
        parser.print_help()
        return 1
    try:
        return handler(args) or 0
    except CommitGraphError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
