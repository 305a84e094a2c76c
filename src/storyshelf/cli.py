"""Command-line interface entry point for storyshelf."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from storyshelf import __version__, pipelines
from storyshelf.errors import StoryshelfError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storyshelf", description="Storyshelf command-line interface"
    )
    parser.add_argument(
        "--version", action="version", version=__version__, help="Show the version"
    )
    subparsers = parser.add_subparsers(dest="command")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    shared.add_argument(
        "--content-dir",
        dest="content_dir",
        help="Directory containing story markdown files",
    )
    shared.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )

    list_parser = subparsers.add_parser(
        "list", parents=[shared], help="List visible stories, newest first"
    )
    list_parser.add_argument(
        "--json",
        dest="json",
        action="store_true",
        default=None,
        help="Print story records as JSON",
    )

    show = subparsers.add_parser("show", parents=[shared], help="Show one story")
    show.add_argument("filename", help="Story file name, e.g. my-story.md")
    show.add_argument(
        "--episode",
        dest="episode",
        type=int,
        help="Print only this episode (1-based)",
    )

    subparsers.add_parser(
        "init", parents=[shared], help="Create the config file and content directory"
    )
    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value for key, value in vars(namespace).items() if key != "command"
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help()
        return

    handlers: Mapping[str, Callable[[Mapping[str, Any]], int]] = {
        "list": pipelines.run_list,
        "show": pipelines.run_show,
        "init": pipelines.run_init,
    }

    try:
        exit_code = handlers[args.command](_normalize_cli_options(args))
    except StoryshelfError as exc:
        print(f"storyshelf: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"storyshelf: hint: {exc.hint}", file=sys.stderr)
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
