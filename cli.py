#!/usr/bin/env python3
"""
urlgrab CLI - extract URLs and emails from STDIN
"""
import argparse
import logging
import platform
import shlex
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from urlgrab import __version__
from urlgrab.actions import get_opener_args
from urlgrab.config import Config
from urlgrab.errors import UrlGrabError
from urlgrab.logging_config import setup_logging, get_logger
from urlgrab.models import Action, RunConfig, resolve_action
from urlgrab.pipeline import run

APP_NAME = "urlgrab"

logger = get_logger("cli")


def version() -> str:
    """Return the version line, e.g. ``urlgrab v0.1.3 linux/x86_64``."""
    return f"{APP_NAME} v{__version__} {platform.system().lower()}/{platform.machine().lower()}"


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Extract URLs from STDIN"
    )
    parser.add_argument("-c", "--copy", action="store_true", help="Copy to clipboard")
    parser.add_argument("-o", "--open", action="store_true", help="Open with the default browser")
    parser.add_argument("-d", "--dump", metavar="PATH", help="Dump all items to a file")
    parser.add_argument("-n", "--no-urls", action="store_true", help="Ignore URLs")
    parser.add_argument("-e", "--email", action="store_true", help="Extract emails")
    parser.add_argument("-E", "--regex", help="Custom regex search")
    parser.add_argument("-l", "--limit", type=non_negative_int, default=0, help="Limit number of items")
    parser.add_argument("--max-lines", type=non_negative_int, default=0, help="Read at most N input lines")
    parser.add_argument("-i", "--index", action="store_true", help="Add index to items found")
    parser.add_argument("--no-unique", action="store_true", help="Keep duplicate items")
    parser.add_argument("-a", "--args", dest="menu_args", default="", help="Args for the menu (not used with --dump)")
    parser.add_argument("-m", "--menu", help="Menu command (default: dmenu)")
    parser.add_argument("-p", "--prompt", help="Menu prompt")
    parser.add_argument("--config", type=Path, help="Settings file (default: ~/.config/urlgrab/config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument("-V", "--version", action="store_true", help="Output version information")
    return parser


def build_run_config(args: argparse.Namespace, settings: Config) -> RunConfig:
    """Combine parsed arguments and the settings file into one RunConfig."""
    action = resolve_action(copy=args.copy, open_=args.open, dump=bool(args.dump))

    if args.prompt:
        prompt = args.prompt
    elif action == Action.COPY:
        prompt = settings.prompts.copy
    elif action == Action.OPEN:
        prompt = settings.prompts.open
    else:
        prompt = settings.prompts.default

    return RunConfig(
        action=action,
        limit=args.limit,
        max_lines=args.max_lines,
        index=args.index,
        unique=not args.no_unique,
        urls=not args.no_urls,
        emails=args.email,
        custom_regex=args.regex or None,
        email_prefix=settings.email_prefix or "",
        dump_path=Path(args.dump) if args.dump else None,
        menu_command=args.menu or settings.menu.command,
        menu_arguments=tuple(settings.menu.arguments),
        menu_extra_arguments=tuple(shlex.split(args.menu_args)) if args.menu_args else (),
        prompt_flag=settings.menu.prompt_flag,
        prompt=prompt,
        opener=tuple(get_opener_args(settings.browser)),
        verbose=args.verbose,
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(version())
        return 0

    load_dotenv()

    try:
        settings = Config.load(args.config)
        setup_logging(
            logging.DEBUG if args.verbose else logging.WARNING,
            log_file=Path(settings.log_file) if settings.log_file else None,
        )
        config = build_run_config(args, settings)
        logger.debug("verbose mode: on")
        return run(config)
    except UrlGrabError as e:
        logger.debug("fatal: %s", e, exc_info=True)
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
