"""
Terminal actions applied to the extracted items.
"""
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

import pyperclip

from .errors import BrowserLaunchError, ClipboardError, DumpError
from .link_extractor import remove_index
from .logging_config import get_logger
from .models import Action, RunConfig

logger = get_logger("actions")

BROWSER_ENV_VAR = "URLGRAB_BROWSER"


def get_opener_args(browser: Optional[str] = None, platform: Optional[str] = None) -> list[str]:
    """Return the command used to open a URL with the default browser.

    $URLGRAB_BROWSER wins over ``browser`` (from settings), which wins over
    the platform default.
    """
    override = os.environ.get(BROWSER_ENV_VAR) or browser
    if override:
        return shlex.split(override)

    platform = platform or sys.platform
    if platform == "darwin":
        return ["open"]
    if platform.startswith("win"):
        return ["cmd", "/c", "start"]
    return ["xdg-open"]


def print_items(items: Sequence[str], out: Optional[TextIO] = None) -> None:
    """Write items to standard output, one per line."""
    out = out or sys.stdout
    for item in items:
        print(item, file=out)


def copy_item(item: str) -> None:
    """Copy the item to the system clipboard."""
    try:
        pyperclip.copy(item)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"error copying to clipboard: {e}") from e
    logger.info("text copied to clipboard: %s", item)


def open_item(item: str, opener: Sequence[str]) -> None:
    """Launch the opener on the item without waiting for it."""
    args = [*opener, item]
    logger.info("opening %s with %s", item, args)
    try:
        subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise BrowserLaunchError(f"error opening URL: {e}") from e


def dump_items(items: Sequence[str], path: Path) -> None:
    """Write every item to ``path``, one per line, replacing the file."""
    content = "".join(f"{item}\n" for item in items)
    try:
        Path(path).expanduser().write_text(content, encoding="utf-8")
    except OSError as e:
        raise DumpError(f"error writing dump file: {e}") from e
    logger.info("dumped %d items to %s", len(items), path)


def dispatch(selected: Optional[str], items: Sequence[str], config: RunConfig,
             out: Optional[TextIO] = None) -> None:
    """Apply the run's action.

    ``selected`` is the raw chooser line, index label included. DUMP ignores
    it and writes every extracted item.
    """
    if config.action == Action.DUMP:
        plain = [remove_index(i) for i in items] if config.index else list(items)
        dump_items(plain, config.dump_path)
        return

    if not selected:
        return

    item = remove_index(selected) if config.index else selected

    if config.action == Action.COPY:
        copy_item(item)
    elif config.action == Action.OPEN:
        open_item(item, config.opener)
    else:
        print_items([item], out)
