"""
End-to-end run: read input, extract items, then print, dump or select and
dispatch.
"""
from typing import Optional, TextIO
import sys

from .actions import dispatch, print_items
from .input_buffer import read_lines
from .link_extractor import collect_items
from .logging_config import get_logger
from .menu import select_item
from .models import Action, RunConfig

logger = get_logger("pipeline")


def run(config: RunConfig, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Run the extraction pipeline once.

    Returns the process exit status. Failures propagate as UrlGrabError.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    lines = read_lines(stdin, config.line_cap)
    items = collect_items(lines, config)
    logger.debug("action=%s interactive=%s", config.action.value, config.interactive)

    if not config.interactive:
        if config.action == Action.DUMP:
            dispatch(None, items, config, out=stdout)
        else:
            print_items(items, stdout)
        return 0

    selected = select_item(items, config)
    if not selected:
        return 0

    dispatch(selected, items, config, out=stdout)
    return 0
