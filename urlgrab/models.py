"""
Data models for a single urlgrab run
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class Action(Enum):
    """Terminal action applied to the extracted items"""
    PRINT = "print"
    COPY = "copy"
    OPEN = "open"
    DUMP = "dump"


def resolve_action(copy: bool = False, open_: bool = False, dump: bool = False) -> Action:
    """Pick the single action for a run.

    Precedence when several flags are set: COPY, then OPEN, then DUMP,
    falling back to PRINT.
    """
    if copy:
        return Action.COPY
    if open_:
        return Action.OPEN
    if dump:
        return Action.DUMP
    return Action.PRINT


@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration built once from arguments and settings.

    ``limit`` caps the number of items kept after merging, ``max_lines`` caps
    the number of input lines read. Zero means unbounded for both.
    """
    action: Action = Action.PRINT
    limit: int = 0
    max_lines: int = 0
    index: bool = False
    unique: bool = True
    urls: bool = True
    emails: bool = False
    custom_regex: Optional[str] = None
    email_prefix: str = "mailto:"
    dump_path: Optional[Path] = None
    menu_command: str = "dmenu"
    menu_arguments: Tuple[str, ...] = ("-i", "-l", "10")
    menu_extra_arguments: Tuple[str, ...] = ()
    prompt_flag: str = "-p"
    prompt: str = "URLs>"
    opener: Tuple[str, ...] = ("xdg-open",)
    verbose: bool = False

    @property
    def line_cap(self) -> int:
        """Number of input lines to read, 0 for all.

        The item limit also caps lines read; the smaller non-zero cap wins.
        """
        caps = [c for c in (self.limit, self.max_lines) if c > 0]
        return min(caps) if caps else 0

    @property
    def interactive(self) -> bool:
        """Whether the chooser must run before dispatching.

        DUMP writes every item, so extra menu arguments never start the
        chooser for it.
        """
        if self.action in (Action.COPY, Action.OPEN):
            return True
        return self.action != Action.DUMP and bool(self.menu_extra_arguments)

    def menu_argv(self) -> list[str]:
        """Full chooser command line, prompt included."""
        argv = [self.menu_command, *self.menu_arguments, *self.menu_extra_arguments]
        if self.prompt_flag:
            argv.extend([self.prompt_flag, self.prompt])
        return argv
