"""
Chooser integration: pipe items through dmenu (or any filter-style picker)
and capture the selected line.
"""
import subprocess
from typing import Sequence

from .errors import MenuError
from .logging_config import get_logger
from .models import RunConfig

logger = get_logger("menu")


class Menu:
    """Command and arguments of the external chooser."""

    def __init__(self, command: str, arguments: Sequence[str] = ()):
        self.command = command
        self.arguments = list(arguments)

    @classmethod
    def from_config(cls, config: RunConfig) -> "Menu":
        argv = config.menu_argv()
        return cls(argv[0], argv[1:])

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.arguments]

    def show(self, items: Sequence[str]) -> str:
        """
        Run the chooser over ``items`` and return the selected line.

        A non-zero exit (the user cancelled) yields an empty selection.

        Raises:
            MenuError: if the chooser cannot be started or its output read.
        """
        logger.debug("running menu: %s", self.argv)
        try:
            proc = subprocess.Popen(
                self.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise MenuError(f"error starting menu: {e}") from e

        try:
            output, _ = proc.communicate("\n".join(items))
        except (OSError, UnicodeDecodeError) as e:
            proc.kill()
            proc.wait()
            raise MenuError(f"error reading menu output: {e}") from e

        if proc.returncode != 0:
            logger.debug("menu exited with status %d", proc.returncode)
            return ""

        selected = (output or "").strip("\n")
        logger.debug("selected: %s", selected)
        return selected


def select_item(items: Sequence[str], config: RunConfig) -> str:
    """Show the configured chooser and return the selection, or ''."""
    selected = Menu.from_config(config).show(items)
    if not selected:
        logger.info("no item selected")
    return selected
