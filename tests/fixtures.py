"""
Shared test fixtures and helpers
"""
import io
from typing import List, Optional
from unittest.mock import MagicMock

from urlgrab.models import Action, RunConfig


def make_config(**overrides) -> RunConfig:
    """Create a RunConfig with test-friendly defaults"""
    values = dict(
        action=Action.PRINT,
        menu_command="dmenu",
        menu_arguments=("-i", "-l", "10"),
        opener=("xdg-open",),
    )
    values.update(overrides)
    return RunConfig(**values)


def make_stdin(lines: List[str]) -> io.StringIO:
    """Create a text stream holding the given lines"""
    return io.StringIO("".join(f"{line}\n" for line in lines))


class BrokenStream:
    """Text stream that fails while being read"""

    def __init__(self, error: Optional[Exception] = None, lines_before: int = 0,
                 template: str = "line {i}"):
        self.error = error or OSError("input/output error")
        self.lines_before = lines_before
        self.template = template

    def __iter__(self):
        for i in range(self.lines_before):
            yield self.template.format(i=i) + "\n"
        raise self.error


def create_mock_process(stdout: str = "", returncode: int = 0) -> MagicMock:
    """Create a mock Popen object for chooser tests"""
    proc = MagicMock()
    proc.communicate.return_value = (stdout, None)
    proc.returncode = returncode
    return proc


SAMPLE_LINES = [
    "Visit https://example.com for more info.",
    "Docs live at http://docs.example.org/guide?lang=en#intro",
    "Mail jane.doe@example.com or ops@example.org with questions.",
    "Nothing interesting here.",
    "Repo: git://github.com/user/repo.git and www.python.org",
]

SAMPLE_URLS = [
    "https://example.com",
    "http://docs.example.org/guide?lang=en#intro",
    "git://github.com/user/repo.git",
    "www.python.org",
]

SAMPLE_EMAILS = [
    "mailto:jane.doe@example.com",
    "mailto:ops@example.org",
]
