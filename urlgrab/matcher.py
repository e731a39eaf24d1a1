"""
Regex matchers that pull URL-like and email-like items out of a line of text.
"""

import re
from typing import Iterable

from .errors import InvalidPatternError
from .logging_config import get_logger
from .models import RunConfig

logger = get_logger("matcher")


URL_REGEX = r"(((http|https|gopher|gemini|ftp|ftps|git)://|www\.)[a-zA-Z0-9.]*[:;a-zA-Z0-9./+@$&%?$\#=_~-]*)"
EMAIL_REGEX = r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"


class PatternMatcher:
    """One compiled pattern plus the prefix prepended to every match."""

    def __init__(self, pattern: str, prefix: str = "", name: str = "custom"):
        try:
            self.pattern = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(f"invalid regex {pattern!r}: {e}") from e
        self.prefix = prefix or ""
        self.name = name

    def __repr__(self) -> str:
        return f"PatternMatcher({self.name!r}, {self.pattern.pattern!r}, prefix={self.prefix!r})"

    def find(self, line: str) -> list[str]:
        """
        Return the matches in ``line`` from first to last occurrence.

        Each match is cut at its first space and gets the prefix prepended.
        Empty matches are skipped.
        """
        items = []
        for match in self.pattern.finditer(line):
            item = match.group(0).split(" ")[0]
            if not item:
                continue
            items.append(f"{self.prefix}{item}")
        return items

    def scan(self, lines: Iterable[str]) -> list[str]:
        """Return every match across ``lines``, in line order."""
        items = []
        for line in lines:
            items.extend(self.find(line))
        logger.debug("%s matcher found %d items", self.name, len(items))
        return items


def url_matcher() -> PatternMatcher:
    return PatternMatcher(URL_REGEX, name="url")


def email_matcher(prefix: str = "mailto:") -> PatternMatcher:
    return PatternMatcher(EMAIL_REGEX, prefix=prefix, name="email")


def build_matchers(config: RunConfig) -> list[PatternMatcher]:
    """Build the matchers for a run, in registration order.

    A custom regex replaces the built-in URL and email matchers.
    """
    if config.custom_regex:
        return [PatternMatcher(config.custom_regex)]

    matchers = []
    if config.urls:
        matchers.append(url_matcher())
    if config.emails:
        matchers.append(email_matcher(config.email_prefix))
    return matchers
