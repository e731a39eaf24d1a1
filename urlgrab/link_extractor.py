"""
Extraction coordinator: runs every matcher over the buffered input and merges
their results into the final item list.
"""

import asyncio
import re
from typing import Optional, Sequence

from .errors import NoItemsFoundError
from .logging_config import get_logger
from .matcher import PatternMatcher, build_matchers
from .models import RunConfig

logger = get_logger("link_extractor")

INDEX_LABEL_PATTERN = re.compile(r"^\[\d+\] ")


def unique_items(items: Sequence[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each item."""
    unique = list(dict.fromkeys(items))
    if len(unique) != len(items):
        logger.debug("dropped %d duplicate items", len(items) - len(unique))
    return unique


def limit_items(items: Sequence[str], limit: int) -> list[str]:
    """Keep at most ``limit`` items from the front. 0 keeps everything."""
    if limit and limit > 0:
        return list(items[:limit])
    return list(items)


def add_index(items: Sequence[str]) -> list[str]:
    """Label each item with its 1-based position as ``[n] item``."""
    return [f"[{i}] {item}" for i, item in enumerate(items, 1)]


def remove_index(item: str) -> str:
    """Strip a leading ``[n] `` label added by add_index."""
    return INDEX_LABEL_PATTERN.sub("", item, count=1)


class LinkExtractor:
    """Fan matchers out over the same lines and merge their results."""

    def __init__(self, config: RunConfig, matchers: Optional[list[PatternMatcher]] = None):
        self.config = config
        self.matchers = matchers if matchers is not None else build_matchers(config)

    async def _scan(self, matcher: PatternMatcher, lines: tuple[str, ...]) -> list[str]:
        return await asyncio.to_thread(matcher.scan, lines)

    async def extract(self, lines: Sequence[str]) -> list[str]:
        """
        Extract items from buffered lines.

        Matcher results are concatenated in registration order, then
        deduplicated, limited and indexed as configured.

        Args:
            lines: Buffered input lines

        Returns:
            Final list of items, never empty

        Raises:
            NoItemsFoundError: if nothing matched
        """
        shared = tuple(lines)
        logger.debug("running %d matchers over %d lines", len(self.matchers), len(shared))

        results = await asyncio.gather(*(self._scan(m, shared) for m in self.matchers))

        items: list[str] = []
        for found in results:
            items.extend(found)

        if self.config.unique:
            items = unique_items(items)

        items = limit_items(items, self.config.limit)

        if not items:
            raise NoItemsFoundError()

        if self.config.index:
            items = add_index(items)

        logger.info("extracted %d items", len(items))
        return items


def collect_items(lines: Sequence[str], config: RunConfig) -> list[str]:
    """
    Extract items from buffered lines using the matchers configured for a run.

    This is a convenience function that wraps LinkExtractor.extract.
    """
    return asyncio.run(LinkExtractor(config).extract(lines))
