"""
urlgrab - extract URLs and emails from standard input
"""
from .errors import (
    UrlGrabError, InputReadError, NoItemsFoundError, InvalidPatternError,
    MenuError, ClipboardError, BrowserLaunchError, DumpError, ConfigError,
)
from .models import Action, RunConfig, resolve_action
from .config import Config
from .matcher import PatternMatcher, build_matchers
from .input_buffer import read_lines
from .link_extractor import LinkExtractor, collect_items, unique_items, add_index, remove_index
from .menu import Menu, select_item
from .actions import dispatch
from .pipeline import run

__version__ = "0.1.3"

__all__ = [
    'UrlGrabError',
    'InputReadError',
    'NoItemsFoundError',
    'InvalidPatternError',
    'MenuError',
    'ClipboardError',
    'BrowserLaunchError',
    'DumpError',
    'ConfigError',
    'Action',
    'RunConfig',
    'resolve_action',
    'Config',
    'PatternMatcher',
    'build_matchers',
    'read_lines',
    'LinkExtractor',
    'collect_items',
    'unique_items',
    'add_index',
    'remove_index',
    'Menu',
    'select_item',
    'dispatch',
    'run',
]
