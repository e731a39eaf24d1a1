"""
Exceptions raised by the extraction pipeline.

Every error here is fatal: the command line reports it on stderr and exits 1.
"""


class UrlGrabError(Exception):
    """Base class for all urlgrab failures."""


class InputReadError(UrlGrabError):
    """Standard input could not be read or decoded."""


class NoItemsFoundError(UrlGrabError):
    """No matcher produced a single item."""

    def __init__(self, message: str = "no items found"):
        super().__init__(message)


class InvalidPatternError(UrlGrabError):
    """A custom regular expression failed to compile."""


class MenuError(UrlGrabError):
    """The chooser process could not be started or read."""


class ClipboardError(UrlGrabError):
    """Writing to the system clipboard failed."""


class BrowserLaunchError(UrlGrabError):
    """The URL opener could not be launched."""


class DumpError(UrlGrabError):
    """Writing the dump file failed."""


class ConfigError(UrlGrabError):
    """The settings file could not be parsed."""
