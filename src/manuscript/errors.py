"""Exceptions raised by the manuscript build.

Every error is fatal for the build: nothing in the pipeline recovers locally.
"""

from typing import Dict


class ManuscriptError(Exception):
    """Base class for all build errors."""


class NotFoundError(ManuscriptError):
    """An article directory or source file does not exist."""


class ParseError(ManuscriptError):
    """Front matter is malformed or lacks a required field."""


class RenderError(ManuscriptError):
    """The markdown transformation chain failed."""


class FeedWriteError(ManuscriptError, OSError):
    """A build artifact could not be written."""


class AggregateError(ManuscriptError):
    """One or more articles failed to assemble."""

    def __init__(self, errors: Dict[str, Exception]):
        self.errors = errors
        details = "; ".join(f"{slug}: {error}" for slug, error in errors.items())
        super().__init__(f"{len(errors)} article(s) failed to assemble: {details}")
