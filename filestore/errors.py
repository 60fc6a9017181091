"""Exceptions raised by filestore."""

import logging
from contextlib import contextmanager

import fs as pyfs
import fs.errors


NOT_FOUND_TEXT = "The file requested was not found."


def _is_not_found(exc):
    return isinstance(exc, (FileNotFoundError, pyfs.errors.ResourceNotFound))


class StoreError(Exception):
    """Base class for all filestore errors."""


class IoFailure(StoreError):
    """A filesystem operation failed.

    Attributes:
        cause: The underlying ``OSError`` or ``fs.errors.FSError``.
        message: Short description of the action that failed.
    """

    def __init__(self, cause, message=""):
        super(IoFailure, self).__init__(cause, message)
        self.cause = cause
        self.message = message

    @property
    def not_found(self) -> bool:
        return _is_not_found(self.cause)

    @property
    def log_level(self) -> int:
        """Severity an external logger should use for this error."""
        return logging.DEBUG if self.not_found else logging.WARNING

    def describe(self) -> str:
        """Developer facing description, including the cause's details."""
        if self.message:
            return "{0}: {1!r}".format(self.message, self.cause)
        return repr(self.cause)

    def __str__(self):
        # End users never see raw OS text for a missing file.
        if self.not_found:
            return NOT_FOUND_TEXT
        if self.message:
            return "{0}: {1}".format(self.message, self.cause)
        return str(self.cause)

    def __repr__(self):
        return "{0}({1})".format(type(self).__name__, self.describe())


class NotFound(IoFailure):
    """The file behind an operation does not exist."""


@contextmanager
def wrap_errors(message):
    """Re-raise filesystem errors inside the block as :class:`IoFailure`
    (or :class:`NotFound`) tagged with `message`.
    """
    try:
        yield
    except (OSError, pyfs.errors.FSError) as exc:
        error_cls = NotFound if _is_not_found(exc) else IoFailure
        raise error_cls(exc, message) from exc
