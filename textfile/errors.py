"""
Errors raised while reading or writing text files.

Filesystem errors that need no interpretation (FileNotFoundError and any
other OSError) are not wrapped; they reach the caller unmodified.
"""

from __future__ import annotations

from typing import Optional


class TextFileError(Exception):
    """Base class; `code` is stable and machine-readable."""

    code = "ETEXTFILE"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class IsDirectoryError(TextFileError):
    code = "EISDIR"


class OutOfRangeError(TextFileError):
    code = "EOUTOFRANGE"

    def __init__(self, message: str, path: Optional[str] = None, offset: Optional[int] = None):
        super().__init__(message, path)
        self.offset = offset


class ReadShortfallError(TextFileError):
    code = "ESHORTREAD"

    def __init__(self, message: str, path: Optional[str] = None, expected: int = 0, actual: int = 0):
        super().__init__(message, path)
        self.expected = expected
        self.actual = actual


class NotTextFileError(TextFileError):
    code = "ENOTTEXT"


class CloseError(TextFileError):
    code = "ECLOSE"


class UnknownEncodingError(TextFileError):
    code = "EENCODING"


class UnencodableTextError(TextFileError):
    code = "EUNENCODABLE"


def attach_close_error(exc: BaseException, close_error: CloseError) -> None:
    """Record a failed close on the error that was already propagating."""
    exc.close_error = close_error  # type: ignore[attr-defined]


def close_error_of(exc: BaseException) -> Optional[CloseError]:
    return getattr(exc, "close_error", None)
