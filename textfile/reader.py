"""
Reading text files, whole or partially.

Every read returns the LF-normalized text together with a TextFileOptions
describing what was found on disk (encoding, original newline style, BOM).

Partial reads work on a byte range of the file (see ranges.py) and drop
incomplete lines at the edges of that range on request, so a head or tail
never ends or starts in the middle of a line.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .errors import (
    CloseError,
    IsDirectoryError,
    ReadShortfallError,
    attach_close_error,
)
from .models import TextFileOptions
from .normalize import decode_window
from .ranges import ResolvedRange, resolve_range
from .rules import WESTERN_MIN_CONFIDENCE
from .window import ByteWindow, ensure_text, trim_window

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _empty_result() -> Tuple[str, TextFileOptions]:
    return "", TextFileOptions(encoding=None, newline_style=None, has_bom=False)


def _close(handle, path: str, failure: Optional[BaseException]) -> None:
    try:
        handle.close()
    except OSError as e:
        close_error = CloseError(f"Failed to close file {path}: {e}", path)
        if failure is None:
            raise close_error from e
        logger.warning(f"Failed to close {path} after an earlier error: {e}")
        attach_close_error(failure, close_error)


def read_window(path: PathLike, byte_range: ResolvedRange) -> ByteWindow:
    """Read exactly the bytes of `byte_range`; the handle is always closed."""
    path = os.fspath(path)
    handle = open(path, "rb")
    failure: Optional[BaseException] = None
    try:
        handle.seek(byte_range.start)
        data = handle.read(byte_range.length)
        if len(data) != byte_range.length:
            raise ReadShortfallError(
                f"Read file data error, file: {path}, expected {byte_range.length} bytes, got {len(data)}",
                path,
                expected=byte_range.length,
                actual=len(data),
            )
        return ByteWindow(data=data, start=byte_range.start)
    except BaseException as e:
        failure = e
        raise
    finally:
        _close(handle, path, failure)


def read_full(
    path: PathLike,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    """Read and decode a whole text file."""
    path = os.fspath(path)
    data = Path(path).read_bytes()

    ensure_text(data, path)

    if not data:
        return _empty_result()

    text, options = decode_window(data, western_min_confidence)
    logger.debug(f"Read {len(data)} bytes from {path}: {options.model_dump()}")
    return text, options


def read_range(
    path: PathLike,
    offset: int,
    length: int,
    trim_start: bool = False,
    trim_end: bool = False,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    """
    Read part of a text file.

    offset: first byte to read (included in the result).
      - offset >= 0 counts from the head of the file; a start at or past the
        last byte raises OutOfRangeError.
      - offset < 0 reads the last abs(offset) bytes, starting at the first
        byte when the file is shorter than that.
    length: maximum number of bytes; ignored for a negative offset, which
      always reads to the end of the file.
    trim_start: drop the first line when it may be incomplete.
    trim_end: drop the last line when it may be incomplete.

    No trimming happens at a real file boundary. Note that a range starting
    exactly at the beginning of a line still loses that line with
    trim_start, since the bytes before it are never looked at.
    """
    path = os.fspath(path)
    st = os.stat(path)
    if not stat.S_ISREG(st.st_mode):
        raise IsDirectoryError(f'Can not read a directory "{path}"', path)

    byte_range = resolve_range(offset, length, st.st_size, path)
    if byte_range.total_length == 0:
        return _empty_result()

    window = read_window(path, byte_range)
    ensure_text(window.data, path)

    if byte_range.at_file_start:
        trim_start = False
    if byte_range.at_file_end:
        trim_end = False

    window = trim_window(window, trim_start, trim_end)
    logger.debug(
        f"Range of {path}: requested offset={offset} length={length}, "
        f"read {byte_range.start}..{byte_range.end}, kept {window.start}..{window.end}"
    )
    if window.is_empty:
        return _empty_result()

    return decode_window(window.data, western_min_confidence)


def read_head(
    path: PathLike,
    length: int,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    """
    Read up to `length` bytes from the head of the file.

    An incomplete last line is dropped:

        line1\\n
        line6\\n   <- kept, including its LF
        lin       <- dropped
          ^------- length ends here
    """
    return read_range(path, 0, length, False, True, western_min_confidence)


def read_tail(
    path: PathLike,
    length: int,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    """
    Read up to the last `length` bytes of the file.

    An incomplete first line is dropped:

        V--------- tail starts here
        ne5\\n     <- dropped
        line6\\n
        end.
    """
    return read_range(path, -length, 0, True, False, western_min_confidence)


def read_lines(
    path: PathLike,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[Optional[List[str]], TextFileOptions]:
    """
    Read a text file as a list of lines.

    Returns (None, TextFileOptions()) when the file does not exist and an
    empty list when it is empty.
    """
    try:
        text, options = read_full(path, western_min_confidence)
    except FileNotFoundError:
        logger.debug(f"No such file {path}, returning no lines")
        return None, TextFileOptions()

    if text == "":
        return [], options

    return text.split("\n"), options
