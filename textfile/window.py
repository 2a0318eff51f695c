from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .errors import NotTextFileError
from .rules import LF_BYTE, NUL_BYTE


class ByteWindow(BaseModel):
    """Raw bytes read from a file, with their offset in that file."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    start: int = Field(default=0, ge=0)

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def end(self) -> int:
        return self.start + len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data


def ensure_text(data: bytes, path: Optional[str] = None) -> None:
    """Reject content that contains a NUL byte."""
    if data.find(NUL_BYTE) >= 0:
        raise NotTextFileError(f'File "{path}" is not a text file.', path)


def trim_window(window: ByteWindow, trim_start: bool, trim_end: bool) -> ByteWindow:
    """
    Drop an incomplete first and/or last line.

    A line is complete when it ends with LF, so trimming the start skips
    past the first LF and trimming the end cuts right after the last one.
    Without an LF the window is returned unchanged. The bytes are copied
    only when something was actually cut.

    The scan is byte-level and only safe for encodings where 0x0A is always
    a line feed (UTF-8, 8-bit code pages, most legacy CJK encodings).
    """
    data = window.data
    start_pos = 0
    end_pos = len(data)

    if trim_start:
        pos = data.find(LF_BYTE)
        if pos >= 0:
            start_pos = pos + 1

    if trim_end:
        pos = data.rfind(LF_BYTE, start_pos)
        if pos >= 0:
            end_pos = pos + 1

    if start_pos == 0 and end_pos == len(data):
        return window

    return ByteWindow(data=data[start_pos:end_pos], start=window.start + start_pos)
