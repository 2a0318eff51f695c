"""
Byte range resolution for partial reads.

An (offset, length) request is resolved against the real file size:

- offset >= 0 counts from the head of the file. Requesting a start at or
  past the last byte is an error; the length is clipped to the file.
- offset < 0 counts from the tail: -n means "the last n bytes". The start
  is clamped to the first byte and the requested length is ignored, the
  range always runs to the end of the file.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .errors import OutOfRangeError


class ResolvedRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    length: int = Field(ge=0)
    total_length: int = Field(ge=0)

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    @property
    def at_file_start(self) -> bool:
        return self.start == 0

    @property
    def at_file_end(self) -> bool:
        return self.end == self.total_length


def resolve_range(
    offset: int,
    length: int,
    total_length: int,
    path: Optional[str] = None,
) -> ResolvedRange:
    if total_length == 0:
        return ResolvedRange(start=0, length=0, total_length=0)

    if offset < 0:
        start = max(0, total_length + offset)
        return ResolvedRange(start=start, length=total_length - start, total_length=total_length)

    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    if offset >= total_length - 1:
        raise OutOfRangeError(
            f"Out of file range, file: {path}, offset: {offset}, size: {total_length}",
            path,
            offset=offset,
        )

    return ResolvedRange(
        start=offset,
        length=min(length, total_length - offset),
        total_length=total_length,
    )
