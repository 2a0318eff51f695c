"""
Awaitable versions of the read and write operations.

Each call runs the synchronous operation in a worker thread, so the event
loop is never blocked on file I/O. Errors are raised exactly as by the
synchronous functions.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple

from . import reader, writer
from .models import TextFileOptions
from .reader import PathLike
from .rules import WESTERN_MIN_CONFIDENCE


async def read_full(
    path: PathLike,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    return await asyncio.to_thread(reader.read_full, path, western_min_confidence)


async def read_range(
    path: PathLike,
    offset: int,
    length: int,
    trim_start: bool = False,
    trim_end: bool = False,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    return await asyncio.to_thread(
        reader.read_range, path, offset, length, trim_start, trim_end, western_min_confidence
    )


async def read_head(
    path: PathLike,
    length: int,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    return await asyncio.to_thread(reader.read_head, path, length, western_min_confidence)


async def read_tail(
    path: PathLike,
    length: int,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    return await asyncio.to_thread(reader.read_tail, path, length, western_min_confidence)


async def read_lines(
    path: PathLike,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[Optional[List[str]], TextFileOptions]:
    return await asyncio.to_thread(reader.read_lines, path, western_min_confidence)


async def write(
    path: PathLike,
    text: str,
    options: Optional[TextFileOptions] = None,
    *,
    defaults: TextFileOptions = writer.DEFAULT_WRITE_OPTIONS,
) -> None:
    await asyncio.to_thread(writer.write, path, text, options, defaults=defaults)


async def write_lines(
    path: PathLike,
    lines: Sequence[str],
    options: Optional[TextFileOptions] = None,
    *,
    defaults: TextFileOptions = writer.DEFAULT_WRITE_OPTIONS,
) -> None:
    await asyncio.to_thread(writer.write_lines, path, lines, options, defaults=defaults)
