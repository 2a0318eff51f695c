from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from .models import NewlineStyle, TextFileOptions
from .normalize import denormalize_newlines, encode_text, resolve_write_encoding
from .rules import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_WRITE_OPTIONS = TextFileOptions(
    encoding=DEFAULT_ENCODING,
    newline_style=NewlineStyle.LF,
    has_bom=False,
)


def merge_options(
    options: Optional[TextFileOptions],
    defaults: TextFileOptions = DEFAULT_WRITE_OPTIONS,
) -> TextFileOptions:
    """
    Fill the fields missing from `options` with `defaults`.

    A field counts as given when it was set explicitly and is not None;
    an explicit has_bom=False is given and wins over a default of True.
    """
    if options is None:
        return defaults.model_copy()

    present = options.present_fields()
    return TextFileOptions(
        encoding=options.encoding if "encoding" in present else defaults.encoding,
        newline_style=options.newline_style if "newline_style" in present else defaults.newline_style,
        has_bom=options.has_bom if "has_bom" in present else defaults.has_bom,
    )


def write(
    path: PathLike,
    text: str,
    options: Optional[TextFileOptions] = None,
    *,
    defaults: TextFileOptions = DEFAULT_WRITE_OPTIONS,
) -> None:
    """
    Write LF-separated text to a file, replacing its content.

    The newline style, encoding and BOM come from `options`, completed by
    `defaults`. An ASCII encoding is written as UTF-8.
    """
    path = os.fspath(path)
    combined = merge_options(options, defaults)

    newline_style = combined.newline_style or NewlineStyle.LF
    text = denormalize_newlines(text, newline_style)

    encoding = resolve_write_encoding(combined.encoding)
    data = encode_text(text, encoding, combined.has_bom)

    Path(path).write_bytes(data)
    logger.info(
        f"Wrote {len(data)} bytes to {path} "
        f"(encoding={encoding}, newline={newline_style.value}, bom={combined.has_bom})"
    )


def write_lines(
    path: PathLike,
    lines: Sequence[str],
    options: Optional[TextFileOptions] = None,
    *,
    defaults: TextFileOptions = DEFAULT_WRITE_OPTIONS,
) -> None:
    """Write lines joined with LF, without a trailing separator."""
    write(path, "\n".join(lines), options, defaults=defaults)
