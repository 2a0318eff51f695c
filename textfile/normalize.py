"""
Decoding, newline normalization and the inverse transform for writes.

Read side:
- decode with the detected encoding (UTF-8 when unknown); a partial window
  may cut through a multi-byte character, so bad sequences are replaced
- drop the BOM, it is never part of the text
- record the original newline style, then rewrite CRLF and CR to LF

Write side:
- rewrite LF to the requested style
- never commit to pure ASCII on disk, upgrade it to UTF-8
- emit a BOM only when asked to
"""

from __future__ import annotations

import codecs
from typing import Optional, Tuple

from .detect import detect_encoding, has_bom
from .errors import UnencodableTextError, UnknownEncodingError
from .models import NewlineStyle, TextFileOptions
from .rules import ASCII_ENCODING, BOM_CHAR, DEFAULT_ENCODING, WESTERN_MIN_CONFIDENCE

# Encodings whose byte order is only fixed by the BOM are written
# little-endian.
_ENDIAN_FREE = {
    "utf-16": "utf-16-le",
    "utf-32": "utf-32-le",
    "utf-8-sig": "utf-8",
}


def decode_bytes(data: bytes, encoding: Optional[str], bom: bool = False) -> str:
    text = data.decode(encoding or DEFAULT_ENCODING, errors="replace")
    if bom and text.startswith(BOM_CHAR):
        text = text[1:]
    return text


def detect_newline_style(text: str) -> Optional[NewlineStyle]:
    if "\r\n" in text:
        return NewlineStyle.CRLF
    if "\r" in text:
        return NewlineStyle.CR
    if "\n" in text:
        return NewlineStyle.LF
    return None


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def decode_window(
    data: bytes,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Tuple[str, TextFileOptions]:
    """Detect, decode and normalize a non-empty, already gated window."""
    encoding = detect_encoding(data, western_min_confidence)
    bom = has_bom(data, encoding)
    text = decode_bytes(data, encoding, bom)
    newline_style = detect_newline_style(text)
    options = TextFileOptions(encoding=encoding, newline_style=newline_style, has_bom=bom)
    return normalize_newlines(text), options


def denormalize_newlines(text: str, newline_style: NewlineStyle) -> str:
    if newline_style is NewlineStyle.LF:
        return text
    return text.replace("\n", newline_style.separator)


def resolve_write_encoding(encoding: Optional[str]) -> str:
    """Codec actually used on disk for the requested encoding name."""
    if not encoding:
        return DEFAULT_ENCODING
    try:
        name = codecs.lookup(encoding).name
    except LookupError:
        raise UnknownEncodingError(f"Unknown encoding: {encoding}")
    if name == ASCII_ENCODING:
        return DEFAULT_ENCODING
    return _ENDIAN_FREE.get(name, name)


def encode_text(text: str, encoding: str, add_bom: bool = False) -> bytes:
    if add_bom:
        text = BOM_CHAR + text
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as e:
        raise UnencodableTextError(
            f"Text cannot be encoded as {encoding}: {e.reason} at position {e.start}"
        )
