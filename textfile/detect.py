"""
Encoding and byte order mark detection.

Rules:
- Detect encoding best-effort via charset-normalizer, one call per window.
- The Western single-byte code page is only trusted at near-certain
  confidence; short UTF-8 text is often mistaken for it.
- Pure ASCII is reported as UTF-8.
- BOMs are only looked for when the encoding is UTF-8 or UTF-16.
"""

from __future__ import annotations

import codecs
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from charset_normalizer import from_bytes

from .rules import (
    ASCII_ENCODING,
    DEFAULT_ENCODING,
    UTF8_BOM,
    UTF8_FAMILY,
    UTF16_BOMS,
    UTF16_FAMILY,
    WESTERN_ENCODING,
    WESTERN_MIN_CONFIDENCE,
)


class DetectedCharset(BaseModel):
    model_config = ConfigDict(frozen=True)

    encoding: Optional[str] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


def canonical_encoding(name: str) -> str:
    """Python's canonical codec name, e.g. 'UTF_8' -> 'utf-8'."""
    return codecs.lookup(name).name


def detect_charset(data: bytes) -> DetectedCharset:
    match = from_bytes(data).best()
    if match is None:
        return DetectedCharset()
    confidence = min(1.0, max(0.0, 1.0 - match.chaos))
    return DetectedCharset(encoding=canonical_encoding(match.encoding), confidence=confidence)


def choose_encoding(
    detected: DetectedCharset,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Optional[str]:
    if detected.encoding is None:
        return None

    encoding = canonical_encoding(detected.encoding)

    if encoding == WESTERN_ENCODING:
        if detected.confidence >= western_min_confidence:
            return encoding
        return None

    if encoding == ASCII_ENCODING:
        return DEFAULT_ENCODING

    return encoding


def detect_encoding(
    data: bytes,
    western_min_confidence: float = WESTERN_MIN_CONFIDENCE,
) -> Optional[str]:
    return choose_encoding(detect_charset(data), western_min_confidence)


def has_bom(data: bytes, encoding: Optional[str]) -> bool:
    if encoding is None:
        return False
    encoding = canonical_encoding(encoding)
    if encoding in UTF8_FAMILY:
        return data.startswith(UTF8_BOM)
    if encoding in UTF16_FAMILY:
        return data.startswith(UTF16_BOMS)
    return False
