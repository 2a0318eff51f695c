"""
Configuration for the textfile service.

Values come from environment variables, optionally loaded from a `.env`
file in the working directory:

- TEXTFILE_ROOT: directory the HTTP service may read and write (default: cwd)
- TEXTFILE_WESTERN_MIN_CONFIDENCE: confidence needed to report cp1252 (0.99)
- TEXTFILE_DEFAULT_ENCODING: encoding for writes without one (utf-8)
- TEXTFILE_DEFAULT_NEWLINE: lf, crlf or cr (lf)
- TEXTFILE_DEFAULT_BOM: write a BOM by default (false)
- TEXTFILE_MAX_READ_BYTES: largest range served over HTTP (16 MiB)
- TEXTFILE_LOG_LEVEL: logging level (INFO)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .models import NewlineStyle, TextFileOptions
from .rules import DEFAULT_ENCODING, WESTERN_MIN_CONFIDENCE

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(default_factory=Path.cwd)
    western_min_confidence: float = Field(default=WESTERN_MIN_CONFIDENCE, ge=0.0, le=1.0)
    default_encoding: str = DEFAULT_ENCODING
    default_newline: NewlineStyle = NewlineStyle.LF
    default_bom: bool = False
    max_read_bytes: int = Field(default=16 * 1024 * 1024, gt=0)
    log_level: str = "INFO"

    def write_defaults(self) -> TextFileOptions:
        return TextFileOptions(
            encoding=self.default_encoding,
            newline_style=self.default_newline,
            has_bom=self.default_bom,
        )


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Build Settings from the environment; unset variables keep their defaults."""
    load_dotenv(env_file or Path.cwd() / ".env")

    values = {}
    root = os.getenv("TEXTFILE_ROOT")
    if root:
        values["root_dir"] = Path(root)
    confidence = os.getenv("TEXTFILE_WESTERN_MIN_CONFIDENCE")
    if confidence:
        values["western_min_confidence"] = float(confidence)
    encoding = os.getenv("TEXTFILE_DEFAULT_ENCODING")
    if encoding:
        values["default_encoding"] = encoding
    newline = os.getenv("TEXTFILE_DEFAULT_NEWLINE")
    if newline:
        values["default_newline"] = newline.strip().lower()
    bom = os.getenv("TEXTFILE_DEFAULT_BOM")
    if bom:
        values["default_bom"] = _env_bool(bom)
    max_read = os.getenv("TEXTFILE_MAX_READ_BYTES")
    if max_read:
        values["max_read_bytes"] = int(max_read)
    level = os.getenv("TEXTFILE_LOG_LEVEL")
    if level:
        values["log_level"] = level.strip().upper()

    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
