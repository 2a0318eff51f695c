from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class NewlineStyle(str, Enum):
    LF = "lf"
    CRLF = "crlf"
    CR = "cr"

    @property
    def separator(self) -> str:
        return _SEPARATORS[self]


_SEPARATORS = {
    NewlineStyle.LF: "\n",
    NewlineStyle.CRLF: "\r\n",
    NewlineStyle.CR: "\r",
}


class TextFileOptions(BaseModel):
    """
    Textual properties of a file.

    Returned by every read to describe what was found on disk, and passed to
    every write to describe what should be produced.

    - encoding: None when no encoding could be determined (UTF-8 implied).
    - newline_style: None when the content is empty or has no separator.
      Read results always carry LF-normalized text; this only records the
      original style.
    - has_bom: True when a UTF-8/UTF-16 byte order mark was found, or
      should be written.
    """

    encoding: Optional[str] = Field(default=None, examples=["utf-8"])
    newline_style: Optional[NewlineStyle] = Field(default=None, examples=["lf"])
    has_bom: bool = False

    def present_fields(self) -> set[str]:
        """Fields explicitly given with a usable value."""
        present = set()
        for name in self.model_fields_set:
            if name == "has_bom" or getattr(self, name) is not None:
                present.add(name)
        return present


class ReadResponse(BaseModel):
    text: str
    options: TextFileOptions


class LinesResponse(BaseModel):
    lines: Optional[List[str]] = None
    options: TextFileOptions


class WriteRequest(BaseModel):
    path: str
    text: str
    options: Optional[TextFileOptions] = None


class WriteLinesRequest(BaseModel):
    path: str
    lines: List[str] = Field(default_factory=list)
    options: Optional[TextFileOptions] = None


class WriteResponse(BaseModel):
    ok: bool = True
    path: str


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
