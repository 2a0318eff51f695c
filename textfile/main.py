import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from . import aio
from .config import Settings, configure_logging, get_settings
from .errors import (
    IsDirectoryError,
    NotTextFileError,
    OutOfRangeError,
    TextFileError,
    UnencodableTextError,
    UnknownEncodingError,
)
from .models import (
    ErrorDetail,
    HealthResponse,
    LinesResponse,
    ReadResponse,
    WriteLinesRequest,
    WriteRequest,
    WriteResponse,
)

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="textfile",
    description="Encoding and newline aware text file reads and writes, whole or by byte range",
    version="0.1.0",
)

_STATUS_BY_ERROR = {
    IsDirectoryError: 422,
    OutOfRangeError: 416,
    NotTextFileError: 415,
    UnknownEncodingError: 422,
    UnencodableTextError: 422,
}


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    detail = ErrorDetail(code=code, message=message)
    return JSONResponse(status_code=status_code, content={"detail": detail.model_dump()})


@app.exception_handler(TextFileError)
async def text_file_error_handler(request: Request, exc: TextFileError):
    status_code = _STATUS_BY_ERROR.get(type(exc), 500)
    if status_code == 500:
        logger.error(f"{request.url.path}: {exc.code} {exc.message}")
    return _error_response(status_code, exc.code, exc.message)


@app.exception_handler(OSError)
async def os_error_handler(request: Request, exc: OSError):
    if isinstance(exc, FileNotFoundError):
        return _error_response(404, "ENOENT", "File not found")
    if isinstance(exc, IsADirectoryError):
        return _error_response(422, "EISDIR", "Can not read a directory")
    if isinstance(exc, PermissionError):
        return _error_response(403, "EACCES", "Permission denied")
    logger.error(f"{request.url.path}: {exc}")
    return _error_response(500, "EIO", str(exc))


def resolve_path(path: str, settings: Settings) -> Path:
    """Map a client path onto the configured root; escaping it is forbidden."""
    root = settings.root_dir.resolve()
    target = (root / path).resolve()
    if not target.is_relative_to(root):
        raise HTTPException(status_code=403, detail="Path is outside the served directory")
    return target


def _check_length(length: int, settings: Settings) -> None:
    if length > settings.max_read_bytes:
        raise HTTPException(
            status_code=422,
            detail=f"length must be <= {settings.max_read_bytes}",
        )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/files/text", response_model=ReadResponse)
async def read_text(path: str, settings: Settings = Depends(get_settings)):
    text, options = await aio.read_full(resolve_path(path, settings), settings.western_min_confidence)
    return ReadResponse(text=text, options=options)


@app.get("/files/range", response_model=ReadResponse)
async def read_range(
    path: str,
    offset: int,
    length: int = Query(0, ge=0),
    trim_start: bool = False,
    trim_end: bool = False,
    settings: Settings = Depends(get_settings),
):
    _check_length(abs(offset) if offset < 0 else length, settings)
    text, options = await aio.read_range(
        resolve_path(path, settings), offset, length, trim_start, trim_end,
        settings.western_min_confidence,
    )
    return ReadResponse(text=text, options=options)


@app.get("/files/head", response_model=ReadResponse)
async def read_head(path: str, length: int = Query(..., ge=0), settings: Settings = Depends(get_settings)):
    _check_length(length, settings)
    text, options = await aio.read_head(resolve_path(path, settings), length, settings.western_min_confidence)
    return ReadResponse(text=text, options=options)


@app.get("/files/tail", response_model=ReadResponse)
async def read_tail(path: str, length: int = Query(..., ge=0), settings: Settings = Depends(get_settings)):
    _check_length(length, settings)
    text, options = await aio.read_tail(resolve_path(path, settings), length, settings.western_min_confidence)
    return ReadResponse(text=text, options=options)


@app.get("/files/lines", response_model=LinesResponse)
async def read_lines(path: str, settings: Settings = Depends(get_settings)):
    lines, options = await aio.read_lines(resolve_path(path, settings), settings.western_min_confidence)
    return LinesResponse(lines=lines, options=options)


@app.put("/files/text", response_model=WriteResponse)
async def write_text(request: WriteRequest, settings: Settings = Depends(get_settings)):
    target = resolve_path(request.path, settings)
    await aio.write(target, request.text, request.options, defaults=settings.write_defaults())
    return WriteResponse(path=request.path)


@app.put("/files/lines", response_model=WriteResponse)
async def write_lines(request: WriteLinesRequest, settings: Settings = Depends(get_settings)):
    target = resolve_path(request.path, settings)
    await aio.write_lines(target, request.lines, request.options, defaults=settings.write_defaults())
    return WriteResponse(path=request.path)
