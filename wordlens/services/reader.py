"""Upload reading with a time budget.

Reading the uploaded body is the only asynchronous step before analysis.
A read that exceeds the time budget is abandoned and surfaced as a
ReadTimeoutError; it is not retried.
"""

import asyncio
import logging
from pathlib import PurePath
from typing import Protocol

from ..engine import Document, ReadTimeoutError, UnsupportedFileTypeError, UploadTooLargeError

logger = logging.getLogger(__name__)

FILE_TYPES: dict[str, str] = {
    ".txt": "Plain Text",
    ".html": "HTML Document",
    ".htm": "HTML Document",
    ".md": "Markdown",
    ".markdown": "Markdown",
    ".rtf": "Rich Text Format",
    ".csv": "CSV Data",
    ".json": "JSON Data",
    ".xml": "XML Document",
    ".yml": "YAML Config",
    ".yaml": "YAML Config",
    ".log": "Log File",
    ".ini": "Config File",
    ".cfg": "Config File",
    ".conf": "Config File",
}


class UploadProtocol(Protocol):
    """Protocol for UploadFile-like objects."""

    filename: str | None

    async def read(self, size: int = -1) -> bytes: ...


def get_file_type(filename: str) -> str:
    """Human-readable type label for a file name."""
    return FILE_TYPES.get(PurePath(filename).suffix.lower(), "Text Document")


def safe_filename(filename: str | None) -> str:
    """Strip any directory part from a client-supplied file name."""
    name = PurePath((filename or "").replace("\\", "/")).name
    return name or "untitled.txt"


def decode_content(data: bytes) -> str:
    """Decode uploaded bytes (UTF-8, with a Windows-1252 fallback)."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("cp1252", errors="replace")


async def read_upload(
    upload: UploadProtocol,
    timeout: float,
    max_bytes: int,
    allowed_extensions: tuple[str, ...] | None = None,
) -> Document:
    """Read an uploaded file into a Document.

    Args:
        upload: The uploaded file.
        timeout: Seconds the read may take.
        max_bytes: Largest accepted body.
        allowed_extensions: Accepted suffixes (None accepts any).

    Returns:
        Document with the decoded content.

    Raises:
        UnsupportedFileTypeError: Extension not in ``allowed_extensions``.
        ReadTimeoutError: The read took longer than ``timeout``.
        UploadTooLargeError: The body is larger than ``max_bytes``.
    """
    filename = safe_filename(upload.filename)
    suffix = PurePath(filename).suffix.lower()
    if allowed_extensions is not None and suffix not in allowed_extensions:
        raise UnsupportedFileTypeError(
            f"File type not allowed. Supported: {', '.join(allowed_extensions)}"
        )

    try:
        data = await asyncio.wait_for(upload.read(max_bytes + 1), timeout=timeout)
    except TimeoutError:
        logger.warning(f"Upload read timed out after {timeout}s: {filename}")
        raise ReadTimeoutError(filename, timeout) from None

    if len(data) > max_bytes:
        raise UploadTooLargeError(
            f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
        )

    logger.info(f"Read upload '{filename}' ({len(data)} bytes, {get_file_type(filename)})")
    return Document(content=decode_content(data), filename=filename)
