"""
Tests for Upload Reading
========================
Time-budgeted reads, size and extension checks, decoding and file names.
"""

import asyncio

import pytest

from wordlens.config import DEFAULT_ALLOWED_EXTENSIONS
from wordlens.engine.errors import (
    ReadTimeoutError,
    UnsupportedFileTypeError,
    UploadTooLargeError,
)
from wordlens.services.reader import get_file_type, read_upload, safe_filename


class FakeUpload:
    """UploadFile stand-in with an optional read delay."""

    def __init__(self, filename: str | None, data: bytes, delay: float = 0.0):
        self.filename = filename
        self._data = data
        self._delay = delay

    async def read(self, size: int = -1) -> bytes:
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._data if size < 0 else self._data[:size]


class TestReadUpload:
    async def test_reads_document(self):
        upload = FakeUpload("notes.txt", "Respect matters".encode())
        document = await read_upload(upload, timeout=1.0, max_bytes=1024)

        assert document.content == "Respect matters"
        assert document.filename == "notes.txt"

    async def test_timeout(self):
        upload = FakeUpload("slow.txt", b"late", delay=1.0)
        with pytest.raises(ReadTimeoutError, match="timed out") as exc_info:
            await read_upload(upload, timeout=0.05, max_bytes=1024)
        assert exc_info.value.status_code == 408

    async def test_too_large(self):
        upload = FakeUpload("big.txt", b"x" * 11)
        with pytest.raises(UploadTooLargeError):
            await read_upload(upload, timeout=1.0, max_bytes=10)

    async def test_exact_limit_accepted(self):
        upload = FakeUpload("fits.txt", b"x" * 10)
        document = await read_upload(upload, timeout=1.0, max_bytes=10)
        assert len(document.content) == 10

    async def test_unsupported_extension(self):
        upload = FakeUpload("photo.png", b"\x89PNG")
        with pytest.raises(UnsupportedFileTypeError):
            await read_upload(
                upload, timeout=1.0, max_bytes=1024, allowed_extensions=DEFAULT_ALLOWED_EXTENSIONS
            )

    async def test_cp1252_fallback(self):
        upload = FakeUpload("legacy.txt", b"caf\xe9")
        document = await read_upload(upload, timeout=1.0, max_bytes=1024)
        assert document.content == "caf\u00e9"

    async def test_utf8_bom_removed(self):
        upload = FakeUpload("bom.txt", b"\xef\xbb\xbfHello")
        document = await read_upload(upload, timeout=1.0, max_bytes=1024)
        assert document.content == "Hello"


class TestFileNames:
    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("report.txt", "report.txt"),
            ("../../etc/passwd", "passwd"),
            ("C:\\Users\\bob\\essay.rtf", "essay.rtf"),
            ("", "untitled.txt"),
            (None, "untitled.txt"),
        ],
    )
    def test_safe_filename(self, filename, expected):
        assert safe_filename(filename) == expected

    def test_file_type(self):
        assert get_file_type("notes.RTF") == "Rich Text Format"
        assert get_file_type("readme.md") == "Markdown"
        assert get_file_type("unknown.xyz") == "Text Document"
