"""Exception types raised by the WordLens engine and services.

None of these is fatal to the service. Pattern and normalization failures are
recovered inside the engine (zero count, raw content); the rest are mapped to
HTTP status codes by the exception handlers in ``server.py``.
"""


class WordLensError(Exception):
    """Base class for WordLens errors."""

    status_code = 400


class PatternCompilationError(WordLensError):
    """A keyword could not be turned into a safe match pattern."""

    def __init__(self, keyword: str, reason: str):
        self.keyword = keyword
        self.reason = reason
        super().__init__(f"Cannot compile pattern for keyword {keyword!r}: {reason}")


class NormalizationError(WordLensError):
    """Rich-text content is malformed and cannot be fully cleaned."""


class ReadTimeoutError(WordLensError):
    """Reading an uploaded file exceeded its time budget."""

    status_code = 408

    def __init__(self, filename: str, timeout: float):
        self.filename = filename
        self.timeout = timeout
        super().__init__(f"Reading '{filename}' timed out after {timeout:g}s")


class UploadTooLargeError(WordLensError):
    """Uploaded file exceeds the configured size limit."""

    status_code = 413


class UnsupportedFileTypeError(WordLensError):
    """Uploaded file has an extension that is not accepted."""

    status_code = 415


class KeywordError(WordLensError):
    """A keyword cannot be added to the registry."""

    status_code = 422


class InvalidKeywordError(KeywordError):
    """Keyword word or color is empty or malformed."""


class DuplicateKeywordError(KeywordError):
    """A keyword with the same word is already tracked."""

    status_code = 409

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Keyword already exists: {word}")


class KeywordNotFoundError(KeywordError):
    """No tracked keyword has the given id."""

    status_code = 404


class SessionNotFoundError(WordLensError):
    """No open document session has the given id."""

    status_code = 404

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Document session not found: {session_id}")
