"""Application services.

- reader: upload reading with a time budget and size limit
- rate_limiter: fixed-window per-client rate limiting
- sessions: in-memory document sessions with expiry
"""

from .rate_limiter import RateLimitDecision, RateLimiter
from .reader import decode_content, get_file_type, read_upload, safe_filename
from .sessions import SessionStore

__all__ = [
    "RateLimitDecision",
    "RateLimiter",
    "SessionStore",
    "decode_content",
    "get_file_type",
    "read_upload",
    "safe_filename",
]
