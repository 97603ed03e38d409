"""API routers and dependencies.

This package contains:
- analysis: stateless analyze and normalize endpoints
- documents: document session endpoints
- deps: FastAPI dependency injection functions
"""

from .analysis import router as analysis_router
from .deps import sanitize_error_message
from .documents import router as documents_router

__all__ = [
    "analysis_router",
    "documents_router",
    "sanitize_error_message",
]
