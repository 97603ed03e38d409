"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Access to the application's settings and session store
- Session lookup by path parameter
- Error sanitization
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from ..config import Settings
from ..engine import AnalysisSession, WordLensError
from ..services import SessionStore

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    WordLens errors carry messages written for the client and are returned
    as-is; anything else is logged and replaced with a generic message.
    """
    if isinstance(error, WordLensError):
        return str(error)

    logger.error(f"Request processing error: {error}", exc_info=True)
    return "An error occurred processing your request. Please try again."


# ============ REQUEST STATE ============


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_session_store(request: Request) -> SessionStore:
    """The application's session store."""
    return request.app.state.sessions


def get_session(
    session_id: str,
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> AnalysisSession:
    """Look up the document session named in the path.

    Raises:
        SessionNotFoundError: Mapped to 404 by the server's handlers.
    """
    return sessions.get(session_id)


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
SessionDep = Annotated[AnalysisSession, Depends(get_session)]
