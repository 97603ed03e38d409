"""Configuration for the WordLens service.

Values are read from environment variables prefixed with ``WORDLENS_``
(or a local ``.env`` file), e.g. ``WORDLENS_READ_TIMEOUT_SECONDS=5``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# File extensions accepted by the upload endpoint (plain-text formats only)
DEFAULT_ALLOWED_EXTENSIONS = (
    ".txt",
    ".md",
    ".markdown",
    ".rtf",
    ".html",
    ".htm",
    ".csv",
    ".json",
    ".xml",
    ".log",
    ".yml",
    ".yaml",
    ".ini",
    ".cfg",
    ".conf",
)


class Settings(BaseSettings):
    """Service settings."""

    model_config = SettingsConfigDict(
        env_prefix="WORDLENS_",
        env_file=".env",
        extra="ignore",
    )

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"

    # Uploads
    max_upload_bytes: int = Field(default=50 * 1024 * 1024, gt=0)
    read_timeout_seconds: float = Field(default=10.0, gt=0)
    allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS

    # Keywords and rendering
    max_keywords: int = Field(default=50, gt=0)
    max_keyword_length: int = Field(default=100, gt=0)
    max_visible_lines: int = Field(default=200, gt=0)

    # IP rate limiting (fixed window)
    ip_rate_limit_requests: int = Field(default=120, gt=0)
    ip_rate_limit_window_seconds: float = Field(default=60.0, gt=0)

    # In-memory document sessions
    session_ttl_seconds: float = Field(default=3600.0, gt=0)
    max_sessions: int = Field(default=100, gt=0)

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list (comma-separated in the environment)."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()
