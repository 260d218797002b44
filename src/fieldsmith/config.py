"""Configuration management for FieldSmith."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


class Settings(BaseModel):
    """Application settings.

    Only the API and CLI read these; they pass the values into the matching
    functions as explicit arguments.
    """

    # Header detection
    header_scan_rows: int = int(os.getenv("HEADER_SCAN_ROWS", "5"))
    header_match_confidence: float = float(os.getenv("HEADER_MATCH_CONFIDENCE", "0.4"))

    # Auto-mapping (stricter than header scanning)
    auto_map_confidence: float = float(os.getenv("AUTO_MAP_CONFIDENCE", "0.7"))

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
