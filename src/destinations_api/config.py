"""Environment-driven settings for the Destinations API.

Values come from environment variables. A `.env` file in the working
directory is loaded first; variables already set in the environment win.

    APP_ENV=development
    PORT=3001
    DESTINATIONS_FILE=/srv/data/destinations.json
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_DESTINATIONS_FILE = Path(__file__).resolve().parent / "data" / "destinations.json"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"
DEFAULT_REQUEST_LOG = "logs/api_requests.jsonl"


class Settings(BaseModel):
    """Runtime settings, resolved once per call to get_settings()."""

    app_env: str = Field("production", description="Environment name echoed by /health")
    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    destinations_file: Path = DEFAULT_DESTINATIONS_FILE
    cors_origins: list[str] = Field(default_factory=list)
    request_log: str = DEFAULT_REQUEST_LOG


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    return port


def _parse_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _env(name: str, default: str) -> str:
    load_dotenv(Path.cwd() / ".env", override=False)
    return os.getenv(name, default)


# ---------------------------------------------------------------------------
# Single-value readers: used by the app, which never needs HOST or PORT
# ---------------------------------------------------------------------------


def get_app_env() -> str:
    return _env("APP_ENV", "production")


def get_destinations_file() -> Path:
    return Path(_env("DESTINATIONS_FILE", str(DEFAULT_DESTINATIONS_FILE)))


def get_cors_origins() -> list[str]:
    return _parse_origins(_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))


def get_request_log() -> str:
    return _env("REQUEST_LOG", DEFAULT_REQUEST_LOG)


def get_settings() -> Settings:
    """Build Settings from the current environment (and `.env`, if present).

    Raises:
        ValueError: if PORT is not an integer in 1..65535.
    """
    return Settings(
        app_env=get_app_env(),
        host=_env("HOST", DEFAULT_HOST),
        port=_parse_port(_env("PORT", str(DEFAULT_PORT))),
        destinations_file=get_destinations_file(),
        cors_origins=get_cors_origins(),
        request_log=get_request_log(),
    )
