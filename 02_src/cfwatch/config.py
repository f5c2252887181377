"""Project-level configuration and path helpers."""

import os
from pathlib import Path

LOGS_DIR_NAME = "04_logs"
LOG_FILE_NAME = "cfwatch.log"

DEFAULT_NATS_HOST = "localhost"
DEFAULT_NATS_PORT = 4222
DEFAULT_NATS_USER = "nats"
DEFAULT_NATS_PASSWORD = "nats"


def default_log_path() -> Path:
    """Log file used when LOG_FILE is unset, under the working directory."""
    return Path.cwd() / LOGS_DIR_NAME / LOG_FILE_NAME


def resolve_nats_uri(
    host: str | None = None,
    port: int | str | None = None,
    user: str | None = None,
    password: str | None = None,
) -> str:
    """Build the bus URI, filling unset parts from NATS_* env vars or defaults."""
    host = host or os.getenv("NATS_HOST", DEFAULT_NATS_HOST)
    port = port or os.getenv("NATS_PORT", str(DEFAULT_NATS_PORT))
    user = user or os.getenv("NATS_USER", DEFAULT_NATS_USER)
    password = password or os.getenv("NATS_PASSWORD", DEFAULT_NATS_PASSWORD)

    return f"nats://{user}:{password}@{host}:{int(port)}"


def resolve_api_settings(
    api_url: str | None = None,
    token: str | None = None,
) -> tuple[str | None, str | None]:
    """Resolve control-plane URL and token from arguments or CF_* env vars."""
    return (
        api_url or os.getenv("CF_API_URL"),
        token or os.getenv("CF_TOKEN"),
    )
