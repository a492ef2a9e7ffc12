"""Configuration for the todo service.

All settings are resolved from environment variables through the small
``_getenv`` helpers below. Invalid values never raise; they fall back to the
documented default so a typo in the environment cannot keep the service from
starting.
"""

import os
from dataclasses import dataclass, field

DEFAULT_MAX_BODY_BYTES = 16 * 1024


def _getenv(name: str, default: str | None = None) -> str | None:
    """Return the value of an environment variable.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is not set.

    Returns:
        The string value stored in the environment or ``default``.
    """
    return os.getenv(name, default)


def _getenv_int(name: str, default: int) -> int:
    """Retrieve an integer environment variable.

    Args:
        name: Environment variable name.
        default: Fallback value when the variable is unset or invalid.

    Returns:
        The parsed integer value or ``default`` if conversion fails.
    """
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _getenv_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean environment variable.

    ``"1"``, ``"true"``, ``"yes"`` and ``"on"`` (any case) are truthy, every
    other value is ``False``.

    Args:
        name: Environment variable name.
        default: Fallback value when the variable is unset.

    Returns:
        ``True`` or ``False`` depending on the variable content, or
        ``default`` if the variable is missing.
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _getenv_list(name: str, default: str) -> list[str]:
    raw = _getenv(name, default) or default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(slots=True)
class Settings:
    """Service configuration resolved from environment variables.

    Attributes:
        host: Interface the HTTP server binds to.
        port: TCP port the HTTP server listens on.
        api_prefix: Optional path prefix mounted in front of ``/todos``.
        max_body_bytes: Largest request body accepted before answering 413.
        log_level: Name of the root logging level.
        log_json: Emit one JSON object per log line instead of plain text.
        cors_allow_origins: Origins allowed by the CORS middleware.
    """

    host: str = field(
        default_factory=lambda: _getenv("TODO_HOST", "127.0.0.1") or "127.0.0.1"
    )
    port: int = field(default_factory=lambda: _getenv_int("TODO_PORT", 8080))
    api_prefix: str = field(
        default_factory=lambda: (_getenv("TODO_API_PREFIX", "") or "").rstrip("/")
    )
    max_body_bytes: int = field(
        default_factory=lambda: _getenv_int(
            "TODO_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES
        )
    )
    log_level: str = field(
        default_factory=lambda: (_getenv("TODO_LOG_LEVEL", "INFO") or "INFO").upper()
    )
    log_json: bool = field(default_factory=lambda: _getenv_bool("TODO_LOG_JSON", False))
    cors_allow_origins: list[str] = field(
        default_factory=lambda: _getenv_list("CORS_ALLOW_ORIGINS", "*")
    )


def load_settings() -> Settings:
    """Load settings from environment variables."""

    return Settings()

