from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.exceptions import InvalidParameter
from src.domain.models import CelestialBody


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidParameter(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class NavigatorSettings:
    default_body: CelestialBody
    max_connections: int
    reveal_errors: bool
    log_level: str

    @staticmethod
    def from_env() -> "NavigatorSettings":
        """Read settings from the environment.

        Env vars:
          - NAVIGATOR_DEFAULT_BODY: body used when a request names none (default: earth)
          - NAVIGATOR_MAX_CONNECTIONS: largest connection list accepted per graph
          - NAVIGATOR_REVEAL_ERRORS: 1|true to expose messages of unhandled errors
          - NAVIGATOR_LOG_LEVEL: root log level (default: INFO)
        """

        body_raw = os.getenv("NAVIGATOR_DEFAULT_BODY", "earth")
        return NavigatorSettings(
            default_body=CelestialBody.parse(body_raw),
            max_connections=_env_int("NAVIGATOR_MAX_CONNECTIONS", 100_000),
            reveal_errors=_env_bool("NAVIGATOR_REVEAL_ERRORS", False),
            log_level=(os.getenv("NAVIGATOR_LOG_LEVEL") or "INFO").strip().upper(),
        )
