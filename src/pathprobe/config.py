"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathprobe.exceptions import ConfigurationError
from pathprobe.load import DEFAULT_ITERATIONS

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "info"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    cpu_iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ConfigurationError(f"PORT must be between 1 and 65535, got {self.port}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.cpu_iterations < 1:
            raise ConfigurationError(
                f"CPU_ITERATIONS must be positive, got {self.cpu_iterations}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``PORT``, ``HOST``, ``LOG_LEVEL`` and ``CPU_ITERATIONS``."""
        env = os.environ if environ is None else environ
        return cls(
            port=_int_setting(env, "PORT", DEFAULT_PORT),
            host=env.get("HOST") or DEFAULT_HOST,
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
            cpu_iterations=_int_setting(env, "CPU_ITERATIONS", DEFAULT_ITERATIONS),
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach a stream handler to the root logger at *level*."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
