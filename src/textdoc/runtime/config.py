"""Runtime settings read from ``TEXTDOC_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TEXTDOC_"
TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_BUFFER_SIZE = 2048


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Logging knobs shared by every telemetry consumer."""

    logger_name: str = "textdoc"
    log_level: str = "INFO"
    log_file: str = ""
    console: bool = True
    colored: bool = True
    json_format: bool = False
    buffered: bool = False
    buffer_size: int = DEFAULT_BUFFER_SIZE

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "RuntimeSettings":
        env = os.environ if environ is None else environ

        buffered = _flag(env, "LOG_BUFFERED", False)
        buffer_size = DEFAULT_BUFFER_SIZE
        if buffered:
            raw_size = env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE") or str(buffer_size)
            try:
                buffer_size = int(raw_size)
            except ValueError as exc:
                raise ValueError(
                    f"{ENV_PREFIX}LOG_BUFFER_SIZE must be an integer, got {raw_size!r}"
                ) from exc
            if buffer_size <= 0:
                raise ValueError(f"{ENV_PREFIX}LOG_BUFFER_SIZE must be positive")

        return cls(
            logger_name=env.get(f"{ENV_PREFIX}LOGGER") or "textdoc",
            log_level=(env.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper(),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE", ""),
            console=not _flag(env, "DISABLE_CONSOLE", False),
            colored=not _flag(env, "NO_COLOR", False),
            json_format=_flag(env, "LOG_JSON", False),
            buffered=buffered,
            buffer_size=buffer_size,
        )


__all__ = ["ENV_PREFIX", "RuntimeSettings"]
