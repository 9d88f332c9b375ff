"""Runtime configuration and telemetry."""

from . import telemetry
from .config import ENV_PREFIX, RuntimeSettings

__all__ = ["ENV_PREFIX", "RuntimeSettings", "telemetry"]
