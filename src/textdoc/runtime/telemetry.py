"""Telemetry services built directly on telelog.

Documents log through this module only:

``configure(...)`` -- adopt settings, a preset, or an explicit telelog config
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .config import RuntimeSettings

tl = cast(Any, telelog)

PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_SETTINGS: RuntimeSettings = RuntimeSettings()


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def build_config(settings: RuntimeSettings) -> Any:
    """Translate ``RuntimeSettings`` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json_format:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def _build_preset_config(preset: str, settings: RuntimeSettings) -> Any:
    key = preset.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "textdoc.log")
        config.with_buffering(True)
    else:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(settings.log_file or "textdoc-performance.log")
    config.with_profiling(True)
    return config


def configure(
    *,
    settings: Optional[RuntimeSettings] = None,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    Parameters
    ----------
    settings:
        Settings to derive the configuration from. When omitted they are read
        from the environment, unless ``config`` is given, in which case the
        defaults are used.
    config:
        Explicit ``telelog.Config`` to adopt as-is.
    preset:
        ``"development"``, ``"production"`` or ``"performance"``. Mutually
        exclusive with ``config``.
    """

    global _ACTIVE_CONFIG, _SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if settings is not None:
        resolved = settings
    elif config is not None:
        resolved = RuntimeSettings()
    else:
        resolved = RuntimeSettings.from_env()
    if preset:
        config = _build_preset_config(preset, resolved)
    elif config is None:
        config = build_config(resolved)

    _SETTINGS = resolved
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    if _ACTIVE_CONFIG is not None:
        return _ACTIVE_CONFIG

    try:
        settings = RuntimeSettings.from_env()
    except ValueError as exc:
        configure(settings=RuntimeSettings())
        record_event(
            "telemetry::invalid_settings", level="warning", data={"reason": str(exc)}
        )
    else:
        configure(settings=settings)
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name`` (or the default)."""

    config = _ensure_config()
    logger_name = name or _SETTINGS.logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, config)
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _resolve_level_method(logger, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a component.

    Parameters
    ----------
    name:
        Operation name handed to ``logger.profile``.
    logger_name:
        Target logger; defaults to the configured document logger.
    component:
        ``True`` tracks the block under ``name``; a string names the component.
    metadata:
        Values attached as logger context for the duration of the block and
        carried on the yielded ``SpanHandle``.

    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name: Optional[str] = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    serialized = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in serialized.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(serialized),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in serialized:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
