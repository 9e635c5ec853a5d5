"""Logging and profiling for ascii_blocks, built on telelog.

``configure(...)`` -- pick the environment, ``development`` or ``quiet`` setup
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit an ``event::<name>`` line with key/value pairs
``scan_span(rows)`` -- profile one scanner pass and count the boxes it handles

Environment variables use the ``ASCII_BLOCKS_`` prefix. The level defaults
to ``WARNING`` so converted text written to stdout stays free of log lines.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "ASCII_BLOCKS_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "ascii_blocks")
DEFAULT_LEVEL = "WARNING"
PRESETS = ("development", "quiet")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or DEFAULT_LEVEL).upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def _preset_config(preset: str) -> Any:
    if preset not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")
    config = tl.Config()
    if preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(not _env_flag("NO_COLOR"))
    else:
        # the Textual app owns the terminal
        config.with_min_level("ERROR")
        config.with_console_output(False)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    With neither argument the configuration is rebuilt from the environment.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()

    config.with_profiling(True)
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _ACTIVE_CONFIG is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def log_kv(logger: Any, level: str, message: str, **kv: Any) -> None:
    """Emit ``message | key=value | ...`` at ``level``."""

    payload = " | ".join([message] + [f"{key}={value}" for key, value in kv.items()])
    if level == "debug":
        logger.debug(payload)
    elif level == "warning":
        logger.warning(payload)
    elif level == "error":
        logger.error(payload)
    else:
        logger.info(payload)


def record_event(
    name: str, *, level: str = "info", data: Optional[Mapping[str, Any]] = None
) -> None:
    log_kv(get_logger(), level, f"event::{name}", **dict(data or {}))


@dataclass
class ScanStats:
    """Counters for one scanner pass over a document."""

    rows: int
    boxes: int = 0
    rejected: int = 0


@contextmanager
def scan_span(rows: int, *, name: str = "blockify") -> Iterator[ScanStats]:
    """Profile a scanner pass and log its counters when it finishes.

    A failure inside the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger()
    stats = ScanStats(rows=rows)
    with log.track_component(name), log.profile(name):
        try:
            yield stats
        except Exception as exc:
            log_kv(log, "error", "span::fail", span=name, rows=rows, reason=exc)
            raise
    log_kv(
        log,
        "debug",
        "span::done",
        span=name,
        rows=stats.rows,
        boxes=stats.boxes,
        rejected=stats.rejected,
    )


__all__ = [
    "ScanStats",
    "configure",
    "get_logger",
    "log_kv",
    "record_event",
    "scan_span",
]
