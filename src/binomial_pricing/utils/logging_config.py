"""Logging setup for the `binomial-price` entrypoint and notebooks.

Library modules only create `logger = getLogger(__name__)` and never configure
handlers. Entrypoints call `setup_logging(...)` once.

The console handler attaches `_AddShortNameFilter`, which sets
`record.shortname` to the last dotted component of the logger name, so console
formats may use `%(shortname)s` (e.g. `binomial_tree` instead of
`binomial_pricing.options.models.binomial_tree`).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

# Chatty at DEBUG when a plot is rendered.
_THIRD_PARTY_LOGGERS = ("matplotlib", "PIL")


class _AddShortNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.shortname = record.name.split(".")[-1]
        return True


class _ColorFormatter(logging.Formatter):
    """Colors the level name only; meant for the console handler."""

    _RESET = "\033[0m"
    _LEVEL_COLOR: dict[int, str] = {
        logging.DEBUG: "\033[36m",        # cyan
        logging.INFO: "\033[32m",         # green
        logging.WARNING: "\033[33m",      # yellow
        logging.ERROR: "\033[31m",        # red
        logging.CRITICAL: "\033[1;31m",   # bold red
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._LEVEL_COLOR.get(record.levelno)
        if not color:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def coerce_level(level: int | str) -> int:
    """Turn `logging.INFO`, `"info"`, `"20"` and friends into an int level."""
    if isinstance(level, int):
        return level

    s = str(level).strip().upper()
    if not s:
        raise ValueError("Empty logging level")
    if s.isdigit():
        return int(s)

    # Known names (including WARN/FATAL) map back to their int level.
    value = logging.getLevelName(s)
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt_console: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    fmt_file: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    log_file: str | Path | None = None,
    module_levels: Mapping[str, int | str] | None = None,
    colored: bool = False,
    quiet_third_party: bool = True,
) -> None:
    """Configure root logging.

    Parameters
    - level: Root level as int or name.
    - fmt_console: Console format; `%(shortname)s` is available.
    - fmt_file: File format, used only with `log_file`.
    - log_file: Also write uncolored logs to this file (parents are created).
    - module_levels: Per-logger level overrides, e.g.
      `{"binomial_pricing.options.models": "DEBUG"}`.
    - colored: ANSI-color the console level names.
    - quiet_third_party: Keep matplotlib/PIL at WARNING.

    Uses `force=True` so repeated calls (notebooks, tests) replace handlers
    instead of stacking them.
    """
    root_level = coerce_level(level)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.addFilter(_AddShortNameFilter())
    if colored:
        console.setFormatter(_ColorFormatter(fmt=fmt_console, datefmt=datefmt))
    else:
        console.setFormatter(logging.Formatter(fmt=fmt_console, datefmt=datefmt))
    handlers.append(console)

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(p, encoding="utf-8")
        fh.addFilter(_AddShortNameFilter())
        fh.setFormatter(logging.Formatter(fmt=fmt_file, datefmt=datefmt))
        handlers.append(fh)

    logging.basicConfig(level=root_level, handlers=handlers, force=True)

    if module_levels:
        for name, lvl in module_levels.items():
            logging.getLogger(name).setLevel(coerce_level(lvl))

    if quiet_third_party:
        for name in _THIRD_PARTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
