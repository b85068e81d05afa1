"""Settings for the `binomial-price` entrypoint.

A run is configured in three layers, each overriding the previous one key by
key within a section: `DEFAULT_CONFIG` in the app, an optional YAML file
(`--config`), then command-line flags. Sections are fixed; a YAML file naming
an unknown section or logging key is rejected instead of silently ignored.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from binomial_pricing.utils.logging_config import setup_logging

LOGGING_DEFAULTS: dict[str, Any] = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(shortname)s - %(message)s",
    "file": None,
    "color": True,
    "module_levels": {},
}


class ConfigError(ValueError):
    """Raised when a config layer has the wrong shape or an unknown key."""


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add `--config`, `--print-config`, `--dry-run` and the logging flags."""
    run = parser.add_argument_group("run")
    run.add_argument("--config", type=str, default=None, help="YAML config file.")
    run.add_argument(
        "--print-config",
        action="store_true",
        help="Print the merged config as JSON and exit.",
    )
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the option and log the plan without pricing it.",
    )

    log = parser.add_argument_group("logging")
    log.add_argument("--log-level", type=str, default=None)
    log.add_argument("--log-file", type=str, default=None)
    log.add_argument("--log-format", type=str, default=None)
    log.add_argument("--color", dest="log_color", action="store_true")
    log.add_argument("--no-color", dest="log_color", action="store_false")
    parser.set_defaults(log_color=None)


def resolve_path(value: str | Path | None) -> Path | None:
    """Expand `~` and `$VARS` in a configured output path."""
    if value is None or isinstance(value, Path):
        return value
    return Path(os.path.expandvars(os.path.expanduser(value)))


def read_config_file(path: str | Path | None) -> dict[str, Any]:
    """Load one YAML layer; no path or an empty file give `{}`."""
    if path is None:
        return {}

    p = resolve_path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Config file not found: {p}")

    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{p}: expected a mapping of sections, got {type(data).__name__}"
        )
    return data


def layer_config(
    defaults: Mapping[str, Any],
    *layers: Mapping[str, Any],
) -> dict[str, Any]:
    """Apply `layers` over `defaults`, section by section.

    Mapping sections (`option`, `pricer`, ...) are updated key by key; scalar
    entries such as `dry_run` are replaced. `defaults` is never mutated.

    Raises:
        ConfigError: For a section missing from `defaults`, or a mapping
            section given a non-mapping value.
    """
    config = {
        key: dict(value) if isinstance(value, Mapping) else value
        for key, value in defaults.items()
    }
    for layer in layers:
        for section, values in layer.items():
            if section not in config:
                raise ConfigError(
                    f"Unknown config section {section!r}; "
                    f"expected one of {sorted(config)}"
                )
            if not isinstance(config[section], dict):
                config[section] = values
            elif values is None:
                continue
            elif not isinstance(values, Mapping):
                raise ConfigError(
                    f"Config section {section!r} must be a mapping, got {values!r}"
                )
            else:
                config[section].update(values)
    return config


def logging_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key, value in (
        ("level", args.log_level),
        ("file", args.log_file),
        ("format", args.log_format),
        ("color", args.log_color),
    ):
        if value is not None:
            overrides[key] = value
    return overrides


def configure_logging(log_cfg: Mapping[str, Any]) -> None:
    """Configure root logging from the merged `logging` section."""
    unknown = sorted(set(log_cfg) - set(LOGGING_DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown logging settings: {unknown}")

    cfg = {**LOGGING_DEFAULTS, **log_cfg}
    setup_logging(
        cfg["level"],
        fmt_console=cfg["format"],
        log_file=resolve_path(cfg["file"]),
        colored=bool(cfg["color"]),
        module_levels=cfg["module_levels"] or None,
    )


def _to_json(obj: Mapping[str, Any]) -> str:
    # Paths fall back to str(); OptionType is a StrEnum and encodes as its value.
    return json.dumps(obj, default=str, indent=2, sort_keys=True)


def print_config(config: Mapping[str, Any]) -> None:
    print(_to_json(config))


def log_dry_run(logger: logging.Logger, plan: Mapping[str, Any]) -> None:
    logger.info("DRY RUN: nothing was priced.")
    logger.info("DRY RUN plan:\n%s", _to_json(plan))
