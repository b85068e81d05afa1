from __future__ import annotations

import logging
from pathlib import Path

import pytest

from binomial_pricing.utils.logging_config import coerce_level, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.DEBUG, logging.DEBUG),
        ("info", logging.INFO),
        (" warn ", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("15", 15),
    ],
)
def test_coerce_level(level, expected) -> None:
    assert coerce_level(level) == expected


@pytest.mark.parametrize("level", ["", "LOUD"])
def test_coerce_level_rejects_unknown(level) -> None:
    with pytest.raises(ValueError):
        coerce_level(level)


def test_setup_logging_writes_file_and_applies_module_levels(
    tmp_path: Path, restore_root_logging
) -> None:
    log_file = tmp_path / "logs" / "price.log"

    setup_logging(
        "WARNING",
        log_file=log_file,
        module_levels={"binomial_pricing.options.models": "DEBUG"},
        colored=True,
    )
    logging.getLogger("binomial_pricing.options.models.binomial_tree").debug(
        "lattice built"
    )
    logging.getLogger("binomial_pricing.apps").info("suppressed")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "lattice built" in text
    assert "suppressed" not in text
    assert logging.getLogger("matplotlib").level == logging.WARNING
