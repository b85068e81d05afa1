#!/usr/bin/env python
"""Price a European option on a CRR binomial lattice and report the tree."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping
from typing import Any

import matplotlib.pyplot as plt

from binomial_pricing.apps._settings import (
    LOGGING_DEFAULTS,
    add_common_args,
    configure_logging,
    layer_config,
    log_dry_run,
    logging_overrides,
    print_config,
    read_config_file,
    resolve_path,
)
from binomial_pricing.options import (
    BinomialTreePricer,
    OptionParameters,
    PricingError,
    lattice_to_frame,
    summarize,
)
from binomial_pricing.options.plotting import DEFAULT_LABEL_MAX_STEPS, plot_lattice

OPTION_FIELDS = (
    "spot",
    "strike",
    "rate",
    "time_to_expiry",
    "volatility",
    "steps",
    "option_type",
)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": LOGGING_DEFAULTS,
    "dry_run": False,
    "option": {
        "spot": 100.0,
        "strike": 100.0,
        "rate": 0.05,
        "time_to_expiry": 1.0,
        "volatility": 0.2,
        "steps": 3,
        "option_type": "call",
    },
    "pricer": {
        "max_steps": 10,
    },
    "output": {
        "table": False,
        "plot": None,
        "label_max_steps": DEFAULT_LABEL_MAX_STEPS,
    },
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Price a European option with a CRR binomial tree."
    )
    add_common_args(parser)

    parser.add_argument("--spot", type=float, default=None)
    parser.add_argument("--strike", type=float, default=None)
    parser.add_argument("--rate", type=float, default=None)
    parser.add_argument("--time-to-expiry", type=float, default=None)
    parser.add_argument("--volatility", type=float, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument(
        "--option-type",
        type=str,
        choices=["call", "put", "C", "P"],
        default=None,
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Reject requests with more steps than this.",
    )
    parser.add_argument(
        "--table",
        dest="table",
        action="store_true",
        help="Print every lattice node after the summary.",
    )
    parser.add_argument(
        "--no-table",
        dest="table",
        action="store_false",
        help="Print the summary only.",
    )
    parser.set_defaults(table=None)
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Write a lattice plot to this image path.",
    )
    parser.add_argument(
        "--label-max-steps",
        type=int,
        default=None,
        help="Largest tree whose plot still shows per-node labels.",
    )
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    option_cfg = {
        field: getattr(args, field)
        for field in OPTION_FIELDS
        if getattr(args, field) is not None
    }
    if option_cfg:
        overrides["option"] = option_cfg

    if args.max_steps is not None:
        overrides["pricer"] = {"max_steps": args.max_steps}

    output: dict[str, Any] = {}
    if args.table is not None:
        output["table"] = args.table
    if args.plot is not None:
        output["plot"] = args.plot
    if args.label_max_steps is not None:
        output["label_max_steps"] = args.label_max_steps
    if output:
        overrides["output"] = output

    if args.dry_run:
        overrides["dry_run"] = True

    log_cfg = logging_overrides(args)
    if log_cfg:
        overrides["logging"] = log_cfg

    return overrides


def _build_parameters(option_cfg: Mapping[str, Any]) -> OptionParameters:
    missing = [field for field in OPTION_FIELDS if option_cfg.get(field) is None]
    if missing:
        raise ValueError(f"option section is missing: {missing}")
    unknown = sorted(set(option_cfg) - set(OPTION_FIELDS))
    if unknown:
        raise ValueError(f"Unknown option settings: {unknown}")
    return OptionParameters(**{field: option_cfg[field] for field in OPTION_FIELDS})


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = layer_config(
        DEFAULT_CONFIG, read_config_file(args.config), _build_overrides(args)
    )
    if args.print_config:
        print_config(config)
        return

    configure_logging(config["logging"])
    logger = logging.getLogger(__name__)

    params = _build_parameters(config["option"])
    max_steps = config["pricer"].get("max_steps")
    output = config["output"]
    plot_path = resolve_path(output.get("plot"))
    label_max_steps = int(output.get("label_max_steps", DEFAULT_LABEL_MAX_STEPS))
    dry_run = bool(config.get("dry_run", False))

    logger.info("Option:     %s", params)
    logger.info("Max steps:  %s", max_steps)
    logger.info("Plot:       %s", plot_path)

    if dry_run:
        log_dry_run(
            logger,
            {
                "action": "price_option",
                "option": {field: getattr(params, field) for field in OPTION_FIELDS},
                "max_steps": max_steps,
                "table": bool(output.get("table", False)),
                "plot": plot_path,
                "label_max_steps": label_max_steps,
            },
        )
        return

    try:
        result = BinomialTreePricer(max_steps=max_steps).price(params)
    except PricingError as exc:
        logger.error("Pricing failed: %s", exc)
        raise

    for label, text in summarize(result, params.option_type).items():
        print(f"{label}: {text}")

    if output.get("table", False):
        print()
        print(lattice_to_frame(result).to_string(index=False))

    if plot_path is not None:
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig = plot_lattice(result, label_max_steps=label_max_steps)
        fig.savefig(plot_path, bbox_inches="tight")
        plt.close(fig)
        logger.info("Lattice plot -> %s", plot_path)


if __name__ == "__main__":
    main()
