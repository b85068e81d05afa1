"""Plot builders for binomial lattices."""

from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from binomial_pricing.options.formatting import format_currency
from binomial_pricing.options.types import PricingResult, TreeNode

DEFAULT_LABEL_MAX_STEPS = 5

_ROOT_COLOR = "tab:purple"
_INNER_COLOR = "tab:blue"
_TERMINAL_COLOR = "tab:green"


def node_position(step: int, up_moves: int, steps: int) -> tuple[float, float]:
    """Layout coordinates in [0, 1] x (0, 1) for node `(step, up_moves)`."""
    x = step / steps if steps > 0 else 0.0
    y = (up_moves + 0.5) / (step + 1)
    return x, y


def _node_color(node: TreeNode, steps: int) -> str:
    if node.step == 0:
        return _ROOT_COLOR
    if node.step == steps:
        return _TERMINAL_COLOR
    return _INNER_COLOR


def _plot_edges(*, ax: plt.Axes, result: PricingResult) -> None:
    n = result.steps
    for level in result.lattice[:-1]:
        for node in level:
            x0, y0 = node_position(node.step, node.up_moves, n)
            for succ in (node.up_moves, node.up_moves + 1):
                x1, y1 = node_position(node.step + 1, succ, n)
                ax.plot(
                    [x0, x1],
                    [y0, y1],
                    color="grey",
                    linestyle="--",
                    linewidth=0.8,
                    alpha=0.8,
                    zorder=1,
                )


def _plot_nodes(*, ax: plt.Axes, result: PricingResult, show_labels: bool) -> None:
    n = result.steps
    for level in result.lattice:
        for node in level:
            x, y = node_position(node.step, node.up_moves, n)
            ax.scatter(
                [x],
                [y],
                s=60,
                facecolor="white",
                edgecolor=_node_color(node, n),
                linewidth=2,
                zorder=2,
            )
            if not show_labels:
                continue
            ax.annotate(
                f"S={format_currency(node.stock_price)}",
                (x, y),
                xytext=(0, 8),
                textcoords="offset points",
                ha="center",
                fontsize=8,
            )
            ax.annotate(
                f"V={format_currency(node.option_value)}",
                (x, y),
                xytext=(0, -14),
                textcoords="offset points",
                ha="center",
                fontsize=8,
                color=_node_color(node, n),
            )


def plot_lattice(
    result: PricingResult,
    *,
    label_max_steps: int = DEFAULT_LABEL_MAX_STEPS,
    ax: plt.Axes | None = None,
    title: str | None = None,
) -> Figure:
    """Draw stock prices and option values on the recombining lattice.

    Per-node labels are drawn only when the lattice has at most
    `label_max_steps` steps; larger trees show the node layout alone.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    _plot_edges(ax=ax, result=result)
    _plot_nodes(ax=ax, result=result, show_labels=result.steps <= label_max_steps)

    ax.set_xlim(-0.08, 1.08)
    ax.set_ylim(0.0, 1.0)
    ax.set_xlabel("Step")
    ax.set_yticks([])
    if result.steps > 0:
        ax.set_xticks([i / result.steps for i in range(result.steps + 1)])
        ax.set_xticklabels([str(i) for i in range(result.steps + 1)])
    else:
        ax.set_xticks([0.0])
        ax.set_xticklabels(["0"])
    ax.set_title(
        title
        or f"Binomial lattice ({result.steps} steps, "
        f"price {format_currency(result.option_price)})"
    )
    ax.grid(True, alpha=0.2)
    return fig
