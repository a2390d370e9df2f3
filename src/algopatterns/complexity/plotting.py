from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt

from algopatterns import config

if TYPE_CHECKING:
    import numpy.typing as npt

    from algopatterns.complexity.benchmark import ComparisonTable

logger = logging.getLogger(__name__)

MAX_FINITE_FACTORIAL: float = 170.0


class ComplexityClass(StrEnum):
    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n²)"
    EXPONENTIAL = "O(2ⁿ)"
    FACTORIAL = "O(n!)"

    def growth(self, n: float | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Operation count of this class for input size(s) `n`.

        Logarithms are base 2 and clamped so that n < 1 never goes negative.

        Args:
            n: Input size(s), non-negative.

        Raises:
            ValueError: If any size is negative.

        Returns:
            Array of the same shape as `n`.
        """
        n = np.asarray(n, dtype=np.float64)
        if np.any(n < 0):
            raise ValueError("Input sizes must be non-negative.")

        log_n = np.log2(np.maximum(n, 1.0))
        if self is ComplexityClass.CONSTANT:
            return np.ones_like(n)
        elif self is ComplexityClass.LOGARITHMIC:
            return log_n
        elif self is ComplexityClass.LINEAR:
            return n.copy()
        elif self is ComplexityClass.LINEARITHMIC:
            return n * log_n
        elif self is ComplexityClass.QUADRATIC:
            return n ** 2
        elif self is ComplexityClass.EXPONENTIAL:
            return np.exp2(n)
        else:
            # n! exceeds the float range above 170
            gamma = np.vectorize(lambda x: math.gamma(x + 1.0), otypes=[np.float64])
            finite = gamma(np.minimum(n, MAX_FINITE_FACTORIAL))
            return np.where(n > MAX_FINITE_FACTORIAL, np.inf, finite)


def _finish(output: Optional[str]) -> None:
    if output:
        plt.savefig(output)
        plt.close()
        logger.info(f"Plot saved to: {output}")
    else:
        plt.show()


def _style_grid() -> None:
    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)


def plot_growth_curves(
    max_n: int = config.DEFAULT_PLOT_MAX_N,
    classes: Optional[Iterable[ComplexityClass]] = None,
    output: Optional[str] = None,
) -> None:
    """
    Plot the operation count of each complexity class for n = 1..max_n.

    The y axis is logarithmic so that O(1) and O(n!) fit in one figure.

    Args:
        max_n: Largest input size.
        classes: Classes to draw, all by default.
        output: File to save to; shows an interactive window when omitted.

    Raises:
        ValueError: If `max_n` is smaller than 2.
    """
    if max_n < 2:
        raise ValueError(f"max_n must be at least 2, got {max_n}.")

    n = np.arange(1, max_n + 1, dtype=np.float64)
    classes = list(classes) if classes is not None else list(ComplexityClass)

    plt.rcParams["figure.constrained_layout.use"] = True
    plt.figure(figsize=(7, 5))

    for complexity in classes:
        values = complexity.growth(n)
        # values past the float range are left out of the curve
        plt.plot(n, np.where(np.isfinite(values), values, np.nan), lw=2, label=str(complexity))

    _style_grid()
    plt.yscale("log")
    plt.title("Growth of Common Complexity Classes")
    plt.xlabel("Input size n")
    plt.ylabel("Operations (log scale)")
    plt.xlim(1, max_n)
    plt.legend()
    _finish(output)


def plot_comparison(
    table: ComparisonTable,
    size_column: int = 0,
    output: Optional[str] = None,
) -> None:
    """
    Plot every numeric timing column of a comparison table against input size.

    Missing timings (skipped slow variants) are left as gaps.
    """
    sizes = table.numeric_column(size_column)

    plt.rcParams["figure.constrained_layout.use"] = True
    plt.figure(figsize=(7, 5))

    plotted = 0
    for index, header in enumerate(table.headers):
        if index == size_column or "(ms)" not in header:
            continue
        plt.plot(sizes, table.numeric_column(index), 'o-', lw=2, label=header)
        plotted += 1

    if plotted == 0:
        plt.close()
        raise ValueError(f"Table '{table.title}' has no timing columns to plot.")

    _style_grid()
    plt.xscale("log")
    plt.yscale("log")
    plt.title(table.title.rstrip(":"))
    plt.xlabel(table.headers[size_column])
    plt.ylabel("Time (ms)")
    plt.legend()
    _finish(output)
