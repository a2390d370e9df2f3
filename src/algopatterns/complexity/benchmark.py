from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Cell = Optional[float | int | str]


@dataclass
class ComparisonTable:
    """
    Timing comparison printed as a markdown-style table.

    Numeric cells are timings in milliseconds; None renders as `missing`
    (e.g. "Too slow" for an algorithm skipped at that size).
    """
    title: str
    headers: list[str]
    rows: list[list[Cell]] = field(default_factory=list)
    explanation: str = ""
    missing: str = "N/A"

    def add_row(self, *cells: Cell) -> None:
        if len(cells) != len(self.headers):
            raise ValueError(f"Row has {len(cells)} cells but the table has {len(self.headers)} columns.")
        self.rows.append(list(cells))

    def column(self, index: int) -> list[Cell]:
        return [row[index] for row in self.rows]

    def numeric_column(self, index: int) -> npt.NDArray[np.float64]:
        """Column as floats, NaN where the cell is missing or not a number."""
        return np.array(
            [float(c) if isinstance(c, (int, float)) else np.nan for c in self.column(index)],
            dtype=np.float64,
        )

    def _format(self, cell: Cell) -> str:
        if cell is None:
            return self.missing
        if isinstance(cell, float):
            return f"{cell:.3f}"
        return str(cell)

    def render(self) -> str:
        formatted = [[self._format(c) for c in row] for row in self.rows]
        widths = [
            max([len(h)] + [len(r[i]) for r in formatted])
            for i, h in enumerate(self.headers)
        ]

        def line(cells: Sequence[str]) -> str:
            return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

        out = [self.title, line(self.headers), "|" + "|".join("-" * (w + 2) for w in widths) + "|"]
        out.extend(line(r) for r in formatted)
        if self.explanation:
            out.append(self.explanation)
        return "\n".join(out)

    def __str__(self) -> str:
        return self.render()


def format_speedup(ratio: Optional[float]) -> str:
    return "N/A" if ratio is None else f"{ratio:.1f}x"


def estimate_growth_exponent(sizes: Sequence[float], times: Sequence[float]) -> float:
    """
    Empirical exponent k of ``time ~ size**k`` from a log-log least-squares fit.

    Non-positive or NaN samples are dropped before fitting.

    Args:
        sizes: Input sizes.
        times: Measured times, same length as `sizes`.

    Raises:
        ValueError: If fewer than two usable samples remain.

    Returns:
        The slope of the fitted line.
    """
    x = np.asarray(sizes, dtype=np.float64)
    y = np.asarray(times, dtype=np.float64)
    if x.shape != y.shape:
        raise ValueError(f"Got {x.size} sizes but {y.size} times.")

    mask = np.isfinite(x) & np.isfinite(y) & (x > 0) & (y > 0)
    if np.count_nonzero(mask) < 2:
        raise ValueError("At least two positive samples are needed to estimate growth.")

    slope, _intercept = np.polyfit(np.log(x[mask]), np.log(y[mask]), 1)
    logger.debug(f"Estimated growth exponent {slope:.2f} from {np.count_nonzero(mask)} samples")
    return float(slope)
