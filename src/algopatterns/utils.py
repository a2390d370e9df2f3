from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Measurement(Generic[T]):
    """Result of a timed call."""
    result: T
    time_ms: float

    def formatted(self, digits: int = 3) -> str:
        """Time in milliseconds, fixed number of decimals."""
        return f"{self.time_ms:.{digits}f}"


def measure_time(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Measurement[T]:
    """
    Call `fn` once and measure the wall time.

    Args:
        fn: Function to call.
        *args: Positional arguments passed to `fn`.
        **kwargs: Keyword arguments passed to `fn`.

    Returns:
        Measurement with the return value and elapsed time in milliseconds.
    """
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return Measurement(result=result, time_ms=elapsed_ms)


def timer(fn: Callable[..., T]) -> Callable[..., T]:
    """Decorator logging how long the wrapped call took."""
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        measurement = measure_time(fn, *args, **kwargs)
        logger.info(f"{fn.__qualname__} finished in {measurement.formatted()} ms")
        return measurement.result
    return wrapper


def speedup(slow_ms: Optional[float], fast_ms: Optional[float]) -> Optional[float]:
    """Ratio slow/fast, or None if either timing is missing or zero."""
    if slow_ms is None or fast_ms is None or slow_ms <= 0 or fast_ms <= 0:
        return None
    return slow_ms / fast_ms


def generate_test_data(
    size: int,
    rng: Optional[np.random.Generator] = None,
) -> list[int]:
    """
    Random integers in [0, size * 10).

    Args:
        size: Number of elements.
        rng: Random generator, a fresh default generator when omitted.

    Raises:
        ValueError: If `size` is negative.

    Returns:
        A plain list of ints.
    """
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}.")
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(0, max(size, 1) * 10, size=size).tolist()


def with_duplicates(
    data: list[int],
    ratio: float,
    rng: Optional[np.random.Generator] = None,
) -> list[int]:
    """
    Copy of `data` with ``ceil(len(data) * ratio)`` randomly picked elements appended again.
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Duplicate ratio must be within [0, 1], got {ratio}.")
    if not data:
        return []
    rng = rng if rng is not None else np.random.default_rng()
    count = int(np.ceil(len(data) * ratio))
    picks = rng.integers(0, len(data), size=count)
    return data + [data[i] for i in picks]


def sorted_evens(size: int) -> list[int]:
    """Sorted array of the first `size` even numbers."""
    return np.arange(0, 2 * size, 2, dtype=np.int64).tolist()
