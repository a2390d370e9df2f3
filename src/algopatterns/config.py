"""
Configuration & Path Management
===============================
This module serves as the central registry for output paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the benchmark sizes, recursion limits and random
   seed in one place instead of scattering magic numbers through the lessons.
2. Output: It resolves where generated artefacts (plots, log files) are
   written, honoring the ALGOPATTERNS_OUTPUT_DIR environment variable.

Exports:
    DEFAULT_INPUT_SIZES (tuple[int, ...]): Input sizes for timing comparisons.
    get_output_path (callable): Output location, resolved on every call.
"""
import os
from pathlib import Path

OUTPUT_DIR_ENV = "ALGOPATTERNS_OUTPUT_DIR"


def get_project_root() -> Path:
    """
    Project root in development mode.
    config.py is in src/algopatterns/
    """
    current_file_path: Path = Path(__file__)
    return current_file_path.parent.parent.parent


def get_output_root() -> str:
    """
    Directory for generated artefacts, overridable via the environment.
    """
    env_value = os.environ.get(OUTPUT_DIR_ENV)
    if env_value:
        return os.path.abspath(env_value)
    return os.path.join(str(get_project_root()), "output")


def get_output_path(name: str) -> str:
    """
    Absolute path of an artefact inside the output directory.
    The directory is created on demand.

    Args:
        name: File name relative to the output directory.

    Raises:
        ValueError: If `name` is empty.

    Returns:
        Absolute path as a string.
    """
    if not name:
        raise ValueError("Output file name must not be empty.")
    root = get_output_root()
    os.makedirs(root, exist_ok=True)
    return os.path.join(root, name)


# Global Constants
DEFAULT_INPUT_SIZES: tuple[int, ...] = (10, 100, 1000, 10000)
FIBONACCI_INPUTS: tuple[int, ...] = (10, 20, 30, 40)
RECURSIVE_FIB_LIMIT: int = 20        # naive O(2^n) fibonacci is skipped above this n
INEFFICIENT_SIZE_LIMIT: int = 1000   # O(n^2) variants are skipped above this size
DUPLICATE_RATIO: float = 0.1         # share of injected duplicates in test data
RANDOM_SEED: int = 42
DEFAULT_PLOT_MAX_N: int = 20
