"""
algopatterns
============
Interview-preparation course material as a Python library.

The package has two halves:

1. ``algopatterns.patterns`` holds short, self-contained implementations of
   classic algorithmic patterns (two pointers, sliding window, backtracking,
   dynamic programming, graphs, tries, bit tricks, ...).
2. ``algopatterns.complexity`` holds the Big-O lessons: one example per
   complexity class, inefficient vs. optimized comparisons and the exercise
   solutions, with timing tables and growth plots.

Every public function is recorded in ``algopatterns.registry`` together with
its time and space complexity.
"""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("algopatterns")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
