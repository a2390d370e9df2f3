import matplotlib

# headless backend before pyplot is imported anywhere
matplotlib.use("Agg")

import pytest

from algopatterns.patterns.tree_algorithms import TreeNode, build_bst


@pytest.fixture
def bst() -> TreeNode:
    """
            8
          /   \\
         3     10
        / \\      \\
       1   6      14
          / \\    /
         4   7  13
    """
    return build_bst([8, 3, 10, 1, 6, 14, 4, 7, 13])


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("ALGOPATTERNS_OUTPUT_DIR", str(tmp_path))
    return tmp_path
