import pytest

import algopatterns.complexity.examples  # noqa: F401  (registers complexity entries)
import algopatterns.patterns  # noqa: F401
from algopatterns import registry
from algopatterns.patterns import PATTERN_MODULES

EXPECTED_PATTERNS = {
    "backtracking",
    "binary_search",
    "bit_manipulation",
    "divide_and_conquer",
    "dynamic_programming",
    "graph_algorithms",
    "greedy",
    "hashing",
    "sliding_window",
    "tree_algorithms",
    "trie",
    "two_pointers",
}


def test_all_pattern_modules_are_imported():
    assert set(PATTERN_MODULES) == EXPECTED_PATTERNS
    assert EXPECTED_PATTERNS <= set(registry.list_patterns())


def test_entries_carry_complexity():
    entry = registry.get_entry("algopatterns.patterns.sliding_window.length_of_longest_substring")
    assert entry.pattern == "sliding_window"
    assert entry.time == "O(n)"
    assert entry.summary.startswith("Length of the longest substring")


def test_short_name_lookup():
    assert registry.get_entry("solve_n_queens").pattern == "backtracking"
    assert registry.get_entry("Trie").time == "O(m)"
    assert registry.get_entry("huffman_encode").pattern == "greedy"


def test_ambiguous_and_unknown_names():
    # binary_search exists in the pattern and in the complexity examples
    with pytest.raises(KeyError):
        registry.get_entry("binary_search")
    with pytest.raises(KeyError):
        registry.get_entry("no_such_function")


def test_list_entries_filter_and_order():
    entries = registry.list_entries("bit_manipulation")
    assert entries
    assert all(e.pattern == "bit_manipulation" for e in entries)
    assert [e.qualname for e in entries] == sorted(e.qualname for e in entries)


def test_register_returns_function_unchanged():
    @registry.register(time="O(1)", space="O(1)", pattern="scratch")
    def answer():
        """The answer."""
        return 42

    assert answer() == 42
    assert registry.get_entry(f"{__name__}.{answer.__qualname__}").summary == "The answer."


def test_register_validation():
    with pytest.raises(ValueError):
        registry.register(time="", space="O(1)")

    def twice():
        pass

    registry.register(time="O(1)", space="O(1)", pattern="scratch")(twice)
    with pytest.raises(ValueError):
        registry.register(time="O(n)", space="O(1)", pattern="scratch")(twice)
