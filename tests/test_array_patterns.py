import pytest

from algopatterns.patterns import binary_search as bs
from algopatterns.patterns import sliding_window as sw
from algopatterns.patterns import two_pointers as tp


def test_two_sum_sorted_finds_pair():
    assert tp.two_sum_sorted([1, 2, 4, 7, 11, 15], 15) == (2, 4)
    assert tp.two_sum_sorted([2, 7, 11, 15], 9) == (0, 1)


def test_two_sum_sorted_no_pair():
    assert tp.two_sum_sorted([1, 2, 3], 100) == (-1, -1)
    assert tp.two_sum_sorted([], 1) == (-1, -1)
    assert tp.two_sum_sorted([5], 10) == (-1, -1)


def test_remove_duplicates_in_place():
    nums = [1, 1, 2, 3, 4, 4, 5]
    k = tp.remove_duplicates(nums)
    assert k == 5
    assert nums[:k] == [1, 2, 3, 4, 5]


def test_remove_duplicates_edge_cases():
    assert tp.remove_duplicates([]) == 0
    same = [7, 7, 7]
    assert tp.remove_duplicates(same) == 1
    assert same[0] == 7


@pytest.mark.parametrize("text, expected", [
    ("racecar", True),
    ("A man, a plan, a canal, Panama!", True),
    ("hello", False),
    ("", True),
])
def test_is_palindrome(text, expected):
    assert tp.is_palindrome(text) is expected


def test_max_subarray_sum_fixed_window():
    assert sw.max_subarray_sum([2, 1, 5, 1, 3, 2], 3) == 9
    assert sw.max_subarray_sum([-3, -1, -2], 1) == -1
    assert sw.max_subarray_sum([4, 2], 2) == 6


def test_max_subarray_sum_short_input_and_bad_k():
    assert sw.max_subarray_sum([1, 2], 3) is None
    with pytest.raises(ValueError):
        sw.max_subarray_sum([1, 2, 3], 0)


@pytest.mark.parametrize("text, expected", [
    ("abcabcbb", 3),
    ("bbbbb", 1),
    ("pwwkew", 3),
    ("", 0),
    ("abba", 2),  # start must not move backwards
])
def test_length_of_longest_substring(text, expected):
    assert sw.length_of_longest_substring(text) == expected


def test_binary_search():
    nums = [1, 3, 5, 7, 9, 11]
    for i, value in enumerate(nums):
        assert bs.binary_search(nums, value) == i
    assert bs.binary_search(nums, 4) == -1
    assert bs.binary_search([], 4) == -1


def test_search_range():
    assert bs.search_range([5, 7, 7, 8, 8, 10], 8) == (3, 4)
    assert bs.search_range([5, 7, 7, 8, 8, 10], 6) == (-1, -1)
    assert bs.search_range([2, 2, 2], 2) == (0, 2)
    assert bs.search_range([], 0) == (-1, -1)


def test_search_rotated():
    nums = [4, 5, 6, 7, 0, 1, 2]
    for i, value in enumerate(nums):
        assert bs.search_rotated(nums, value) == i
    assert bs.search_rotated(nums, 3) == -1
    assert bs.search_rotated([1], 0) == -1
