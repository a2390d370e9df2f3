import pytest

from algopatterns.patterns import backtracking as bt
from algopatterns.patterns import dynamic_programming as dp


def test_subsets_order_and_count():
    assert bt.subsets([1, 2, 3]) == [[], [1], [1, 2], [1, 2, 3], [1, 3], [2], [2, 3], [3]]
    assert bt.subsets([]) == [[]]


def test_permute():
    assert bt.permute([1, 2, 3]) == [
        [1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1],
    ]
    assert len(bt.permute(range(5))) == 120


def test_solve_n_queens_four():
    assert bt.solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


@pytest.mark.parametrize("n, count", [(1, 1), (2, 0), (3, 0), (5, 10), (6, 4), (8, 92)])
def test_solve_n_queens_counts(n, count):
    assert len(bt.solve_n_queens(n)) == count


def test_solve_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        bt.solve_n_queens(-1)


@pytest.mark.parametrize("fn", [dp.fib_memo, dp.fib_tab, dp.fib_optimized])
def test_fibonacci_variants(fn):
    assert [fn(n) for n in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
    assert fn(50) == 12586269025
    with pytest.raises(ValueError):
        fn(-1)


def test_length_of_lis():
    assert dp.length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert dp.length_of_lis([7, 7, 7]) == 1
    assert dp.length_of_lis([]) == 0


def test_knapsack():
    assert dp.knapsack([60, 100, 120], [10, 20, 30], 50) == 220
    assert dp.knapsack([1, 2], [5, 6], 4) == 0
    assert dp.knapsack([], [], 10) == 0


def test_knapsack_validation():
    with pytest.raises(ValueError):
        dp.knapsack([1], [1, 2], 3)
    with pytest.raises(ValueError):
        dp.knapsack([1], [1], -1)
    with pytest.raises(ValueError):
        dp.knapsack([5, 3], [2, -1], 4)
