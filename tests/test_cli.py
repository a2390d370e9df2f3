import logging

import pytest

from algopatterns.main import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("algopatterns")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: algopatterns" in capsys.readouterr().out


def test_list_filters_by_pattern(capsys):
    assert main(["list", "--pattern", "trie"]) == 0
    out = capsys.readouterr().out
    assert "longest_common_prefix" in out
    assert "two_sum_sorted" not in out


def test_list_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["list", "--pattern", "nope"])


def test_describe_prints_lesson_and_catalogue(capsys):
    assert main(["describe", "sliding_window"]) == 0
    out = capsys.readouterr().out
    assert "Sliding Window\n==============" in out
    assert "length_of_longest_substring: time O(n)" in out


def test_describe_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["describe", "quantum_sort"])


def test_examples_walkthrough(capsys):
    assert main(["examples", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "=== O(1) - Constant Time Operation ===" in out
    assert "Fibonacci(20) = 6765" in out
    assert "Permutations of 8 elements: 40320" in out
    assert "3x3 Matrix: [[0, 0, 0], [0, 1, 2], [0, 2, 4]]" in out


def test_optimize_with_small_sizes(capsys):
    assert main(["optimize", "--sizes", "10", "100"]) == 0
    out = capsys.readouterr().out
    assert "Comparison of duplicate finding algorithms:" in out
    assert "Comparison of search algorithms on sorted arrays:" in out
    assert "====== CONCLUSION ======" in out


def test_exercises_walkthrough(capsys):
    assert main(["exercises"]) == 0
    out = capsys.readouterr().out
    assert "Stack overflow (recursion too deep)" in out
    assert "First non-repeating character in 'loveleetcode': v" in out
    assert "Merged: [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]" in out


def test_plot_bare_name_goes_to_output_dir(output_dir):
    assert main(["plot", "--max-n", "8", "--output", "growth.png"]) == 0
    assert (output_dir / "growth.png").exists()


def test_verbose_and_log_file(tmp_path, capsys):
    log_file = tmp_path / "run.log"
    assert main(["--verbose", "--log-file", str(log_file), "list"]) == 0
    assert "Catalogue holds" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("size", ["-5", "0", "ten"])
def test_optimize_rejects_non_positive_sizes(size, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["optimize", "--sizes", "10", size])
    assert excinfo.value.code == 2
    assert "--sizes" in capsys.readouterr().err


def test_plot_rejects_tiny_max_n(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["plot", "--max-n", "1"])
    assert excinfo.value.code == 2
    assert "--max-n must be at least 2" in capsys.readouterr().err


def test_commands_log_their_duration(output_dir, caplog):
    with caplog.at_level(logging.INFO, logger="algopatterns"):
        assert main(["plot", "--max-n", "4", "--output", "timed.png"]) == 0
    assert "_plot finished in" in caplog.text
