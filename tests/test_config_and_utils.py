import logging
import os

import numpy as np
import pytest

from algopatterns import config
from algopatterns.logging_config import resolve_level, setup_logging
from algopatterns.utils import (
    generate_test_data,
    measure_time,
    sorted_evens,
    speedup,
    timer,
    with_duplicates,
)


def test_output_path_honours_environment(output_dir):
    path = config.get_output_path("plot.png")
    assert path == os.path.join(str(output_dir), "plot.png")


def test_output_root_follows_later_environment_changes(tmp_path, monkeypatch):
    monkeypatch.setenv(config.OUTPUT_DIR_ENV, str(tmp_path / "first"))
    assert config.get_output_root().endswith("first")
    monkeypatch.setenv(config.OUTPUT_DIR_ENV, str(tmp_path / "second"))
    assert config.get_output_root().endswith("second")
    assert not hasattr(config, "OUTPUT_PATH")


def test_output_path_default_root(monkeypatch):
    monkeypatch.delenv(config.OUTPUT_DIR_ENV, raising=False)
    assert config.get_output_root().endswith("output")
    with pytest.raises(ValueError):
        config.get_output_path("")


def test_resolve_level(monkeypatch):
    monkeypatch.delenv("ALGOPATTERNS_LOG_LEVEL", raising=False)
    assert resolve_level() == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR
    monkeypatch.setenv("ALGOPATTERNS_LOG_LEVEL", "debug")
    assert resolve_level() == logging.DEBUG
    monkeypatch.setenv("ALGOPATTERNS_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        resolve_level()


def test_setup_logging_replaces_handlers(tmp_path):
    logger = logging.getLogger("algopatterns")
    try:
        setup_logging(level=logging.WARNING)
        setup_logging(level=logging.WARNING, log_file=str(tmp_path / "a.log"))
        assert len(logger.handlers) == 2
        assert logger.level == logging.WARNING
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_measure_time_and_timer(caplog):
    m = measure_time(sum, [1, 2, 3])
    assert m.result == 6
    assert m.time_ms >= 0
    assert m.formatted(1).count(".") == 1

    @timer
    def double(x):
        return 2 * x

    with caplog.at_level(logging.INFO, logger="algopatterns"):
        assert double(4) == 8
    assert "double finished in" in caplog.text


def test_speedup():
    assert speedup(10.0, 2.0) == 5.0
    assert speedup(None, 2.0) is None
    assert speedup(1.0, 0.0) is None


def test_generate_test_data_is_reproducible():
    a = generate_test_data(50, np.random.default_rng(1))
    b = generate_test_data(50, np.random.default_rng(1))
    assert a == b
    assert len(a) == 50
    assert all(isinstance(x, int) and 0 <= x < 500 for x in a)
    assert generate_test_data(0) == []
    with pytest.raises(ValueError):
        generate_test_data(-1)


def test_with_duplicates():
    data = list(range(20))
    extended = with_duplicates(data, 0.1, np.random.default_rng(0))
    assert extended[:20] == data
    assert len(extended) == 22
    assert set(extended[20:]) <= set(data)
    assert with_duplicates([], 0.5) == []
    with pytest.raises(ValueError):
        with_duplicates(data, 1.5)


def test_sorted_evens():
    assert sorted_evens(4) == [0, 2, 4, 6]
