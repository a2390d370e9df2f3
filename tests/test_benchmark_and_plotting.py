import math

import numpy as np
import pytest

from algopatterns.complexity.benchmark import ComparisonTable, estimate_growth_exponent, format_speedup
from algopatterns.complexity.plotting import ComplexityClass, plot_comparison, plot_growth_curves


def make_table() -> ComparisonTable:
    table = ComparisonTable(
        title="Demo:",
        headers=["Size", "Slow (ms)", "Fast (ms)", "Speedup"],
        explanation="Explanation: demo.",
        missing="Too slow",
    )
    table.add_row(10, 1.5, 0.5, format_speedup(3.0))
    table.add_row(100, None, 0.75, format_speedup(None))
    return table


def test_table_render_layout():
    lines = make_table().render().splitlines()
    assert lines[0] == "Demo:"
    assert lines[1].startswith("| Size")
    assert set(lines[2]) <= {"|", "-"}
    assert "1.500" in lines[3] and "3.0x" in lines[3]
    assert "Too slow" in lines[4] and "N/A" in lines[4]
    assert lines[-1] == "Explanation: demo."
    # all table lines share one width
    assert len({len(line) for line in lines[1:5]}) == 1


def test_table_rejects_wrong_row_length():
    with pytest.raises(ValueError):
        make_table().add_row(1, 2)


def test_numeric_column_uses_nan_for_missing():
    column = make_table().numeric_column(1)
    assert column[0] == 1.5
    assert math.isnan(column[1])


def test_growth_exponent_recovers_power_law():
    sizes = np.array([10, 100, 1000, 10000], dtype=float)
    assert estimate_growth_exponent(sizes, 3 * sizes) == pytest.approx(1.0)
    assert estimate_growth_exponent(sizes, 0.01 * sizes ** 2) == pytest.approx(2.0)


def test_growth_exponent_ignores_missing_samples():
    sizes = [10, 100, 1000]
    assert estimate_growth_exponent(sizes, [float("nan"), 100, 1000]) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        estimate_growth_exponent(sizes, [float("nan"), 0, 5])
    with pytest.raises(ValueError):
        estimate_growth_exponent([1, 2], [1])


def test_complexity_class_growth():
    n = np.array([1.0, 2.0, 4.0, 8.0])
    assert ComplexityClass.CONSTANT.growth(n).tolist() == [1, 1, 1, 1]
    assert ComplexityClass.LOGARITHMIC.growth(n).tolist() == [0, 1, 2, 3]
    assert ComplexityClass.LINEARITHMIC.growth(n).tolist() == [0, 2, 8, 24]
    assert ComplexityClass.QUADRATIC.growth(n).tolist() == [1, 4, 16, 64]
    assert ComplexityClass.EXPONENTIAL.growth(n).tolist() == [2, 4, 16, 256]
    assert ComplexityClass.FACTORIAL.growth(np.array([0.0, 3.0, 5.0])) == pytest.approx([1, 6, 120])
    with pytest.raises(ValueError):
        ComplexityClass.LINEAR.growth(-1)


def test_factorial_growth_saturates_to_infinity():
    values = ComplexityClass.FACTORIAL.growth(np.array([170.0, 171.0, 200.0]))
    assert np.isfinite(values[0])
    assert np.isinf(values[1:]).all()
    assert np.isinf(ComplexityClass.FACTORIAL.growth(200.0))


def test_complexity_classes_are_ordered_for_large_n():
    values = [float(c.growth(20.0)) for c in ComplexityClass]
    assert values == sorted(values)


def test_plot_growth_curves_saves_file(tmp_path):
    target = tmp_path / "growth.png"
    plot_growth_curves(max_n=10, output=str(target))
    assert target.exists() and target.stat().st_size > 0
    with pytest.raises(ValueError):
        plot_growth_curves(max_n=1, output=str(target))


def test_plot_growth_curves_beyond_float_range(tmp_path):
    target = tmp_path / "wide.png"
    plot_growth_curves(max_n=200, output=str(target))
    assert target.exists()


def test_plot_comparison_saves_file(tmp_path):
    target = tmp_path / "cmp.png"
    plot_comparison(make_table(), output=str(target))
    assert target.exists()


def test_plot_comparison_needs_timing_columns(tmp_path):
    table = ComparisonTable(title="No timings", headers=["n", "Result"])
    table.add_row(1, 1)
    with pytest.raises(ValueError):
        plot_comparison(table, output=str(tmp_path / "x.png"))
