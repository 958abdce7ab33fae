import pytest

from health_inequality.exceptions import InsufficientGroupsError, InvalidGroupCountError
from health_inequality.inequality.metrics import (
    InequalityMetrics,
    absolute_difference,
    compute_metrics,
    inequality_gradient,
)


def test_absolute_difference_last_minus_first():
    assert absolute_difference([1.0, 4.0, 9.0]) == pytest.approx(8.0)


def test_absolute_difference_single_group_is_zero():
    assert absolute_difference([7.3]) == 0.0


def test_inequality_gradient_perfect_line():
    assert inequality_gradient([2.0, 4.0, 6.0, 8.0]) == pytest.approx(2.0)


def test_inequality_gradient_matches_least_squares():
    values = [1.0, 3.0, 2.0, 5.0, 4.0]
    x = [1, 2, 3, 4, 5]
    x_bar = sum(x) / len(x)
    y_bar = sum(values) / len(values)
    slope = sum((a - x_bar) * (b - y_bar) for a, b in zip(x, values)) / sum((a - x_bar) ** 2 for a in x)
    assert inequality_gradient(values) == pytest.approx(slope)


@pytest.mark.parametrize("value", [0.1, 3.7, 1234.5678])
@pytest.mark.parametrize("n", [2, 5, 8])
def test_inequality_gradient_flat_is_exactly_zero(value, n):
    assert inequality_gradient([value] * n) == 0.0


def test_inequality_gradient_sign_follows_trend():
    assert inequality_gradient([5.0, 4.0, 1.0]) < 0
    assert inequality_gradient([1.0, 1.5, 9.0]) > 0


def test_inequality_gradient_needs_two_groups():
    with pytest.raises(InsufficientGroupsError):
        inequality_gradient([3.0])


def test_compute_metrics_single_group_raises():
    with pytest.raises(InsufficientGroupsError):
        compute_metrics([3.0])


def test_empty_distribution_rejected():
    with pytest.raises(InvalidGroupCountError):
        absolute_difference([])


def test_compute_metrics_pairs_values():
    metrics = compute_metrics([1.0, 2.0, 3.0])
    assert metrics == InequalityMetrics(ad=2.0, ig=1.0)
    assert metrics.to_dict() == {"ad": 2.0, "ig": 1.0}
