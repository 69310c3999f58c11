import math

import pytest

from gridgeom import equal, greater, greater_equal, less, less_equal, not_equal

VALUES = [0.0, 1.0, -3.25, 7.5, 1e-3, -0.1]
PRECISIONS = [1, 5, 12, 15]


@pytest.mark.parametrize("x", VALUES)
@pytest.mark.parametrize("precision", PRECISIONS)
def test_value_equals_itself(x, precision):
    assert equal(x, x, precision)
    assert not not_equal(x, x, precision)
    assert greater_equal(x, x, precision)
    assert less_equal(x, x, precision)
    assert not greater(x, x, precision)
    assert not less(x, x, precision)


@pytest.mark.parametrize(
    "x, y, precision",
    [
        (1.0, 2.5, 1),
        (-5.0, -3.5, 1),
        (0.12, 0.135, 3),
        (1.0000001, 1.0000015, 7),
        (-1e-4, 1e-4, 5),
    ],
)
def test_clearly_separated_values_are_ordered(x, y, precision):
    assert abs(x - y) > 10 ** (1 - precision)
    assert less(x, y, precision)
    assert greater(y, x, precision)
    assert not equal(x, y, precision)
    assert not_equal(x, y, precision)
    assert less_equal(x, y, precision)
    assert greater_equal(y, x, precision)
    assert not greater_equal(x, y, precision)
    assert not less_equal(y, x, precision)


def test_values_within_mask_are_equal():
    assert equal(1.0, 1.0 + 1e-7, 6)
    assert not equal(1.0, 1.0 + 1e-5, 6)


def test_difference_of_exactly_the_mask_is_not_equal():
    # 1.0 + 0.1 rounds to the same double as 1.1
    assert not equal(1.0, 1.1, 1)
    assert less(1.0, 1.1, 1)
    assert greater(1.1, 1.0, 1)


def test_less_and_greater_disagree_below_the_truncation_step():
    # less() truncates both values to one decimal place first, greater() does not
    assert greater(1.04, 1.01, 1)
    assert not less(1.01, 1.04, 1)
    assert equal(1.01, 1.04, 1)


def test_truncation_can_order_values_that_equal_calls_close():
    assert equal(1.04, 1.06, 1)
    assert less(1.04, 1.06, 1)
    assert less_equal(1.04, 1.06, 1)


@pytest.mark.parametrize("precision", [0, -3])
def test_invalid_precision_fails_closed(precision, diagnostics):
    assert not equal(1.0, 1.0, precision)
    assert not greater(2.0, 1.0, precision)
    assert not less(1.0, 2.0, precision)
    assert not greater_equal(2.0, 1.0, precision)
    assert not less_equal(1.0, 2.0, precision)
    assert not_equal(1.0, 1.0, precision)
    operations = {operation for component, operation, _ in diagnostics if component == "compare"}
    assert {"equal", "greater", "less"} <= operations


def test_precision_above_machine_precision_is_clamped():
    assert equal(0.3, 0.1 + 0.2, 40)


@pytest.mark.parametrize("x", [16.0, 123.456, -1e16, -3e20, 2.0 ** 60, math.inf, -math.inf])
@pytest.mark.parametrize("precision", [1, 15])
def test_large_values_equal_themselves(x, precision):
    # the mask is smaller than the spacing of doubles at these magnitudes
    assert equal(x, x, precision)
    assert not not_equal(x, x, precision)
    assert greater_equal(x, x, precision)
    assert less_equal(x, x, precision)


def test_distinct_large_values_are_not_equal_at_full_precision():
    assert not equal(16.0, 16.5, 15)
    assert greater(16.5, 16.0, 15)
    assert not_equal(1e16, 1e16 + 2.0, 1)
