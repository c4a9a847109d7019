"""Tests for plan invariant checks."""

import pandas as pd
import pytest

from extractwindow import exceptions, validate
from extractwindow.interval import Interval


def _iv(a, b, anchor):
    return Interval(anchor + pd.Timedelta(hours=a), anchor + pd.Timedelta(hours=b))


def test_assert_plan_accepts_exact_cover(anchor):
    total = _iv(0, 6, anchor)
    validate.assert_plan([_iv(0, 2, anchor), _iv(2, 6, anchor)], total)


@pytest.mark.parametrize(
    "bounds",
    [
        [],
        [(1, 6)],  # late start
        [(0, 5)],  # early end
        [(0, 2), (3, 6)],  # gap
        [(0, 3), (2, 6)],  # overlap
    ],
)
def test_assert_plan_rejects_bad_covers(anchor, bounds):
    total = _iv(0, 6, anchor)
    plan = [_iv(a, b, anchor) for a, b in bounds]
    with pytest.raises(exceptions.ExtractWindowError):
        validate.assert_plan(plan, total)


def test_assert_plan_checks_max_length(anchor):
    total = _iv(0, 6, anchor)
    plan = [_iv(0, 2, anchor), _iv(2, 6, anchor)]
    with pytest.raises(exceptions.ExtractWindowError):
        validate.assert_plan(plan, total, max_length=pd.Timedelta(hours=3))
