"""Tests for free functions over several intervals."""

from functools import reduce

import pandas as pd
import pytest

from extractwindow import algebra, exceptions
from extractwindow.interval import Interval


def test_span_all_rejects_empty_input():
    with pytest.raises(exceptions.EmptyInputError):
        algebra.span_all([])


def test_span_all_single_interval_is_identity(days_ago):
    only = Interval(days_ago(3), days_ago(2))
    assert algebra.span_all([only]) == only


def test_span_all_matches_pairwise_fold(days_ago):
    """Input: three disjoint windows, unordered. Expect: bounding union == fold of span."""
    items = [
        Interval(days_ago(3), days_ago(2)),
        Interval(days_ago(9), days_ago(8)),
        Interval(days_ago(6), days_ago(5)),
    ]
    out = algebra.span_all(items)
    assert out == Interval(days_ago(9), days_ago(2))
    assert out == reduce(lambda a, b: a.span(b), items)


def test_span_all_accepts_a_generator(days_ago):
    out = algebra.span_all(Interval(days_ago(n + 1), days_ago(n)) for n in range(4))
    assert out == Interval(days_ago(4), days_ago(0))


def test_sorted_by_start_breaks_ties_shorter_first(days_ago):
    long_ = Interval(days_ago(5), days_ago(1))
    short = Interval(days_ago(5), days_ago(4))
    early = Interval(days_ago(6), days_ago(2))

    assert algebra.sorted_by_start([long_, short, early]) == [early, short, long_]


def test_sorted_by_start_does_not_mutate_input(days_ago):
    items = [Interval(days_ago(2), days_ago(1)), Interval(days_ago(4), days_ago(3))]
    snapshot = list(items)
    algebra.sorted_by_start(items)
    assert items == snapshot


def test_is_contiguous(days_ago):
    chain = [Interval(days_ago(n + 1), days_ago(n)) for n in (3, 2, 1)]
    assert algebra.is_contiguous(chain)
    assert algebra.is_contiguous(chain[:1])
    assert algebra.is_contiguous([])

    gap = [chain[0], chain[2]]
    assert not algebra.is_contiguous(gap)

    overlap = [Interval(days_ago(4), days_ago(2)), Interval(days_ago(3), days_ago(1))]
    assert not algebra.is_contiguous(overlap)


def test_total_duration(days_ago):
    items = [Interval(days_ago(4), days_ago(3)), Interval(days_ago(2), days_ago(0))]
    assert algebra.total_duration(items) == pd.Timedelta(days=3)
    assert algebra.total_duration([]) == pd.Timedelta(0)
