import pandas as pd
import pytest

from extractwindow.interval import Interval

# Fixed reference instant standing in for "now"; keeps every test deterministic.
ANCHOR = pd.Timestamp("2025-01-15 00:00", tz="UTC")


@pytest.fixture
def anchor():
    return ANCHOR


@pytest.fixture
def days_ago():
    def _days_ago(n: int) -> pd.Timestamp:
        return ANCHOR - pd.Timedelta(days=n)

    return _days_ago


@pytest.fixture
def hours():
    def _hours(n: float) -> pd.Timedelta:
        return pd.Timedelta(hours=n)

    return _hours


@pytest.fixture
def window_30h(anchor):
    """[anchor, anchor + 30h): thirty whole hours."""
    return Interval(anchor, anchor + pd.Timedelta(hours=30))


@pytest.fixture
def window_10d(anchor):
    return Interval(anchor, anchor + pd.Timedelta(days=10))
