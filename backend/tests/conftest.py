"""Shared fixtures: a frozen clock and a week of events."""

from datetime import datetime, timezone

import pytest

from tests.helpers import NOW, make_event


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def week_of_events():
    return [
        make_event("Started new job", datetime(2024, 3, 4, 9, 15, tzinfo=timezone.utc), 8, 7, 0.8),
        make_event("Argument with friend", datetime(2024, 3, 5, 21, 40, tzinfo=timezone.utc), -6, 8, 0.3),
        make_event("Gym streak", datetime(2024, 3, 7, 7, 5, tzinfo=timezone.utc), 3, 3, 0.6),
        make_event("Bad sleep", datetime(2024, 3, 7, 7, 50, tzinfo=timezone.utc), -2, 4, 0.2),
        make_event("Weekend trip", datetime(2024, 3, 9, 14, 0, tzinfo=timezone.utc), 7, 6, 0.5),
    ]
