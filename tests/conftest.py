import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import DAY_MS
from cutoff.enums import CrossFactionSupport, Region
from cutoff.series import Observation, Season

# sl-season-3 EU start, 03:00 UTC
SEASON_START = 1_646_190_000_000


@pytest.fixture
def season_start() -> int:
    return SEASON_START


@pytest.fixture
def make_series():
    """Build one observation per day at noon-offset, scoring ``per_day * day``.

    Sampling half a day after midnight keeps every snapshot clear of the
    inclusive week boundaries, so each week sees exactly seven snapshots.
    """

    def _make(days: int, per_day: float = 10.0, start: int = SEASON_START, faction=None):
        return [
            Observation(
                timestamp=int(start + (day + 0.5) * DAY_MS),
                score=per_day * day,
                faction=faction,
            )
            for day in range(days + 1)
        ]

    return _make


@pytest.fixture
def make_season():
    def _make(
        end_days=None,
        mode: CrossFactionSupport = CrossFactionSupport.complete,
        start: int = SEASON_START,
        region: Region = Region.eu,
    ) -> Season:
        end = start + int(end_days * DAY_MS) if end_days is not None else None
        return Season(
            slug="sl-season-3",
            start_dates={region: start},
            end_dates={region: end},
            cross_faction_support=mode,
        )

    return _make
