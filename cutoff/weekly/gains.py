"""
Per-week gain bands covering a whole season, one band per seven day week counted from the regional season start.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from config import WEEK_MS, settings
from cutoff.enums import Region
from cutoff.series import Season, Series
from cutoff.weekly.delta import WeeklyDelta, compute_weekly_delta


@dataclass(frozen=True)
class WeekBand:
    index: int
    start: int
    end: int
    delta: WeeklyDelta


def season_week_count(start: int, end: Optional[int], extra: int = 0) -> int:
    if end is None:
        return settings.fallback_season_weeks
    return max(int((end - start) / WEEK_MS + extra), 0)


def weekly_gains(season: Season, region: Region, series: Series) -> List[WeekBand]:
    window = season.window(region)
    if window.start is None:
        return []

    bands: List[WeekBand] = []
    # the band for the week the season ends in is included
    for index in range(season_week_count(window.start, window.end, extra=1)):
        week_start = window.start + index * WEEK_MS
        week_end = week_start + WEEK_MS
        bands.append(
            WeekBand(
                index=index,
                start=week_start,
                end=week_end,
                delta=compute_weekly_delta(
                    series, season.cross_faction_support, index == 0, week_start, week_end
                ),
            )
        )
    return bands
