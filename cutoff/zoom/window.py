"""
Initial visible time range for a region's chart, looking back further when a forecast extends the series and less when the season is about to close.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from config import WEEK_MS, settings
from cutoff.enums import Region
from cutoff.extrapolation.trajectory import ForecastResult
from cutoff.series import Season, Series


class ZoomWindow(NamedTuple):
    start: float
    end: float


def _offset_weeks(days_until_end: Optional[float], has_forecast: bool) -> float:
    if days_until_end is not None:
        if days_until_end < 1:
            return settings.zoom_offset_closing_weeks
        if days_until_end < 7:
            with_forecast, without = settings.zoom_offset_final_week
            return with_forecast if has_forecast else without
    with_forecast, without = settings.zoom_offset_default
    return with_forecast if has_forecast else without


def compute_zoom_window(
    season: Season,
    region: Region,
    series: Series,
    forecast: Optional[ForecastResult],
    *,
    now: int,
) -> Optional[ZoomWindow]:
    if not series:
        return None

    has_forecast = bool(forecast)
    zoom_end = forecast.last_timestamp if has_forecast else series[-1].timestamp

    days_until_end = season.window(region).days_until_end(now)
    threshold = zoom_end - _offset_weeks(days_until_end, has_forecast) * WEEK_MS

    zoom_start = next(
        (obs.timestamp for obs in reversed(series) if obs.timestamp < threshold),
        0,
    )
    return ZoomWindow(start=zoom_start, end=zoom_end)
