"""
Season-wide forecasting that evaluates every region independently and gathers the per-region forecasts, zoom windows and weekly gains.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple

from cutoff.enums import Region
from cutoff.extrapolation.trajectory import NO_FORECAST, ForecastResult, compute_extrapolation
from cutoff.seasons import has_season_ended_for_all_regions
from cutoff.series import Observation, Season, Series
from cutoff.weekly.gains import WeekBand, weekly_gains
from cutoff.zoom.window import ZoomWindow, compute_zoom_window

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionForecast:
    region: Region
    series: Tuple[Observation, ...]
    forecast: ForecastResult
    zoom: Optional[ZoomWindow]
    gains: Tuple[WeekBand, ...]


@dataclass(frozen=True)
class SeasonForecast:
    season: Season
    regions: Dict[Region, RegionForecast]
    last_observed: Optional[int]
    ended: bool = False


def forecast_region(
    season: Season,
    region: Region,
    series: Series,
    override_end: Optional[int] = None,
    *,
    now: int,
) -> RegionForecast:
    region = Region(region)
    observations = tuple(series)
    gains = tuple(weekly_gains(season, region, observations))

    if not observations:
        log.debug("%s/%s: no observations yet", season.slug, region.value)
        return RegionForecast(region, observations, NO_FORECAST, None, gains)

    if season.window(region).has_ended(now):
        log.debug("%s/%s: season ended, skipping forecast", season.slug, region.value)
        return RegionForecast(region, observations, NO_FORECAST, None, gains)

    forecast = compute_extrapolation(season, region, observations, override_end, now=now)
    zoom = compute_zoom_window(season, region, observations, forecast, now=now)
    return RegionForecast(region, observations, forecast, zoom, gains)


async def forecast_season(
    season: Season,
    series_by_region: Mapping[Region, Series],
    override_end: Optional[int] = None,
    *,
    now: int,
    regions: Optional[Iterable[Region]] = None,
) -> SeasonForecast:
    selected = [Region(r) for r in regions] if regions is not None else list(Region)

    results = await asyncio.gather(
        *(
            asyncio.to_thread(
                forecast_region,
                season,
                region,
                series_by_region.get(region, ()),
                override_end,
                now=now,
            )
            for region in selected
        )
    )

    by_region = {result.region: result for result in results}
    timestamps = [obs.timestamp for result in results for obs in result.series]
    return SeasonForecast(
        season=season,
        regions=by_region,
        last_observed=max(timestamps) if timestamps else None,
        ended=has_season_ended_for_all_regions(season, now=now),
    )
