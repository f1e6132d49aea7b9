"""
Score trajectory extrapolation for a region's season, projecting the cutoff score either with recency-weighted weekly growth or with a simple linear ratio from the post warm-up anchor, emitted as a dense daily curve or a two-point segment.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple, Union

from config import DAY_MS, settings
from cutoff.enums import ForecastKind, Region
from cutoff.extrapolation.growth import weekly_growth_samples, weighted_daily_growth
from cutoff.extrapolation.override import align_to_start_hour
from cutoff.extrapolation.start import determine_extrapolation_start
from cutoff.numeric import to_one_digit
from cutoff.series import Observation, Season, Series

log = logging.getLogger(__name__)


class ProjectedPoint(NamedTuple):
    timestamp: float
    score: float


@dataclass(frozen=True)
class NoForecast:
    kind: ForecastKind = field(default=ForecastKind.none, init=False)

    @property
    def last_timestamp(self) -> Optional[float]:
        return None

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class DenseCurve:
    points: Tuple[ProjectedPoint, ...]
    kind: ForecastKind = field(default=ForecastKind.dense, init=False)

    @property
    def last_timestamp(self) -> float:
        return self.points[-1].timestamp


@dataclass(frozen=True)
class Segment:
    start: Observation
    end: ProjectedPoint
    kind: ForecastKind = field(default=ForecastKind.segment, init=False)

    @property
    def last_timestamp(self) -> float:
        return self.end.timestamp

    @property
    def points(self) -> Tuple[ProjectedPoint, ...]:
        return (ProjectedPoint(self.start.timestamp, self.start.score), self.end)


ForecastResult = Union[NoForecast, DenseCurve, Segment]

NO_FORECAST = NoForecast()


def _dense_curve(
    last: Observation,
    working_end: float,
    horizon_days: float,
    daily_step: float,
    final_score: float,
) -> DenseCurve:
    interval = (working_end - last.timestamp) / horizon_days
    # last observation, trunc(horizon - 1) daily points, then the working end:
    # a 21 day horizon yields 22 points
    intermediate = max(int(horizon_days - 1), 0)

    points = [ProjectedPoint(last.timestamp, last.score)]
    points.extend(
        ProjectedPoint(last.timestamp + interval * day, to_one_digit(last.score + daily_step * day))
        for day in range(1, intermediate + 1)
    )
    points.append(ProjectedPoint(working_end, final_score))
    return DenseCurve(points=tuple(points))


def resolve_season_end(
    season: Season,
    region: Region,
    override_end: Optional[int] = None,
) -> Optional[int]:
    window = season.window(region)
    if window.end is not None:
        return window.end
    if override_end is not None and window.start is not None:
        return align_to_start_hour(override_end, window.start)
    return None


def compute_extrapolation(
    season: Season,
    region: Region,
    series: Series,
    override_end: Optional[int] = None,
    *,
    now: int,
) -> ForecastResult:
    if not series:
        return NO_FORECAST

    region = Region(region)
    window = season.window(region)
    if window.has_ended(now):
        return NO_FORECAST
    if window.start is None:
        return NO_FORECAST

    anchor = determine_extrapolation_start(series, season, region)
    if anchor is None:
        return NO_FORECAST

    season_end = resolve_season_end(season, region, override_end)
    days_until_end = (
        (season_end - now) / DAY_MS if season_end is not None and season_end > now else None
    )
    horizon_days = days_until_end if days_until_end is not None else settings.default_horizon_days

    last = series[-1]
    working_end = season_end if season_end is not None else last.timestamp + horizon_days * DAY_MS
    remaining = working_end - last.timestamp
    has_room = remaining > DAY_MS and horizon_days > 0

    samples = weekly_growth_samples(series, season.cross_faction_support, window.start, season_end)

    if has_room and len(samples) >= settings.weighted_min_samples:
        daily = weighted_daily_growth(samples)
        log.debug(
            "%s/%s: weighted growth over %d weeks, %.3f per day",
            season.slug, region.value, len(samples), daily,
        )
        return _dense_curve(
            last,
            working_end,
            horizon_days,
            daily,
            to_one_digit(last.score + daily * horizon_days),
        )

    days_passed = (last.timestamp - anchor.timestamp) / DAY_MS
    factor = horizon_days / days_passed if days_passed > 0 else 0.0
    end_score = to_one_digit(last.score + (last.score - anchor.score) * factor)

    if has_room:
        log.debug("%s/%s: linear ratio projection to %.1f", season.slug, region.value, end_score)
        return _dense_curve(
            last,
            working_end,
            horizon_days,
            (end_score - last.score) / horizon_days,
            end_score,
        )

    log.debug("%s/%s: too close to call, segment to %.1f", season.slug, region.value, end_score)
    return Segment(start=last, end=ProjectedPoint(working_end, end_score))
