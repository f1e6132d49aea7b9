"""
Season cutoff forecasting engine: weekly deltas, extrapolation and zoom windows for regional ranking scores.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cutoff.enums import CrossFactionSupport, Faction, ForecastKind, Region
from cutoff.extrapolation import (
    NO_FORECAST,
    DenseCurve,
    ForecastResult,
    NoForecast,
    ProjectedPoint,
    Segment,
    compute_extrapolation,
    parse_override_end,
)
from cutoff.forecaster import RegionForecast, SeasonForecast, forecast_region, forecast_season
from cutoff.seasons import (
    derive_season_endings,
    fill_from_catalog,
    has_season_ended_for_all_regions,
    latest_season_slug,
    season_from_catalog,
)
from cutoff.series import Observation, Season, SeasonWindow
from cutoff.weekly import WeeklyDelta, compute_weekly_delta, weekly_gains
from cutoff.zoom import ZoomWindow, compute_zoom_window

__all__ = [
    "CrossFactionSupport",
    "Faction",
    "ForecastKind",
    "Region",
    "NO_FORECAST",
    "DenseCurve",
    "ForecastResult",
    "NoForecast",
    "ProjectedPoint",
    "Segment",
    "compute_extrapolation",
    "parse_override_end",
    "RegionForecast",
    "SeasonForecast",
    "forecast_region",
    "forecast_season",
    "derive_season_endings",
    "fill_from_catalog",
    "has_season_ended_for_all_regions",
    "latest_season_slug",
    "season_from_catalog",
    "Observation",
    "Season",
    "SeasonWindow",
    "WeeklyDelta",
    "compute_weekly_delta",
    "weekly_gains",
    "ZoomWindow",
    "compute_zoom_window",
]
