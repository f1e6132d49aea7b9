"""
Extrapolation of a region's season score toward the season end, from anchor selection through growth estimation to the projected trajectory.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cutoff.extrapolation.growth import recency_weights, weekly_growth_samples, weighted_daily_growth
from cutoff.extrapolation.override import align_to_start_hour, parse_override_end
from cutoff.extrapolation.start import determine_extrapolation_start
from cutoff.extrapolation.trajectory import (
    NO_FORECAST,
    DenseCurve,
    ForecastResult,
    NoForecast,
    ProjectedPoint,
    Segment,
    compute_extrapolation,
    resolve_season_end,
)

__all__ = [
    "recency_weights",
    "weekly_growth_samples",
    "weighted_daily_growth",
    "align_to_start_hour",
    "parse_override_end",
    "determine_extrapolation_start",
    "NO_FORECAST",
    "DenseCurve",
    "ForecastResult",
    "NoForecast",
    "ProjectedPoint",
    "Segment",
    "compute_extrapolation",
    "resolve_season_end",
]
