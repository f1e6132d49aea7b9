"""
Selection of the first observation trustworthy enough to anchor a growth estimate, skipping the early-season warm-up weeks.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from config import WEEK_MS, settings
from cutoff.enums import Region
from cutoff.series import Observation, Season, Series


def determine_extrapolation_start(
    series: Series,
    season: Season,
    region: Region,
) -> Optional[Observation]:
    start = season.window(region).start
    if start is None:
        return None

    threshold = start + settings.warmup_weeks * WEEK_MS
    return next((obs for obs in series if obs.timestamp >= threshold), None)
