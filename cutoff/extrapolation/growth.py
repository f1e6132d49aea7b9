"""
Historical weekly growth sampling and recency-weighted daily growth estimation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from config import WEEK_MS, settings
from cutoff.enums import CrossFactionSupport
from cutoff.series import Series
from cutoff.weekly.delta import compute_weekly_delta
from cutoff.weekly.gains import season_week_count


def weekly_growth_samples(
    series: Series,
    mode: CrossFactionSupport,
    start: int,
    end: Optional[int],
) -> List[float]:
    """Combined-bucket delta of every season week, minus empty weeks and warm-up.

    The combined bucket is read regardless of ``mode``; under ``none`` every
    week therefore comes out empty and callers fall back to the linear ratio.
    """
    deltas: List[float] = []
    for index in range(season_week_count(start, end)):
        week_start = start + index * WEEK_MS
        delta = compute_weekly_delta(
            series, mode, index == 0, week_start, week_start + WEEK_MS
        ).combined
        if delta:
            deltas.append(delta)
    return deltas[settings.warmup_weeks:]


def recency_weights(count: int) -> np.ndarray:
    # most recent week weighs 1.0, each older week loses weight_decay down to weight_floor
    age = count - np.arange(count) - 1
    return np.maximum(1.0 - age * settings.weight_decay, settings.weight_floor)


def weighted_daily_growth(samples: Sequence[float]) -> float:
    if not samples:
        raise ValueError("weighted growth needs at least one weekly sample")
    values = np.asarray(samples, dtype=float)
    weights = recency_weights(len(values))
    return float(np.sum(values * weights) / len(values) / 7)
