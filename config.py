"""
Constants and configuration for the season cutoff forecaster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Tuple

from pydantic_settings import BaseSettings


DAY_MS: int = 24 * 60 * 60 * 1000
WEEK_MS: int = 7 * DAY_MS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
CUTOFF_LOG_LEVEL = os.getenv("CUTOFF_LOG_LEVEL", "INFO").upper()


class Settings(BaseSettings):
    log_level: str = CUTOFF_LOG_LEVEL

    # weeks at the start of a season whose data is too volatile to anchor growth
    warmup_weeks: int = 4

    # horizon used when a season has neither an end date nor an override
    default_horizon_days: float = 21.0

    # season length assumed for weekly sampling when no end date is known
    fallback_season_weeks: int = 36

    # weighted recent growth: minimum retained weekly samples, and how much
    # weight each week further back loses before hitting the floor
    weighted_min_samples: int = 4
    weight_decay: float = 0.1
    weight_floor: float = 0.1

    # initial zoom look-back, in weeks, as (with forecast, without forecast)
    zoom_offset_closing_weeks: float = 1 + 1 / 7
    zoom_offset_final_week: Tuple[float, float] = (3.0, 2.0)
    zoom_offset_default: Tuple[float, float] = (6.0, 4.0)

    model_config = {
        "env_prefix": "CUTOFF_",
        "extra": "ignore",
    }


settings = Settings()
