"""
Payload models for feeding season data into the forecaster and serializing its results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from schemas.requests import ForecastRequest, ObservationPayload, SeasonPayload
from schemas.responses import ForecastPayload, RegionForecastResponse, SeasonForecastResponse, WeekBandPayload

__all__ = [
    "ForecastRequest",
    "ObservationPayload",
    "SeasonPayload",
    "ForecastPayload",
    "RegionForecastResponse",
    "SeasonForecastResponse",
    "WeekBandPayload",
]
