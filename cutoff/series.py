"""
Observation series and season metadata consumed by the forecasting engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from config import DAY_MS
from cutoff.enums import CrossFactionSupport, Faction, Region


@dataclass(frozen=True)
class Observation:
    timestamp: int
    score: float
    faction: Optional[Faction] = None

    @property
    def is_combined(self) -> bool:
        return self.faction is None


Series = Sequence[Observation]


@dataclass(frozen=True)
class SeasonWindow:
    start: Optional[int]
    end: Optional[int]

    def has_ended(self, now: int) -> bool:
        return self.end is not None and now >= self.end

    def days_until_end(self, now: int) -> Optional[float]:
        if self.end is not None and self.end > now:
            return (self.end - now) / DAY_MS
        return None


@dataclass(frozen=True)
class Season:
    slug: str
    start_dates: Dict[Region, Optional[int]] = field(default_factory=dict)
    end_dates: Dict[Region, Optional[int]] = field(default_factory=dict)
    cross_faction_support: CrossFactionSupport = CrossFactionSupport.none

    def window(self, region: Region) -> SeasonWindow:
        return SeasonWindow(
            start=self.start_dates.get(region),
            end=self.end_dates.get(region),
        )
