"""
Enumerations for Regions, Factions, Cross-Faction Support Modes and Forecast Kinds

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Region(str, Enum):
    eu = "eu"
    us = "us"
    tw = "tw"
    kr = "kr"


class Faction(str, Enum):
    horde = "horde"
    alliance = "alliance"


class CrossFactionSupport(str, Enum):
    none = "none"
    partial = "partial"
    complete = "complete"

    @property
    def tracks_factions(self) -> bool:
        return self is not CrossFactionSupport.complete

    @property
    def tracks_combined(self) -> bool:
        return self is not CrossFactionSupport.none


class ForecastKind(str, Enum):
    none = "none"
    dense = "dense"
    segment = "segment"
