"""
Weekly score change per faction bucket, used both as the growth signal for extrapolation and for the per-week gain bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from cutoff.enums import CrossFactionSupport, Faction
from cutoff.series import Observation, Series


@dataclass(frozen=True)
class WeeklyDelta:
    horde: float = 0.0
    alliance: float = 0.0
    combined: float = 0.0


_Indexed = List[Tuple[int, Observation]]


def _bucket_delta(bucket: _Indexed, is_first_week: bool) -> float:
    if not bucket:
        return 0.0
    first_index, first = bucket[0]
    _, last = bucket[-1]
    # the opening snapshot of a season has no prior progress to subtract
    baseline = 0.0 if is_first_week and first_index == 0 else first.score
    return last.score - baseline


def _select(matches: _Indexed, predicate: Callable[[Observation], bool]) -> _Indexed:
    return [(idx, obs) for idx, obs in matches if predicate(obs)]


def compute_weekly_delta(
    series: Series,
    mode: CrossFactionSupport,
    is_first_week: bool,
    start: float,
    end: float,
) -> WeeklyDelta:
    matches: _Indexed = [
        (idx, obs) for idx, obs in enumerate(series) if start <= obs.timestamp <= end
    ]

    mode = CrossFactionSupport(mode)
    horde = alliance = combined = 0.0

    if mode.tracks_factions:
        horde = _bucket_delta(_select(matches, lambda o: o.faction == Faction.horde), is_first_week)
        alliance = _bucket_delta(_select(matches, lambda o: o.faction == Faction.alliance), is_first_week)

    if mode.tracks_combined:
        # under partial support only untagged snapshots are combined
        bucket = matches if not mode.tracks_factions else _select(matches, lambda o: o.is_combined)
        combined = _bucket_delta(bucket, is_first_week)

    return WeeklyDelta(horde=horde, alliance=alliance, combined=combined)
