"""
Season catalog helpers: deriving season end dates from the next season's start, and season-wide status checks.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Mapping, Optional

from config import WEEK_MS
from cutoff.enums import CrossFactionSupport, Region
from cutoff.series import Season

StartDateCatalog = Mapping[str, Mapping[Region, int]]


def derive_season_endings(start_dates: StartDateCatalog) -> Dict[str, Dict[Region, int]]:
    """Derive end dates for every season that already has a successor.

    ``start_dates`` is ordered newest season first. A season ends one week
    before its successor starts in EU, and that instant is used for every
    region.
    """
    endings: Dict[str, Dict[Region, int]] = {}
    slugs = list(start_dates)
    for newer, older in zip(slugs, slugs[1:]):
        successor_start = start_dates[newer].get(Region.eu)
        if successor_start is None:
            continue
        endings[older] = {region: successor_start - WEEK_MS for region in Region}
    return endings


def latest_season_slug(start_dates: StartDateCatalog) -> Optional[str]:
    return next(iter(start_dates), None)


def season_from_catalog(
    slug: str,
    start_dates: StartDateCatalog,
    cross_faction_support: CrossFactionSupport = CrossFactionSupport.none,
) -> Optional[Season]:
    if slug not in start_dates:
        return None
    endings = derive_season_endings(start_dates).get(slug, {})
    return Season(
        slug=slug,
        start_dates=dict(start_dates[slug]),
        end_dates={region: endings.get(region) for region in Region},
        cross_faction_support=cross_faction_support,
    )


def has_season_ended_for_all_regions(season: Season, *, now: int) -> bool:
    return all(season.window(region).has_ended(now) for region in Region)


def _prefer_explicit(
    explicit: Mapping[Region, Optional[int]],
    fallback: Mapping[Region, Optional[int]],
) -> Dict[Region, Optional[int]]:
    merged: Dict[Region, Optional[int]] = {}
    for region in Region:
        value = explicit.get(region)
        merged[region] = value if value is not None else fallback.get(region)
    return merged


def fill_from_catalog(season: Season, start_dates: StartDateCatalog) -> Season:
    """Complete missing start and end dates of ``season`` from the catalog.

    Dates already set on the season win. Seasons unknown to the catalog are
    returned unchanged.
    """
    known = season_from_catalog(season.slug, start_dates, season.cross_faction_support)
    if known is None:
        return season
    return replace(
        season,
        start_dates=_prefer_explicit(season.start_dates, known.start_dates),
        end_dates=_prefer_explicit(season.end_dates, known.end_dates),
    )
