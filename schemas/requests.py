from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from cutoff.enums import CrossFactionSupport, Faction, Region
from cutoff.seasons import fill_from_catalog, latest_season_slug
from cutoff.series import Observation, Season


class ObservationPayload(BaseModel):
    timestamp: int
    score: float = Field(ge=0.0)
    faction: Optional[Faction] = None

    def to_observation(self) -> Observation:
        return Observation(timestamp=self.timestamp, score=self.score, faction=self.faction)


class SeasonPayload(BaseModel):
    slug: Optional[str] = None
    start_dates: Dict[Region, Optional[int]] = Field(default_factory=dict)
    end_dates: Dict[Region, Optional[int]] = Field(default_factory=dict)
    cross_faction_support: CrossFactionSupport = CrossFactionSupport.none

    def to_season(self, default_slug: Optional[str] = None) -> Season:
        return Season(
            slug=self.slug or default_slug,
            start_dates=dict(self.start_dates),
            end_dates=dict(self.end_dates),
            cross_faction_support=self.cross_faction_support,
        )


class ForecastRequest(BaseModel):
    season: SeasonPayload
    series: Dict[Region, List[ObservationPayload]] = Field(default_factory=dict)
    override_end: Optional[str] = None
    now: Optional[int] = None
    # start dates per season slug, newest season first
    catalog: Dict[str, Dict[Region, int]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _require_slug(self) -> "ForecastRequest":
        if not self.season.slug and not self.catalog:
            raise ValueError("season.slug is required when no catalog is given")
        return self

    def to_season(self) -> Season:
        season = self.season.to_season(latest_season_slug(self.catalog))
        return fill_from_catalog(season, self.catalog)

    def to_series(self) -> Dict[Region, Tuple[Observation, ...]]:
        return {
            region: tuple(
                obs.to_observation() for obs in sorted(items, key=lambda o: o.timestamp)
            )
            for region, items in self.series.items()
        }
