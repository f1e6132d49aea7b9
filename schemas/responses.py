from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from cutoff.enums import ForecastKind, Region
from cutoff.extrapolation.trajectory import ForecastResult
from cutoff.forecaster import RegionForecast, SeasonForecast
from cutoff.weekly.gains import WeekBand


class ForecastPayload(BaseModel):
    kind: ForecastKind
    points: List[Tuple[float, float]]

    @classmethod
    def from_result(cls, result: ForecastResult) -> "ForecastPayload":
        points = getattr(result, "points", ())
        return cls(kind=result.kind, points=[(float(ts), float(score)) for ts, score in points])


class WeekBandPayload(BaseModel):
    index: int
    start: int
    end: int
    horde: float
    alliance: float
    combined: float

    @classmethod
    def from_band(cls, band: WeekBand) -> "WeekBandPayload":
        return cls(
            index=band.index,
            start=band.start,
            end=band.end,
            horde=band.delta.horde,
            alliance=band.delta.alliance,
            combined=band.delta.combined,
        )


class RegionForecastResponse(BaseModel):
    region: Region
    observations: int
    forecast: ForecastPayload
    zoom: Optional[Tuple[float, float]] = None
    weekly_gains: List[WeekBandPayload]

    @classmethod
    def from_result(cls, result: RegionForecast) -> "RegionForecastResponse":
        return cls(
            region=result.region,
            observations=len(result.series),
            forecast=ForecastPayload.from_result(result.forecast),
            zoom=tuple(result.zoom) if result.zoom is not None else None,
            weekly_gains=[WeekBandPayload.from_band(band) for band in result.gains],
        )


class SeasonForecastResponse(BaseModel):
    slug: str
    last_observed: Optional[int] = None
    ended: bool = False
    regions: Dict[Region, RegionForecastResponse]

    @classmethod
    def from_result(cls, result: SeasonForecast) -> "SeasonForecastResponse":
        return cls(
            slug=result.season.slug,
            last_observed=result.last_observed,
            ended=result.ended,
            regions={
                region: RegionForecastResponse.from_result(item)
                for region, item in result.regions.items()
            },
        )
