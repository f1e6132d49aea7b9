"""
Entry point for the season cutoff forecaster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from typing import List, Optional

from pydantic import ValidationError

from config import LOG_FORMAT, settings
from cutoff.exceptions import InvalidPayload
from cutoff.extrapolation.override import parse_override_end
from cutoff.forecaster import forecast_season
from schemas.requests import ForecastRequest
from schemas.responses import SeasonForecastResponse

log = logging.getLogger(__name__)


def resolve_now(explicit: Optional[int], requested: Optional[int]) -> int:
    if explicit is not None:
        return explicit
    if requested is not None:
        return requested
    return int(time.time() * 1000)


def load_request(path: str) -> ForecastRequest:
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
        return ForecastRequest.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise InvalidPayload(f"{path}: {exc}") from exc


async def run(
    request: ForecastRequest,
    *,
    now: int,
    override_end: Optional[str] = None,
) -> SeasonForecastResponse:
    override = parse_override_end(override_end or request.override_end, now=now)
    season = request.to_season()
    result = await forecast_season(season, request.to_series(), override, now=now)
    log.info(
        "forecast %s for %d region(s), last observation %s",
        season.slug, len(result.regions), result.last_observed,
    )
    return SeasonForecastResponse.from_result(result)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Forecast season cutoff scores per region")
    parser.add_argument("payload", help="JSON file with the season and its per-region series")
    parser.add_argument("--override-end", help="ISO date to project to when the season has no end date")
    parser.add_argument("--now", type=int, help="evaluation instant in epoch milliseconds")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        request = load_request(args.payload)
    except InvalidPayload as exc:
        log.error("invalid payload: %s", exc)
        return 1

    now = resolve_now(args.now, request.now)
    response = asyncio.run(run(request, now=now, override_end=args.override_end))
    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
