"""
Handling of the caller-chosen forecast end date used for seasons without an announced end.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

log = logging.getLogger(__name__)


def _to_utc(ts_ms: float) -> datetime:
    return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc)


def _to_ms(moment: datetime) -> int:
    return int(round(moment.timestamp() * 1000))


def parse_override_end(raw: Optional[str], *, now: int) -> Optional[int]:
    """Parse an ISO date or datetime into epoch ms.

    Naive values are read as UTC. Missing, unparseable and past values all
    come back as ``None`` so a bad override never fails a forecast.
    """
    if not raw:
        return None

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except (TypeError, ValueError):
        log.debug("ignoring unparseable override end %r", raw)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    ts = _to_ms(parsed)
    if ts < now:
        log.debug("ignoring override end %r in the past", raw)
        return None
    return ts


def align_to_start_hour(override_end: int, season_start: int) -> int:
    # override dates carry no time of day; seasons roll over at the regional start hour
    start_hour = _to_utc(season_start).hour
    return _to_ms(_to_utc(override_end).replace(hour=start_hour))
