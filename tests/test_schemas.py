"""
Test cases for payload validation and the command line entry point.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest
from pydantic import ValidationError

import main
from config import DAY_MS
from cutoff.enums import CrossFactionSupport, Faction, ForecastKind, Region
from cutoff.exceptions import InvalidPayload
from schemas.requests import ForecastRequest


def _payload(season_start, make_series, **extra):
    series = make_series(69)
    body = {
        "season": {
            "slug": "sl-season-3",
            "start_dates": {"eu": season_start, "us": season_start},
            "end_dates": {"eu": season_start + 140 * DAY_MS, "us": None},
            "cross_faction_support": "complete",
        },
        "series": {
            "eu": [{"timestamp": o.timestamp, "score": o.score} for o in reversed(series)],
        },
        "now": series[-1].timestamp,
    }
    body.update(extra)
    return body


def test_request_builds_domain_objects(season_start, make_series):
    req = ForecastRequest.model_validate(_payload(season_start, make_series))
    season = req.season.to_season()
    assert season.cross_faction_support is CrossFactionSupport.complete
    assert season.window(Region.eu).end == season_start + 140 * DAY_MS
    series = req.to_series()[Region.eu]
    assert [o.timestamp for o in series] == sorted(o.timestamp for o in series)


def test_request_rejects_negative_scores():
    with pytest.raises(ValidationError):
        ForecastRequest.model_validate({
            "season": {"slug": "s"},
            "series": {"eu": [{"timestamp": 1, "score": -1}]},
        })


def test_request_rejects_unknown_faction():
    with pytest.raises(ValidationError):
        ForecastRequest.model_validate({
            "season": {"slug": "s"},
            "series": {"eu": [{"timestamp": 1, "score": 1, "faction": "pandaren"}]},
        })


def test_request_parses_faction():
    req = ForecastRequest.model_validate({
        "season": {"slug": "s"},
        "series": {"us": [{"timestamp": 1, "score": 1, "faction": "horde"}]},
    })
    assert req.to_series()[Region.us][0].faction is Faction.horde


def test_load_request_wraps_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidPayload):
        main.load_request(str(bad))
    with pytest.raises(InvalidPayload):
        main.load_request(str(tmp_path / "missing.json"))


def test_main_prints_forecast(tmp_path, capsys, season_start, make_series):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(_payload(season_start, make_series)), encoding="utf-8")

    assert main.main([str(path)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["slug"] == "sl-season-3"
    eu = out["regions"]["eu"]
    assert eu["forecast"]["kind"] == ForecastKind.dense.value
    assert eu["forecast"]["points"][-1][1] == 1143.2
    assert eu["zoom"][1] == season_start + 140 * DAY_MS
    assert out["regions"]["us"]["forecast"] == {"kind": "none", "points": []}


def test_main_invalid_payload_exits_nonzero(tmp_path):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({"series": {}}), encoding="utf-8")
    assert main.main([str(path)]) == 1


CATALOG = {
    "sl-season-4": {"eu": 1_667_343_600_000, "us": 1_667_300_400_000},
    "sl-season-3": {"eu": 1_646_190_000_000, "us": 1_646_146_800_000},
}


def test_catalog_fills_missing_dates(season_start):
    req = ForecastRequest.model_validate({
        "season": {"slug": "sl-season-3", "end_dates": {"eu": season_start + 10 * DAY_MS}},
        "catalog": CATALOG,
    })
    season = req.to_season()
    derived_end = CATALOG["sl-season-4"]["eu"] - 7 * DAY_MS
    assert season.window(Region.eu).start == season_start
    assert season.window(Region.eu).end == season_start + 10 * DAY_MS
    assert season.window(Region.us).start == CATALOG["sl-season-3"]["us"]
    assert season.window(Region.us).end == derived_end
    assert season.window(Region.kr).start is None


def test_catalog_supplies_latest_slug():
    req = ForecastRequest.model_validate({"season": {}, "catalog": CATALOG})
    season = req.to_season()
    assert season.slug == "sl-season-4"
    assert season.window(Region.eu).start == CATALOG["sl-season-4"]["eu"]
    assert season.window(Region.eu).end is None


def test_slug_required_without_catalog():
    with pytest.raises(ValidationError):
        ForecastRequest.model_validate({"season": {"cross_faction_support": "none"}})


def test_resolve_now_prefers_explicit_clock():
    assert main.resolve_now(0, 5) == 0
    assert main.resolve_now(None, 0) == 0
    assert main.resolve_now(None, 5) == 5
    assert main.resolve_now(7, None) == 7
    assert main.resolve_now(None, None) > 0


def test_main_honours_explicit_zero_now(tmp_path, capsys, season_start, make_series):
    # the payload clock is past the EU end, an explicit zero clock is not
    payload = _payload(season_start, make_series, now=season_start + 200 * DAY_MS)
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    assert main.main([str(path)]) == 0
    late = json.loads(capsys.readouterr().out)
    assert late["regions"]["eu"]["forecast"]["kind"] == "none"

    assert main.main([str(path), "--now", "0"]) == 0
    early = json.loads(capsys.readouterr().out)
    assert early["regions"]["eu"]["forecast"]["kind"] == ForecastKind.dense.value
    assert early["ended"] is False


def test_main_reports_season_ended(tmp_path, capsys, season_start, make_series):
    payload = _payload(season_start, make_series, now=season_start + 300 * DAY_MS)
    payload["catalog"] = CATALOG
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    assert main.main([str(path)]) == 0

    out = json.loads(capsys.readouterr().out)
    # eu ends from the payload, every other region from the successor season
    assert out["ended"] is True
    assert out["regions"]["eu"]["forecast"]["kind"] == "none"
