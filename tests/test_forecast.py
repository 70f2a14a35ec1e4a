from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from kata.forecast import (
    URL,
    DailyForecast,
    build_params,
    fetch_forecast,
    format_forecast,
    main,
    parse_forecast,
)

PAYLOAD = {
    "daily": {
        "time": ["2023-05-01", "2023-05-02"],
        "temperature_2m_max": [25.5, 22.0],
        "temperature_2m_min": [15.0, 14.5],
        "weathercode": [3.0, 61.0],
    }
}


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_build_params():
    params = build_params()
    assert ("latitude", "35.6785") in params
    assert ("longitude", "139.6823") in params
    assert ("timezone", "Asia/Tokyo") in params
    assert [v for k, v in params if k == "daily"] == [
        "temperature_2m_max",
        "temperature_2m_min",
        "weathercode",
    ]


def test_parse_forecast():
    days = parse_forecast(PAYLOAD)
    assert days == [
        DailyForecast("2023-05-01", 25.5, 15.0, 3.0),
        DailyForecast("2023-05-02", 22.0, 14.5, 61.0),
    ]


def test_parse_forecast_missing_daily():
    with pytest.raises(ValueError):
        parse_forecast({})


def test_parse_forecast_short_column():
    payload = {"daily": dict(PAYLOAD["daily"], weathercode=[3.0])}
    with pytest.raises(ValueError):
        parse_forecast(payload)


def test_format_forecast():
    text = format_forecast([DailyForecast("2023-05-01", 25.5, 15.0, 3.0)])
    assert text == "日付：2023-05-01 最高気温：25.5 最低気温：15 気象コード：3"


def test_format_forecast_one_line_per_day():
    assert len(format_forecast(parse_forecast(PAYLOAD)).splitlines()) == 2


def test_fetch_forecast(mocked):
    mocked.add(responses.GET, URL, json=PAYLOAD)
    assert fetch_forecast() == parse_forecast(PAYLOAD)
    query = parse_qs(urlsplit(mocked.calls[0].request.url).query)
    assert query["daily"] == ["temperature_2m_max", "temperature_2m_min", "weathercode"]
    assert query["timezone"] == ["Asia/Tokyo"]


def test_fetch_forecast_http_error(mocked):
    mocked.add(responses.GET, URL, status=500)
    with pytest.raises(requests.HTTPError):
        fetch_forecast()


def test_main_reports_error(mocked, capsys):
    mocked.add(responses.GET, URL, json={"unexpected": True})
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error:")