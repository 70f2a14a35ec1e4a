"""Daily weather forecast for Tokyo from the Open-Meteo API."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import requests

URL = "https://api.open-meteo.com/v1/forecast"
LATITUDE = "35.6785"
LONGITUDE = "139.6823"
TIMEZONE = "Asia/Tokyo"
_TIMEOUT = 30


@dataclass(frozen=True)
class DailyForecast:
    """One day's maximum and minimum temperature and WMO weather code."""

    date: str
    temperature_max: float
    temperature_min: float
    weathercode: float


def build_params() -> list[tuple[str, str]]:
    """Return the query parameters for the request."""
    return [
        ("latitude", LATITUDE),
        ("longitude", LONGITUDE),
        ("daily", "temperature_2m_max"),
        ("daily", "temperature_2m_min"),
        ("daily", "weathercode"),
        ("timezone", TIMEZONE),
    ]


def parse_forecast(payload: Mapping[str, Any]) -> list[DailyForecast]:
    """Turn the API's JSON payload into one entry per day."""
    try:
        daily = payload["daily"]
        times = daily["time"]
        maxima = daily["temperature_2m_max"]
        minima = daily["temperature_2m_min"]
        codes = daily["weathercode"]
        if any(len(column) < len(times) for column in (maxima, minima, codes)):
            raise ValueError("forecast columns are shorter than the list of dates")
        return [
            DailyForecast(str(day), float(high), float(low), float(code))
            for day, high, low, code in zip(times, maxima, minima, codes)
        ]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed forecast payload: {exc!r}") from exc


def fetch_forecast(session: requests.Session | None = None) -> list[DailyForecast]:
    """Request the forecast and return the parsed days."""
    if session is None:
        with requests.Session() as own:
            return fetch_forecast(own)
    response = session.get(URL, params=build_params(), timeout=_TIMEOUT)
    response.raise_for_status()
    return parse_forecast(response.json())


def _format_number(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def format_forecast(days: Iterable[DailyForecast]) -> str:
    """Render one line per day."""
    return "\n".join(
        f"日付：{d.date} 最高気温：{_format_number(d.temperature_max)} "
        f"最低気温：{_format_number(d.temperature_min)} "
        f"気象コード：{_format_number(d.weathercode)}"
        for d in days
    )


def main(argv: list[str] | None = None) -> int:
    """Fetch and print the forecast."""
    try:
        days = fetch_forecast()
    except (requests.RequestException, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    output = format_forecast(days)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())