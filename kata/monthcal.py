"""Month calendar generation and text rendering."""

from __future__ import annotations

import argparse
import calendar as _calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

_TOKYO = timezone(timedelta(hours=9), "JST")
_WEEKDAY_HEADER = " Sun Mon Tue Wed Thu Fri Sat"


@dataclass
class CalendarMonth:
    """A month laid out in Sunday-first weeks; None pads the first week."""

    year: int
    month: int
    days: list[int | None] = field(default_factory=list)


def generate_calendar(year: int, month: int) -> CalendarMonth:
    """Build the calendar for ``year``/``month``; raise ValueError for invalid dates."""
    first = date(year, month, 1)
    leading = (first.weekday() + 1) % 7
    last_day = _calendar.monthrange(year, month)[1]
    days: list[int | None] = [None] * leading
    days.extend(range(1, last_day + 1))
    return CalendarMonth(year, month, days)


def format_calendar(calendar: CalendarMonth) -> str:
    """Render the calendar as text: a title, a weekday header and one line per week."""
    cells = ["    " if day is None else f"{day:4}" for day in calendar.days]
    rows = ["".join(cells[start : start + 7]) for start in range(0, len(cells), 7)] or [""]
    return "\n".join(
        [f"{calendar.year}年{calendar.month}月のカレンダー", _WEEKDAY_HEADER, *rows]
    )


def main(argv: list[str] | None = None) -> int:
    """Print the calendar of the given month, or of the current month in Tokyo."""
    now = datetime.now(_TOKYO)
    parser = argparse.ArgumentParser(description="Print a month calendar.")
    parser.add_argument("year", nargs="?", type=int, default=now.year)
    parser.add_argument("month", nargs="?", type=int, default=now.month)
    args = parser.parse_args(argv)
    try:
        cal = generate_calendar(args.year, args.month)
    except ValueError as exc:
        parser.error(str(exc))
    print(format_calendar(cal))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())