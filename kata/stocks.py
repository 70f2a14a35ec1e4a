"""Filter and print daily or monthly index changes from a CSV file."""

from __future__ import annotations

import argparse
import csv
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CSV_PATH = "data/topixdtd_20210804-20221020.csv"


@dataclass(frozen=True)
class Record:
    """One row: date, change from the previous period (as text) and change in percent."""

    date: str
    previous: str
    previous_ratio: float


def read_csv(path: str | Path = DEFAULT_CSV_PATH) -> list[Record]:
    """Read records from a CSV file whose first row is a header.

    The first three columns are the date, the change and the change in percent.
    """
    records: list[Record] = []
    with Path(path).open(encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        for line_no, row in enumerate(reader, start=2):
            if not row:
                continue
            if len(row) < 3:
                raise ValueError(f"line {line_no}: expected 3 fields, got {len(row)}")
            try:
                ratio = float(row[2])
            except ValueError as exc:
                raise ValueError(f"line {line_no}: invalid ratio {row[2]!r}") from exc
            records.append(Record(row[0], row[1], ratio))
    return records


def filter_by_ratio(records: Iterable[Record], stdval: float, over: bool) -> list[Record]:
    """Keep records whose ratio is at least ``stdval`` (over) or at most it (not over)."""
    if over:
        return [r for r in records if r.previous_ratio >= stdval]
    return [r for r in records if r.previous_ratio <= stdval]


def _year_month(date: str) -> tuple[int, int]:
    parts = date.split("/")
    if len(parts) < 2:
        raise ValueError(f"invalid date: {date!r}")
    return int(parts[0]), int(parts[1])


def filter_by_year_month(
    records: Iterable[Record], target_year: int, target_month: int
) -> list[Record]:
    """Keep records of the given two-digit year and month; 0 matches any."""
    if not 0 <= target_month <= 12:
        raise ValueError("An invalid number is passed as an argument: target_month")
    result: list[Record] = []
    for record in records:
        year, month = _year_month(record.date)
        if (target_year == 0 or year == target_year) and (
            target_month == 0 or month == target_month
        ):
            result.append(record)
    return result


def _format_ratio(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def format_records(records: Iterable[Record]) -> str:
    """Render one line per record: date, change and change in percent."""
    return "\n".join(
        f"{r.date}  {r.previous}  {_format_ratio(r.previous_ratio)}%" for r in records
    )


def main(argv: list[str] | None = None) -> int:
    """Print the records of a CSV file, optionally filtered."""
    parser = argparse.ArgumentParser(description="Analyse index changes from a CSV file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_CSV_PATH)
    parser.add_argument("--year", type=int, default=0, help="two-digit year, 0 for any")
    parser.add_argument("--month", type=int, default=0, help="month, 0 for any")
    ratio = parser.add_mutually_exclusive_group()
    ratio.add_argument("--over", type=float, help="keep changes at or above this percent")
    ratio.add_argument("--under", type=float, help="keep changes at or below this percent")
    args = parser.parse_args(argv)
    try:
        records = read_csv(args.path)
        if args.over is not None:
            records = filter_by_ratio(records, args.over, True)
        elif args.under is not None:
            records = filter_by_ratio(records, args.under, False)
        records = filter_by_year_month(records, args.year, args.month)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    output = format_records(records)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())