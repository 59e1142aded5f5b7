"""Grouping photos by capture date and filtering on year, month or day."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_UNSIGNED = re.compile(r"\+?[0-9]+")

DAY_INDENT = 48
MONTH_INDENT = 16


class _Dated(Protocol):
    date_taken: str | None


def _parse_unsigned(text: str, limit: int) -> int | None:
    if _UNSIGNED.fullmatch(text) is None:
        return None
    value = int(text)
    return value if value <= limit else None


def parse_date(s: str | None) -> tuple[int, int, int] | None:
    """Year, month and day from a string starting with YYYY-MM-DD, else None."""
    if s is None or len(s) < 10:
        return None
    parts = s[:10].split("-")
    if len(parts) < 3:
        return None
    year = _parse_unsigned(parts[0], 0xFFFF)
    month = _parse_unsigned(parts[1], 0xFF)
    day = _parse_unsigned(parts[2], 0xFF)
    if year is None or month is None or day is None:
        return None
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return year, month, day


def month_name(m: int) -> str:
    """Short English month name for 1..12, or '???' outside that range."""
    if 1 <= m <= 12:
        return MONTH_NAMES[m - 1]
    return "???"


def _photo_date(photo: Any) -> tuple[int, int, int] | None:
    return parse_date(getattr(photo, "date_taken", None))


class DateFilter:
    """A predicate on a photo's capture date."""

    def _prefix(self) -> tuple[int, ...]:
        return ()

    def matches(self, photo: _Dated) -> bool:
        """Whether the photo's date starts with this filter's date fields."""
        date = _photo_date(photo)
        if date is None:
            return False
        prefix = self._prefix()
        return date[: len(prefix)] == prefix


@dataclass(frozen=True)
class AllDates(DateFilter):
    """Accepts every photo."""

    def matches(self, photo: _Dated) -> bool:
        return True


@dataclass(frozen=True)
class YearFilter(DateFilter):
    """Photos taken in one year."""

    year: int

    def _prefix(self) -> tuple[int, ...]:
        return (self.year,)

    def matches(self, photo: _Dated) -> bool:
        date = _photo_date(photo)
        return date is not None and date[0] == self.year


@dataclass(frozen=True)
class MonthFilter(DateFilter):
    """Photos taken in one month of one year."""

    year: int
    month: int

    def _prefix(self) -> tuple[int, ...]:
        return (self.year, self.month)

    def matches(self, photo: _Dated) -> bool:
        date = _photo_date(photo)
        return date is not None and date[:2] == (self.year, self.month)


@dataclass(frozen=True)
class DayFilter(DateFilter):
    """Photos taken on one day."""

    year: int
    month: int
    day: int

    def _prefix(self) -> tuple[int, ...]:
        return (self.year, self.month, self.day)

    def matches(self, photo: _Dated) -> bool:
        return _photo_date(photo) == (self.year, self.month, self.day)


@dataclass(frozen=True)
class UnknownDate(DateFilter):
    """Photos without a usable capture date."""

    def matches(self, photo: _Dated) -> bool:
        return _photo_date(photo) is None


@dataclass(frozen=True)
class YearKey:
    """Expansion state key for a year row."""

    year: int


@dataclass(frozen=True)
class MonthKey:
    """Expansion state key for a month row."""

    year: int
    month: int


@dataclass
class DayEntry:
    day: int
    count: int


@dataclass
class MonthEntry:
    month: int
    count: int
    days: list[DayEntry] = field(default_factory=list)


@dataclass
class YearEntry:
    year: int
    count: int
    months: list[MonthEntry] = field(default_factory=list)


@dataclass
class DateTree:
    """Photo counts by year (newest first), month and day (oldest first)."""

    total: int
    years: list[YearEntry]
    unknown_count: int


def build_date_tree(photos: Iterable[_Dated]) -> DateTree:
    """Count photos per year, month and day."""
    counts: dict[int, dict[int, dict[int, int]]] = defaultdict(
        lambda: defaultdict(lambda: defaultdict(int))
    )
    total = 0
    unknown = 0
    for photo in photos:
        total += 1
        date = _photo_date(photo)
        if date is None:
            unknown += 1
            continue
        year, month, day = date
        counts[year][month][day] += 1

    years = []
    for year in sorted(counts, reverse=True):
        months = []
        for month in sorted(counts[year]):
            days = [DayEntry(day, n) for day, n in sorted(counts[year][month].items())]
            months.append(MonthEntry(month, sum(d.count for d in days), days))
        years.append(YearEntry(year, sum(m.count for m in months), months))

    return DateTree(total=total, years=years, unknown_count=unknown)


@dataclass(frozen=True)
class SidebarEntry:
    """One row of the date sidebar."""

    label: str
    date_filter: DateFilter
    active: bool
    indent: int = 0
    toggle: YearKey | MonthKey | None = None
    expanded: bool = False

    @property
    def arrow(self) -> str | None:
        """Disclosure arrow text for expandable rows."""
        if self.toggle is None:
            return None
        return "v" if self.expanded else ">"


def sidebar_entries(
    photos: Iterable[_Dated],
    active_filter: DateFilter,
    expanded: set[YearKey | MonthKey] | frozenset[YearKey | MonthKey],
) -> list[SidebarEntry]:
    """The sidebar rows in display order for the given expansion state."""
    tree = build_date_tree(photos)

    def entry(label: str, date_filter: DateFilter, **extra: Any) -> SidebarEntry:
        return SidebarEntry(label, date_filter, date_filter == active_filter, **extra)

    rows = [entry(f"All ({tree.total})", AllDates())]
    for year_entry in tree.years:
        year_key = YearKey(year_entry.year)
        year_open = year_key in expanded
        rows.append(
            entry(
                f"{year_entry.year} ({year_entry.count})",
                YearFilter(year_entry.year),
                toggle=year_key,
                expanded=year_open,
            )
        )
        if not year_open:
            continue
        for month_entry in year_entry.months:
            month_key = MonthKey(year_entry.year, month_entry.month)
            month_open = month_key in expanded
            rows.append(
                entry(
                    f"{month_name(month_entry.month)} ({month_entry.count})",
                    MonthFilter(year_entry.year, month_entry.month),
                    indent=MONTH_INDENT,
                    toggle=month_key,
                    expanded=month_open,
                )
            )
            if not month_open:
                continue
            for day_entry in month_entry.days:
                rows.append(
                    entry(
                        f"{day_entry.day} ({day_entry.count})",
                        DayFilter(year_entry.year, month_entry.month, day_entry.day),
                        indent=DAY_INDENT,
                    )
                )

    if tree.unknown_count > 0:
        rows.append(entry(f"Unknown ({tree.unknown_count})", UnknownDate()))
    return rows