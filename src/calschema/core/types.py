from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True, order=True)
class Yemoda:
    """A date triple (year, month, day), month and day 1-based."""
    year: int
    month: int
    day: int

    def __iter__(self) -> Iterator[int]:
        yield self.year
        yield self.month
        yield self.day

    @classmethod
    def at_start_of_year(cls, y: int) -> "Yemoda":
        return cls(y, 1, 1)

    @classmethod
    def at_start_of_month(cls, y: int, m: int) -> "Yemoda":
        return cls(y, m, 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class Yedoy:
    """An ordinal date (year, day of year)."""
    year: int
    day_of_year: int

    def __iter__(self) -> Iterator[int]:
        yield self.year
        yield self.day_of_year

    @classmethod
    def at_start_of_year(cls, y: int) -> "Yedoy":
        return cls(y, 1)


@dataclass(frozen=True, order=True)
class Yemo:
    year: int
    month: int

    def __iter__(self) -> Iterator[int]:
        yield self.year
        yield self.month


EPOCH = Yemoda(1, 1, 1)


@dataclass(frozen=True)
class YearRange:
    """Closed interval of years."""
    min_year: int
    max_year: int

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise ValueError("min_year must be <= max_year")

    def __contains__(self, y: int) -> bool:
        return self.min_year <= y <= self.max_year

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.min_year, self.max_year)

    @property
    def length(self) -> int:
        return self.max_year - self.min_year + 1

    def is_subset_of(self, other: "YearRange") -> bool:
        return other.min_year <= self.min_year and self.max_year <= other.max_year

    def with_min(self, min_year: int) -> "YearRange":
        return YearRange(min_year, self.max_year)


@dataclass(frozen=True)
class DayRange:
    """Closed interval of day counts (or day numbers)."""
    min_value: int
    max_value: int

    def __post_init__(self) -> None:
        if self.min_value > self.max_value:
            raise ValueError("min_value must be <= max_value")

    def __contains__(self, n: int) -> bool:
        return self.min_value <= n <= self.max_value

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.min_value, self.max_value)

    def shift(self, offset: int) -> "DayRange":
        return DayRange(self.min_value + offset, self.max_value + offset)
