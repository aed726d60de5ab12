"""Typed options for the Week/Month/Year ``create`` factories.

Each factory takes one of these frozen dataclasses, or the equivalent keyword
options. Unknown keys in an options mapping are ignored.

Examples:
    >>> YearWeekQuery.from_options({"year": 2024, "week": 11})
    YearWeekQuery(year=2024, week=11)

    >>> YearQuery.from_options({})
    Traceback (most recent call last):
    ...
    ValueError: Missing required option: year
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from calendarperiods.shared_utils import ensure_int

logger = logging.getLogger(__name__)


def _pick(cls, options: Optional[Mapping[str, Any]]) -> dict:
    """Keep only the keys ``cls`` declares."""
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise TypeError(f"options must be a mapping, got {type(options).__name__}")
    known = {f.name for f in fields(cls)}
    ignored = sorted(str(k) for k in options if k not in known)
    if ignored:
        logger.debug(f"{cls.__name__}: ignoring unknown options {ignored}")
    return {k: v for k, v in options.items() if k in known}


@dataclass(frozen=True)
class YearWeekQuery:
    """Options for Week.create: optional year, optional ISO week number."""

    year: Optional[int] = None
    week: Optional[int] = None

    def __post_init__(self):
        if self.year is not None:
            ensure_int(self.year, name="year")
        if self.week is not None:
            ensure_int(self.week, name="week")
            if not 1 <= self.week <= 53:
                raise ValueError(f"week must be between 1 and 53, got {self.week}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "YearWeekQuery":
        return cls(**_pick(cls, options))


@dataclass(frozen=True)
class YearMonthQuery:
    """Options for Month.create: optional year, optional month (1-12)."""

    year: Optional[int] = None
    month: Optional[int] = None

    def __post_init__(self):
        if self.year is not None:
            ensure_int(self.year, name="year")
        if self.month is not None:
            ensure_int(self.month, name="month")
            if not 1 <= self.month <= 12:
                raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "YearMonthQuery":
        return cls(**_pick(cls, options))


@dataclass(frozen=True)
class YearQuery:
    """Options for Year.create: the year is required."""

    year: int

    def __post_init__(self):
        ensure_int(self.year, name="year")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "YearQuery":
        picked = _pick(cls, options)
        if picked.get("year") is None:
            raise ValueError("Missing required option: year")
        return cls(**picked)


def resolve_query(cls, query, options: Mapping[str, Any]):
    """
    Build a ``cls`` query from either a ready instance, a mapping, or keywords.

    Keyword options override keys of a mapping passed positionally.
    """
    if isinstance(query, cls):
        if options:
            raise TypeError(f"pass either a {cls.__name__} or keyword options, not both")
        return query
    merged = dict(_pick(cls, query)) if query is not None else {}
    merged.update(options)
    return cls.from_options(merged)


__all__ = [
    "YearWeekQuery",
    "YearMonthQuery",
    "YearQuery",
    "resolve_query",
]
