"""Crontab line parsing, modelling and rendering."""

from .errors import (
    CronParseError,
    InvalidRangeValue,
    UnknownTimePart,
    UnknownTimeRange,
    UnrecognizedLine,
)
from .fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELD_SPECS,
    HOUR,
    MINUTE,
    MONTH,
    FieldSpec,
    TimeField,
    TimeRange,
)
from .line import ParseResult, ScheduleLine, parse_line
from .specials import SPECIALS
from .text import CronComment, CronCommand

__all__ = [
    "CronParseError",
    "InvalidRangeValue",
    "UnknownTimePart",
    "UnknownTimeRange",
    "UnrecognizedLine",
    "FieldSpec",
    "TimeField",
    "TimeRange",
    "MINUTE",
    "HOUR",
    "DAY_OF_MONTH",
    "MONTH",
    "DAY_OF_WEEK",
    "FIELD_SPECS",
    "ScheduleLine",
    "ParseResult",
    "parse_line",
    "SPECIALS",
    "CronCommand",
    "CronComment",
]
