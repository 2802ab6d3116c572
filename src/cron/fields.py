"""The five time fields of a cron entry and their comma-separated parts."""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import logging

from .errors import InvalidRangeValue, UnknownTimePart, UnknownTimeRange

logger = logging.getLogger(__name__)

MONTH_NAMES = ("jan", "feb", "mar", "apr", "may", "jun",
               "jul", "aug", "sep", "oct", "nov", "dec")
WEEKDAY_NAMES = ("sun", "mon", "tue", "wed", "thu", "fri", "sat", "sun")


@dataclass(frozen=True)
class FieldSpec:
    """Bounds and optional value names of one schedule position."""
    name: str
    min: int
    max: int
    names: Tuple[str, ...] = ()

    def resolve_value(self, token) -> Optional[int]:
        """Resolve a value token to an integer within bounds.

        Names are matched case-insensitively; a name stands for
        ``min + position`` so "jan" is 1 and "sun" is 0.

        Args:
            token: Value token (e.g. "5", "Mar", "fri") or an int

        Returns:
            The resolved integer, or None if the token is unknown or out of bounds
        """
        lowered = str(token).lower()
        if lowered in self.names:
            value = self.min + self.names.index(lowered)
        else:
            try:
                value = int(lowered)
            except ValueError:
                return None
        if self.min <= value <= self.max:
            return value
        return None


MINUTE = FieldSpec("Minute", 0, 59)
HOUR = FieldSpec("Hours", 0, 23)
DAY_OF_MONTH = FieldSpec("Day of Month", 1, 31)
MONTH = FieldSpec("Month", 1, 12, MONTH_NAMES)
DAY_OF_WEEK = FieldSpec("Day of Week", 0, 7, WEEKDAY_NAMES)

FIELD_SPECS = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)


class TimeRange:
    """A ``start-end/step`` span inside a field, or ``*`` with an optional step."""

    def __init__(self, spec: FieldSpec, start: int, end: int, step: int = 1):
        self.spec = spec
        self.start = start
        self.end = end
        self.step = step

    @classmethod
    def parse(cls, spec: FieldSpec, token: str) -> "TimeRange":
        """Parse a range token such as ``*``, ``*/15``, ``1-5`` or ``mon-fri/2``.

        Raises:
            InvalidRangeValue: an endpoint is not a valid value for the field
            UnknownTimeRange: the token is not a range at all
        """
        range_token = token
        step = 1
        if "/" in range_token:
            range_token, step_token = range_token.split("/", 1)
            try:
                step = int(step_token)
            except ValueError:
                raise UnknownTimeRange(token)

        if "-" in range_token:
            start_token, end_token = range_token.split("-", 1)
            start = spec.resolve_value(start_token)
            if start is None:
                raise InvalidRangeValue(start_token)
            end = spec.resolve_value(end_token)
            if end is None:
                raise InvalidRangeValue(end_token)
        elif range_token == "*":
            start, end = spec.min, spec.max
        else:
            raise UnknownTimeRange(range_token)

        return cls(spec, start, end, step)

    def every(self, step: int):
        self.step = int(step)

    @property
    def is_full(self) -> bool:
        return self.start == self.spec.min and self.end == self.spec.max

    def render(self) -> str:
        value = "*" if self.is_full else f"{self.start}-{self.end}"
        if self.step != 1:
            value += f"/{self.step}"
        return value

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TimeRange({self.spec.name!r}, {self.start}, {self.end}, step={self.step})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeRange):
            return NotImplemented
        return (self.spec, self.start, self.end, self.step) == (
            other.spec, other.start, other.end, other.step)


TimePart = Union[int, TimeRange]


class TimeField:
    """One of the five positions of a cron entry.

    Holds the comma-separated parts in the order they were parsed or added.
    An empty field renders as ``*``.
    """

    def __init__(self, spec: FieldSpec, parts: Optional[List[TimePart]] = None):
        self.spec = spec
        self.parts: List[TimePart] = list(parts or [])

    @classmethod
    def parse(cls, spec: FieldSpec, token: Optional[str]) -> "TimeField":
        field = cls(spec)
        if not token:
            return field

        for piece in token.split(","):
            if "/" in piece or "-" in piece or piece == "*":
                field.parts.append(TimeRange.parse(spec, piece))
            else:
                value = spec.resolve_value(piece)
                if value is None:
                    raise UnknownTimePart(spec.name, piece)
                field.parts.append(value)
        return field

    def every(self, n: int) -> TimeRange:
        """Append ``*/n``."""
        time_range = TimeRange.parse(self.spec, f"*/{int(n)}")
        self.parts.append(time_range)
        return time_range

    def on(self, *values) -> List[int]:
        """Append each value (int or name) as a single-value part."""
        resolved = []
        for raw in values:
            value = self.spec.resolve_value(raw)
            if value is None:
                raise UnknownTimePart(self.spec.name, str(raw))
            resolved.append(value)
        self.parts.extend(resolved)
        return resolved

    at = on

    def between(self, start, end) -> TimeRange:
        """Append ``start-end``."""
        time_range = TimeRange.parse(self.spec, f"{start}-{end}")
        self.parts.append(time_range)
        return time_range

    def clear(self):
        self.parts = []

    def render(self) -> str:
        return ",".join(str(part) for part in self.parts) or "*"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TimeField({self.spec.name!r}, {self.render()!r})"
