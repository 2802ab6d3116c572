"""Parsing and rendering of a single crontab entry."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from .errors import CronParseError, UnrecognizedLine
from .fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELD_SPECS,
    HOUR,
    MINUTE,
    MONTH,
    TimeField,
)
from .specials import expand, shortcut_for
from .text import CronComment, CronCommand

logger = logging.getLogger(__name__)

# minute hour dom month dow command [# comment]
STANDARD_RE = re.compile(
    r"^\s*([^@#\s]+)\s+([^@#\s]+)\s+([^@#\s]+)\s+([^@#\s]+)\s+([^@#\s]+)"
    r"\s+([^#\n]*)(\s+#\s*([^\n]*)|$)"
)
# @name command [# comment]
SPECIAL_RE = re.compile(r"^\s*@(\w+)\s([^#\n]*)(\s+#\s*([^\n]*)|$)")


class ScheduleLine:
    """A parsed cron entry: five time fields, a command and an optional comment.

    Build one from text with :meth:`from_text` (or the non-raising
    :func:`parse_line`), or programmatically with :meth:`create` and the
    field mutators::

        line = ScheduleLine.create("backup.sh", "nightly")
        line.hour.on(3)
        line.minute.on(30)
        str(line)  # "30 3 * * * backup.sh #nightly"
    """

    def __init__(self, command: str = "", comment: str = "", valid: bool = False):
        self.minute = TimeField(MINUTE)
        self.hour = TimeField(HOUR)
        self.dom = TimeField(DAY_OF_MONTH)
        self.month = TimeField(MONTH)
        self.dow = TimeField(DAY_OF_WEEK)
        self._command = CronCommand(command)
        self._comment = CronComment(comment)
        self.valid = valid
        self.special: Optional[str] = None

    @classmethod
    def create(cls, command: str, comment: str = "") -> "ScheduleLine":
        """Create a line with wildcard fields for the caller to fill in."""
        command = (command or "").strip()
        return cls(command, comment or "", valid=bool(command))

    @classmethod
    def from_text(cls, text: str) -> "ScheduleLine":
        """Parse a raw crontab line.

        Args:
            text: One line of a crontab file

        Returns:
            The parsed line

        Raises:
            CronParseError: the text is not a cron entry or one of its
                fields holds an invalid value
        """
        text = text or ""
        match = STANDARD_RE.search(text)
        if match:
            line = cls(match.group(6), match.group(8) or "", valid=True)
            line._set_fields(match.groups()[:5])
            return line

        if "#" not in text or text.find("@") < text.find("#"):
            match = SPECIAL_RE.search(text)
            if match:
                expansion = expand(match.group(1))
                if expansion is not None:
                    line = cls(match.group(2), match.group(4) or "", valid=True)
                    if expansion.startswith("@"):
                        line.special = expansion
                    else:
                        line._set_fields(expansion.split())
                    return line

        raise UnrecognizedLine(text)

    def _set_fields(self, tokens):
        parsed = [TimeField.parse(spec, token) for spec, token in zip(FIELD_SPECS, tokens)]
        self.minute, self.hour, self.dom, self.month, self.dow = parsed

    @property
    def fields(self) -> Tuple[TimeField, TimeField, TimeField, TimeField, TimeField]:
        return (self.minute, self.hour, self.dom, self.month, self.dow)

    @property
    def command(self) -> CronCommand:
        return self._command

    @property
    def comment(self) -> CronComment:
        return self._comment

    def set_command(self, command: str):
        self._command = CronCommand(command)

    def set_comment(self, comment: str):
        self._comment = CronComment(comment)

    def is_valid(self) -> bool:
        return self.valid

    def clear(self):
        """Drop any @reboot marker and reset every field to ``*``."""
        self.special = None
        for field in self.fields:
            field.clear()

    def time_portion(self) -> str:
        if self.special:
            time = self.special
        else:
            time = " ".join(field.render() for field in self.fields)
        name = shortcut_for(time)
        return f"@{name}" if name else time

    def render(self) -> str:
        result = f"{self.time_portion()} {self.command}"
        if str(self.comment):
            result += f" #{self.comment}"
        return result

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ScheduleLine({self.render()!r}, valid={self.valid})"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line: either a ScheduleLine or the error.

    ``text`` is always the original input so callers can keep unparsed
    lines verbatim.
    """
    text: str
    line: Optional[ScheduleLine] = None
    error: Optional[CronParseError] = None

    @property
    def ok(self) -> bool:
        return self.line is not None


def parse_line(text: str) -> ParseResult:
    """Parse a crontab line without raising."""
    try:
        return ParseResult(text, line=ScheduleLine.from_text(text))
    except CronParseError as e:
        logger.debug(f"Keeping line verbatim ({e}): {text!r}")
        return ParseResult(text, error=e)
