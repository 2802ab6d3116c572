"""Command and comment holders used for filtering jobs."""

import re
from typing import Pattern, Union


class _MatchableText:
    def __init__(self, text: str = ""):
        self.text = (text or "").strip()

    def match(self, pattern: Union[str, Pattern]) -> bool:
        """Substring test for a plain string, regex search for a compiled pattern."""
        if isinstance(pattern, str):
            return pattern in self.text
        if isinstance(pattern, re.Pattern):
            return pattern.search(self.text) is not None
        return False

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, _MatchableText):
            return type(self) is type(other) and self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.text))


class CronCommand(_MatchableText):
    """The command part of a cron entry."""


class CronComment(_MatchableText):
    """The trailing ``# comment`` of a cron entry, without the marker."""
