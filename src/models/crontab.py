"""In-memory crontab: parsed jobs interleaved with verbatim raw lines."""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from cron import ScheduleLine, parse_line

logger = logging.getLogger(__name__)

Line = Union[ScheduleLine, str]


class CronTab:
    """A crontab as an ordered list of lines.

    Lines that parse as cron entries are held as ``ScheduleLine`` objects and
    are also listed in ``jobs``; everything else (comments, blank lines,
    environment assignments, malformed entries) is kept as the original text
    so rendering preserves it.
    """

    def __init__(self):
        self.lines: List[Line] = []
        self._jobs: List[ScheduleLine] = []
        self._backup_lines: List[Line] = []
        self._backup_jobs: List[ScheduleLine] = []

    @classmethod
    def from_text(cls, text: Optional[str]) -> "CronTab":
        """Build a crontab from raw file contents (None or "" gives an empty tab)."""
        tab = cls()
        for token in (text or "").split("\n"):
            result = parse_line(token)
            if result.ok and result.line.is_valid():
                tab._jobs.append(result.line)
                tab.lines.append(result.line)
            else:
                tab.lines.append(token)
        tab._truncate_lines()
        tab._backup_lines = list(tab.lines)
        tab._backup_jobs = list(tab._jobs)
        logger.debug(f"Loaded crontab with {len(tab._jobs)} jobs and {len(tab.lines)} lines")
        return tab

    def jobs(self, command=None, comment=None) -> List[ScheduleLine]:
        """Return the jobs whose command and/or comment match.

        Args:
            command: Substring or compiled regex matched against the command
            comment: Substring or compiled regex matched against the comment

        Returns:
            Matching jobs (a copy; mutating the list does not affect the tab)
        """
        results = []
        for job in self._jobs:
            if command is not None and not job.command.match(command):
                continue
            if comment is not None and not job.comment.match(comment):
                continue
            results.append(job)
        return results

    find = jobs

    def create(self, command: str, when=None, comment: Optional[str] = None) -> Optional[ScheduleLine]:
        """Add a job.

        Args:
            command: Command to run
            when: Schedule string ("*/5 * * * *", "@daily"), a datetime, or
                None for every minute
            comment: Optional trailing comment

        Returns:
            The new job, or None if ``when`` is unusable
        """
        if when is not None and not isinstance(when, (str, datetime)):
            return None

        command = (command or "").strip()
        comment = (comment or "").strip()

        if isinstance(when, str):
            job = self.parse(f"{when} {command} #{comment}")
        elif isinstance(when, datetime):
            job = ScheduleLine.create(command, comment)
            job.minute.on(when.minute)
            job.hour.on(when.hour)
            job.dom.on(when.day)
            job.month.on(when.month)
        else:
            job = ScheduleLine.create(command, comment)

        if job is not None:
            self._jobs.append(job)
            self.lines.append(job)
            logger.info(f"Created job: {job}")
        return job

    def parse(self, text: str) -> Optional[ScheduleLine]:
        """Parse a single line, returning None if it is not a cron entry."""
        return parse_line(text).line

    def remove(self, target: Union[ScheduleLine, Iterable[ScheduleLine], Dict[str, Any], None]) -> int:
        """Remove a job, a list of jobs, or the jobs matching a filter mapping.

        Returns:
            Number of jobs removed
        """
        if isinstance(target, ScheduleLine):
            targets = [target]
        elif isinstance(target, dict):
            unknown = set(target) - {"command", "comment"}
            targets = [] if unknown else self.jobs(**target)
        elif target is None:
            targets = []
        else:
            targets = list(target)

        removed = 0
        for job in targets:
            if any(existing is job for existing in self._jobs):
                removed += 1
            self._jobs = [existing for existing in self._jobs if existing is not job]
            self.lines = [line for line in self.lines if line is not job]
        self._truncate_lines()

        if removed:
            logger.info(f"Removed {removed} job(s)")
        return removed

    def reset(self):
        """Restore the lines and jobs as they were when the tab was loaded."""
        self.lines = list(self._backup_lines)
        self._jobs = list(self._backup_jobs)

    def render(self) -> str:
        tokens = []
        for line in self.lines:
            if isinstance(line, ScheduleLine) and not line.is_valid():
                tokens.append(f"# {line}")
            else:
                tokens.append(str(line))
        return "\n".join(tokens).strip() + "\n"

    def _truncate_lines(self):
        while self.lines and str(self.lines[-1]).strip() == "":
            self.lines.pop()

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self):
        return iter(list(self._jobs))

    def __str__(self) -> str:
        return self.render()
