"""Crontab manager tying the crontab program to the in-memory model."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
import logging

from executors import CrontabExecutor, CrontabError, ExecutionResult
from models import CronTab
from cron import ScheduleLine

logger = logging.getLogger(__name__)


class CrontabManager:
    """Loads, edits and saves one user's crontab."""

    def __init__(self, executor: Optional[CrontabExecutor] = None):
        self.executor = executor or CrontabExecutor()

    async def load(self) -> CronTab:
        """Load the current crontab (an empty tab if the user has none)."""
        raw = await self.executor.load_raw_text()
        tab = CronTab.from_text(raw.text)
        logger.info(f"Loaded {len(tab)} jobs ({len(tab.lines)} lines)")
        return tab

    async def save(self, tab: CronTab) -> ExecutionResult:
        """Write ``tab`` back through the crontab program."""
        return await self.executor.save_raw_text(tab.render())

    async def add(self, command: str, when: Union[str, datetime, None] = None,
                  comment: Optional[str] = None) -> Optional[ScheduleLine]:
        """Load, append a job and save.

        Returns:
            The created job, or None if ``when`` did not parse (nothing is saved)
        """
        tab = await self.load()
        job = tab.create(command, when, comment)
        if job is None:
            logger.warning(f"Could not create job from schedule {when!r}")
            return None

        result = await self.save(tab)
        if not result.success:
            raise CrontabError(f"Failed to save crontab: {result.error}")
        return job

    async def remove(self, filters: Dict[str, Any]) -> int:
        """Load, remove the jobs matching ``filters`` and save if anything changed."""
        tab = await self.load()
        removed = tab.remove(filters)
        if removed:
            result = await self.save(tab)
            if not result.success:
                raise CrontabError(f"Failed to save crontab: {result.error}")
        return removed

    def get_status(self) -> Dict[str, Any]:
        return {
            "command": self.executor.command,
            "user": self.executor.user or None,
            "timeout": self.executor.timeout
        }
