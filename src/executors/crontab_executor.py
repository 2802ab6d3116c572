"""Load and save crontabs through the system ``crontab`` program."""

import asyncio
import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
import logging
from .base import BaseExecutor, ExecutionResult
from config import settings

logger = logging.getLogger(__name__)

NO_CRONTAB_MARKER = "no crontab for "
USER_NAME_RE = re.compile(r"^[A-Za-z0-9._][A-Za-z0-9._-]*$")


class CrontabError(RuntimeError):
    """The crontab program failed or could not be run."""


@dataclass
class RawCrontab:
    """Raw crontab contents; ``exists`` is False when the user has none."""
    text: str
    exists: bool = True


class CrontabExecutor(BaseExecutor):
    """Executor for the ``crontab`` command of the host system."""

    def __init__(self, user: Optional[str] = None, command: Optional[str] = None,
                 timeout: Optional[int] = None):
        super().__init__(timeout=timeout or settings.crontab_timeout)
        self.user = (user if user is not None else settings.crontab_user).strip()
        self.command = command or settings.crontab_command

    def _validate_user(self) -> bool:
        """Validate that the configured user may be passed to crontab."""
        if not self.user:
            return True

        if not settings.allow_user_switch:
            logger.error("Editing other users' crontabs is disabled in configuration")
            return False

        if not USER_NAME_RE.match(self.user):
            logger.error(f"Invalid user name '{self.user}'")
            return False

        return True

    def _build_args(self, action: str) -> List[str]:
        args = ["-l"] if action == "load" else ["-"]
        if self.user:
            args.extend(["-u", self.user])
        return args

    async def execute(self, args: List[str], input_text: Optional[str] = None) -> ExecutionResult:
        """Run the crontab program.

        Args:
            args: Arguments after the program name (e.g. ["-l"])
            input_text: Text written to stdin, if any

        Returns:
            ExecutionResult with exit code and captured output
        """
        started_at = datetime.utcnow()

        try:
            if not self._validate_user():
                raise ValueError(f"User not allowed: {self.user}")

            logger.debug(f"Executing: {self.command} {' '.join(args)}")

            process = await asyncio.create_subprocess_exec(
                self.command,
                *args,
                stdin=asyncio.subprocess.PIPE if input_text is not None else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )

            try:
                stdout, stderr = await asyncio.wait_for(
                    process.communicate(input_text.encode("utf-8") if input_text is not None else None),
                    timeout=self.timeout
                )
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()

                finished_at = datetime.utcnow()
                error_msg = f"crontab timeout after {self.timeout} seconds"
                logger.error(error_msg)

                return ExecutionResult(
                    success=False,
                    started_at=started_at,
                    finished_at=finished_at,
                    duration=(finished_at - started_at).total_seconds(),
                    error=error_msg
                )

            finished_at = datetime.utcnow()
            success = process.returncode == 0
            stderr_text = stderr.decode("utf-8", errors="replace") if stderr else ""

            if not success:
                logger.warning(f"crontab exited with code {process.returncode}")

            return ExecutionResult(
                success=success,
                started_at=started_at,
                finished_at=finished_at,
                duration=(finished_at - started_at).total_seconds(),
                exit_code=process.returncode,
                stdout=stdout.decode("utf-8", errors="replace") if stdout else "",
                stderr=stderr_text,
                error=None if success else (stderr_text.strip() or f"Exit code: {process.returncode}")
            )

        except (OSError, ValueError) as e:
            finished_at = datetime.utcnow()
            error_msg = f"crontab command failed: {str(e)}"
            logger.error(error_msg)

            return ExecutionResult(
                success=False,
                started_at=started_at,
                finished_at=finished_at,
                duration=(finished_at - started_at).total_seconds(),
                error=error_msg
            )

    async def load_raw_text(self) -> RawCrontab:
        """Read the current crontab.

        Returns:
            RawCrontab; ``exists`` is False when the user has no crontab yet

        Raises:
            CrontabError: crontab failed for any other reason
        """
        result = await self.execute(self._build_args("load"))

        if result.success:
            return RawCrontab(text=result.stdout)

        if NO_CRONTAB_MARKER in result.stderr:
            logger.info(f"No crontab for {self.user or 'current user'}")
            return RawCrontab(text="", exists=False)

        raise CrontabError(result.error)

    async def save_raw_text(self, text: str) -> ExecutionResult:
        """Replace the crontab with ``text``."""
        result = await self.execute(self._build_args("save"), input_text=text)

        if result.success:
            logger.info(f"Saved crontab for {self.user or 'current user'}")
        else:
            logger.error(f"Failed to save crontab: {result.error}")

        return result
