"""Base executor class and interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Result of running an external command."""
    success: bool
    started_at: datetime
    finished_at: datetime
    duration: float  # seconds
    exit_code: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat(),
            "duration": self.duration,
            "exit_code": self.exit_code,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "error": self.error
        }


class BaseExecutor(ABC):
    """Base class for executors that run an external program."""

    def __init__(self, timeout: int = 30):
        self.timeout = timeout

    @abstractmethod
    async def execute(self, args: List[str], input_text: Optional[str] = None) -> ExecutionResult:
        """Run the program with ``args``, feeding ``input_text`` on stdin."""
        pass
