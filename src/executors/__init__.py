"""Executors for the external programs the crontab manager talks to."""

from .base import BaseExecutor, ExecutionResult
from .crontab_executor import CrontabExecutor, CrontabError, RawCrontab

__all__ = [
    "BaseExecutor",
    "ExecutionResult",
    "CrontabExecutor",
    "CrontabError",
    "RawCrontab"
]
