"""Crontab management on top of the crontab program."""

from .core import CrontabManager

__all__ = ["CrontabManager"]
