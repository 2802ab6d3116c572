"""In-memory crontab model."""

from .crontab import CronTab

__all__ = ["CronTab"]
