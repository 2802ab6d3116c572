"""API endpoints for crontab jobs."""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from cron import ScheduleLine, parse_line
from executors import CrontabError
from manager import CrontabManager
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_manager() -> CrontabManager:
    """Get crontab manager instance."""
    # Import here to avoid circular import
    from api.http_server import crontab_manager
    if not crontab_manager:
        raise RuntimeError("Crontab manager not initialized")
    return crontab_manager


# Pydantic models for request/response
class JobCreate(BaseModel):
    command: str = Field(..., min_length=1)
    schedule: Optional[str] = Field(None, description='e.g. "*/5 * * * *" or "@daily"')
    comment: Optional[str] = None


class LineParse(BaseModel):
    line: str


def job_to_dict(job: ScheduleLine) -> Dict[str, Any]:
    return {
        "schedule": job.time_portion(),
        "fields": {
            "minute": job.minute.render(),
            "hour": job.hour.render(),
            "day_of_month": job.dom.render(),
            "month": job.month.render(),
            "day_of_week": job.dow.render()
        },
        "special": job.special,
        "command": str(job.command),
        "comment": str(job.comment),
        "valid": job.is_valid(),
        "line": job.render()
    }


def _filters(command: Optional[str], comment: Optional[str]) -> Dict[str, str]:
    filters = {}
    if command:
        filters["command"] = command
    if comment:
        filters["comment"] = comment
    return filters


async def _load(manager: CrontabManager):
    try:
        return await manager.load()
    except CrontabError as e:
        logger.error(f"Failed to load crontab: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/jobs")
async def list_jobs(
    command: Optional[str] = Query(None, description="Substring of the command"),
    comment: Optional[str] = Query(None, description="Substring of the comment"),
    manager: CrontabManager = Depends(get_manager)
):
    """List jobs, optionally filtered by command and comment."""
    tab = await _load(manager)
    jobs = tab.jobs(**_filters(command, comment))
    return {
        "total": len(jobs),
        "jobs": [job_to_dict(job) for job in jobs]
    }


@router.post("/jobs", status_code=201)
async def create_job(job: JobCreate, manager: CrontabManager = Depends(get_manager)):
    """Add a job and save the crontab."""
    try:
        created = await manager.add(job.command, job.schedule, job.comment)
    except CrontabError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if created is None:
        raise HTTPException(status_code=400, detail=f"Invalid schedule: {job.schedule}")

    logger.info(f"Created job '{created}'")
    return job_to_dict(created)


@router.delete("/jobs")
async def delete_jobs(
    command: Optional[str] = Query(None),
    comment: Optional[str] = Query(None),
    manager: CrontabManager = Depends(get_manager)
):
    """Remove the jobs matching the filters and save the crontab."""
    filters = _filters(command, comment)
    if not filters:
        raise HTTPException(status_code=400, detail="A command or comment filter is required")

    try:
        removed = await manager.remove(filters)
    except CrontabError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"removed": removed}


@router.get("/crontab")
async def render_crontab(manager: CrontabManager = Depends(get_manager)):
    """Get the crontab as it would be saved."""
    tab = await _load(manager)
    return {"content": tab.render()}


@router.post("/parse")
async def parse(request: LineParse):
    """Parse a single crontab line."""
    result = parse_line(request.line)
    if not result.ok:
        raise HTTPException(status_code=400, detail=str(result.error))
    return job_to_dict(result.line)
