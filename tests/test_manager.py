"""Tests for the crontab manager."""

import pytest
from datetime import datetime
from unittest.mock import Mock, AsyncMock
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from executors import CrontabError, ExecutionResult, RawCrontab
from manager import CrontabManager


def make_result(success=True, error=None):
    now = datetime.utcnow()
    return ExecutionResult(success=success, started_at=now, finished_at=now, duration=0.0,
                           exit_code=0 if success else 1, error=error)


@pytest.fixture
def executor():
    """Mock crontab executor holding two jobs."""
    executor = Mock()
    executor.command = "crontab"
    executor.user = ""
    executor.timeout = 30
    executor.load_raw_text = AsyncMock(
        return_value=RawCrontab("# jobs\n*/5 * * * * /bin/a #alpha\n@daily /bin/b\n"))
    executor.save_raw_text = AsyncMock(return_value=make_result())
    return executor


@pytest.fixture
def manager(executor):
    return CrontabManager(executor)


class TestCrontabManager:
    """Test load/edit/save cycles."""

    @pytest.mark.asyncio
    async def test_load(self, manager):
        tab = await manager.load()
        assert len(tab) == 2
        assert tab.lines[0] == "# jobs"

    @pytest.mark.asyncio
    async def test_load_without_crontab(self, manager, executor):
        executor.load_raw_text.return_value = RawCrontab("", exists=False)
        tab = await manager.load()
        assert len(tab) == 0

    @pytest.mark.asyncio
    async def test_save_renders_tab(self, manager, executor):
        tab = await manager.load()
        await manager.save(tab)
        executor.save_raw_text.assert_awaited_once_with(
            "# jobs\n*/5 * * * * /bin/a #alpha\n@daily /bin/b\n")

    @pytest.mark.asyncio
    async def test_add(self, manager, executor):
        job = await manager.add("/bin/c", "0 3 * * *", "nightly")
        assert job.render() == "0 3 * * * /bin/c #nightly"
        saved = executor.save_raw_text.call_args[0][0]
        assert saved.endswith("@daily /bin/b\n0 3 * * * /bin/c #nightly\n")

    @pytest.mark.asyncio
    async def test_add_invalid_schedule_saves_nothing(self, manager, executor):
        assert await manager.add("/bin/c", "every tuesday") is None
        executor.save_raw_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_save_failure(self, manager, executor):
        executor.save_raw_text.return_value = make_result(False, "errors in crontab file")
        with pytest.raises(CrontabError, match="errors in crontab file"):
            await manager.add("/bin/c", "@hourly")

    @pytest.mark.asyncio
    async def test_remove(self, manager, executor):
        assert await manager.remove({"command": "/bin/a"}) == 1
        executor.save_raw_text.assert_awaited_once_with("# jobs\n@daily /bin/b\n")

    @pytest.mark.asyncio
    async def test_remove_nothing_skips_save(self, manager, executor):
        assert await manager.remove({"comment": "missing"}) == 0
        executor.save_raw_text.assert_not_awaited()

    def test_status(self, manager):
        assert manager.get_status() == {"command": "crontab", "user": None, "timeout": 30}
