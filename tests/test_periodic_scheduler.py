import asyncio
from unittest.mock import MagicMock, patch

import pytest

from modmail_embeds.scheduler.periodic_scheduler import PeriodicTaskScheduler


@pytest.mark.asyncio
async def test_callback_runs_after_interval() -> None:
    callback = MagicMock()
    scheduler = PeriodicTaskScheduler("test", callback, lambda: 0.01)

    scheduler.start()
    assert scheduler.running
    callback.assert_not_called()

    await asyncio.sleep(0.1)
    assert callback.call_count >= 2

    await scheduler.shutdown()
    assert not scheduler.running


@pytest.mark.asyncio
async def test_callback_errors_do_not_stop_loop() -> None:
    callback = MagicMock(side_effect=[RuntimeError("boom"), None, None, None, None, None, None, None])
    scheduler = PeriodicTaskScheduler("test", callback, lambda: 0.01)

    with patch("modmail_embeds.scheduler.periodic_scheduler.logger") as mock_logger:
        scheduler.start()
        await asyncio.sleep(0.05)
        await scheduler.shutdown()

    assert callback.call_count >= 2
    mock_logger.error.assert_called()


@pytest.mark.asyncio
async def test_start_twice_is_a_no_op() -> None:
    scheduler = PeriodicTaskScheduler("test", MagicMock(), lambda: 60)

    with patch("modmail_embeds.scheduler.periodic_scheduler.logger") as mock_logger:
        scheduler.start()
        first_task = scheduler._task
        scheduler.start()

    assert scheduler._task is first_task
    mock_logger.warning.assert_called_once()
    await scheduler.shutdown()


@pytest.mark.asyncio
async def test_shutdown_without_start() -> None:
    scheduler = PeriodicTaskScheduler("test", MagicMock(), lambda: 60)
    await scheduler.shutdown()
    assert not scheduler.running
