"""Generic scheduler for periodic maintenance callbacks.

Provides a reusable async task runner that calls a plain callback on a fixed
interval. Handles lifecycle (start/shutdown) and standard error handling; the
callback itself stays passive and testable without real timers.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from modmail_embeds.util.logger import get_logger

logger = get_logger("periodic_scheduler")


class PeriodicTaskScheduler:
    """
    Reusable scheduler that invokes ``callback`` every ``get_interval()`` seconds.

    Args:
        name: Human-readable name for logging (e.g., "avatar cache").
        callback: Synchronous callable taking no arguments.
        get_interval: Callable returning the interval in seconds (called at start).
    """

    def __init__(
        self,
        name: str,
        callback: Callable[[], Any],
        get_interval: Callable[[], float],
    ) -> None:
        self._name = name
        self._callback = callback
        self._get_interval = get_interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _run_once(self) -> None:
        try:
            self._callback()
        except Exception as exc:
            logger.error("[%s] Periodic callback failed: %s", self._name, exc)

    async def _run_loop(self, interval: float) -> None:
        """Infinite loop: sleep, run the callback, repeat."""
        logger.info("[%s] Starting periodic task (interval=%.1fs)", self._name, interval)
        try:
            while True:
                await asyncio.sleep(interval)
                self._run_once()
        except asyncio.CancelledError:
            logger.info("[%s] Periodic task cancelled", self._name)
            raise

    def start(self) -> None:
        """Start the background task if not already running.

        Must be called from within a running event loop.
        """
        if self.running:
            logger.warning("[%s] Periodic task already running", self._name)
            return
        interval = self._get_interval()
        self._task = asyncio.create_task(self._run_loop(interval))

    async def shutdown(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None

        logger.info("[%s] Scheduler shutdown complete", self._name)
