from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from tictactoe.api.models import GameSnapshot, MatchResult
from tictactoe.archive_client import ArchiveError, InvalidResultError
from tictactoe.core.engine import AppliedMove, GameEngine


logger = logging.getLogger(__name__)


class ResultArchive(Protocol):
    async def submit(self, result: MatchResult) -> MatchResult: ...

    async def list_results(self) -> list[MatchResult]: ...


class GameSession:
    """Drives one engine on behalf of a presentation layer.

    Contract:
      - moves and resets go through `move()` / `reset()`; the engine is never
        touched from anywhere else.
      - a won round is submitted to the archive in the background; the
        submission's outcome never changes engine state.
      - a won board is cleared after `reset_delay_s` unless a manual `reset()`
        comes first.
    """

    def __init__(
        self,
        *,
        archive: ResultArchive,
        engine: GameEngine | None = None,
        reset_delay_s: float = 2.0,
    ) -> None:
        self.engine = engine if engine is not None else GameEngine()
        self._archive = archive
        self._reset_delay_s = reset_delay_s
        self._reset_task: asyncio.Task[None] | None = None
        self._submissions: set[asyncio.Task[None]] = set()
        self.last_submit_error: Exception | None = None

    @property
    def snapshot(self) -> GameSnapshot:
        return self.engine.snapshot()

    @property
    def auto_reset_pending(self) -> bool:
        return self._reset_task is not None and not self._reset_task.done()

    async def move(self, index: int) -> AppliedMove:
        applied = self.engine.apply_move(index)
        if applied.result is not None:
            logger.info("round won by %s; score=%s", applied.result.winner, self.engine.score)
            self._schedule_submit(applied.result)
            self._schedule_auto_reset()
        return applied

    def reset(self) -> None:
        self._cancel_auto_reset()
        self.engine.reset()

    async def history(self) -> list[MatchResult]:
        return await self._archive.list_results()

    async def drain(self) -> None:
        """Wait for all in-flight submissions to finish."""

        while self._submissions:
            await asyncio.gather(*list(self._submissions))

    async def aclose(self) -> None:
        self._cancel_auto_reset()
        await self.drain()

    def _schedule_submit(self, result: MatchResult) -> None:
        task = asyncio.create_task(self._submit(result))
        self._submissions.add(task)
        task.add_done_callback(self._submissions.discard)

    async def _submit(self, result: MatchResult) -> None:
        try:
            await self._archive.submit(result)
        except (ArchiveError, InvalidResultError) as e:
            self.last_submit_error = e
            logger.warning("could not archive result winner=%s timestamp=%s: %s", result.winner, result.timestamp, e)
        except Exception as e:
            self.last_submit_error = e
            logger.exception("could not archive result winner=%s timestamp=%s: %s", result.winner, result.timestamp, e)
        else:
            self.last_submit_error = None

    def _schedule_auto_reset(self) -> None:
        self._cancel_auto_reset()
        self._reset_task = asyncio.create_task(self._auto_reset())

    async def _auto_reset(self) -> None:
        await asyncio.sleep(self._reset_delay_s)
        logger.debug("auto-reset after %.3fs", self._reset_delay_s)
        self._reset_task = None
        self.engine.reset()

    def _cancel_auto_reset(self) -> None:
        task = self._reset_task
        self._reset_task = None
        if task is not None and not task.done():
            task.cancel()
