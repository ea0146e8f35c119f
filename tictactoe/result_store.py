from __future__ import annotations

import logging

import redis

from tictactoe.api.models import MatchResult


logger = logging.getLogger(__name__)

RESULTS_KEY = "tictactoe:results"


def append_result(*, r: redis.Redis, result: MatchResult) -> MatchResult:
    """Append a result to the archive list. Records are never updated or deleted."""

    length = r.rpush(RESULTS_KEY, result.model_dump_json())
    logger.info("archived result winner=%s timestamp=%s (total=%s)", result.winner, result.timestamp, length)
    return result


def list_results(*, r: redis.Redis) -> list[MatchResult]:
    raw_items = r.lrange(RESULTS_KEY, 0, -1)
    return [MatchResult.model_validate_json(raw) for raw in raw_items]
