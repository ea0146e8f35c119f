from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
import redis

from tictactoe.api.deps import get_redis
from tictactoe.api.models import MatchResult
from tictactoe.result_store import append_result, list_results

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_DETAIL = "Winner and timestamp are required."
STORE_UNAVAILABLE_DETAIL = "Result store unavailable"


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/results", response_model=list[MatchResult])
async def list_results_route(r: redis.Redis = Depends(get_redis)) -> list[MatchResult]:
    try:
        return list_results(r=r)
    except redis.RedisError as e:
        logger.exception("failed to read results")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=STORE_UNAVAILABLE_DETAIL) from e
    except ValidationError as e:
        logger.exception("stored result is unreadable")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=STORE_UNAVAILABLE_DETAIL) from e


@router.post("/api/results", response_model=MatchResult, status_code=status.HTTP_201_CREATED)
async def submit_result_route(request: Request, r: redis.Redis = Depends(get_redis)) -> MatchResult:
    # Parsed by hand so that any bad payload, unparseable JSON included, is a 400 rather than a 422.
    try:
        body: Any = await request.json()
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_DETAIL) from e
    if not isinstance(body, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_DETAIL)
    try:
        result = MatchResult.model_validate(body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_DETAIL) from e

    try:
        return append_result(r=r, result=result)
    except redis.RedisError as e:
        logger.exception("failed to archive result")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=STORE_UNAVAILABLE_DETAIL) from e
