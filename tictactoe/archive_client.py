from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from tictactoe.api.models import MatchResult


logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """The archive could not be reached or failed to store/read results."""


class InvalidResultError(ValueError):
    """A result payload is missing its winner or timestamp."""


def coerce_result(result: MatchResult | Mapping[str, Any]) -> MatchResult:
    if isinstance(result, MatchResult):
        return result
    try:
        return MatchResult.model_validate(dict(result))
    except (ValidationError, TypeError, ValueError) as e:
        raise InvalidResultError("Winner and timestamp are required.") from e


class ArchiveClient:
    """HTTP client for the match result archive.

    No retries, no local queue and no caching: every call goes to the store
    and every failure is raised to the caller.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout_s, transport=transport)

    async def __aenter__(self) -> "ArchiveClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def submit(self, result: MatchResult | Mapping[str, Any]) -> MatchResult:
        record = coerce_result(result)
        try:
            resp = await self._http.post("/results", json=record.model_dump())
            if resp.status_code == httpx.codes.BAD_REQUEST:
                raise InvalidResultError(_error_detail(resp))
            resp.raise_for_status()
            return MatchResult.model_validate(resp.json())
        except InvalidResultError as e:
            logger.error("archive rejected match result %s: %s", record.model_dump(), e)
            raise
        # httpx raises RuntimeError when the client is already closed.
        except (httpx.HTTPError, RuntimeError) as e:
            logger.error("failed to save match result %s: %s", record.model_dump(), e)
            raise ArchiveError(f"failed to save match result: {e}") from e
        except ValueError as e:
            logger.error("archive returned an unreadable record: %s", e)
            raise ArchiveError(f"archive returned an unreadable record: {e}") from e

    async def list_results(self) -> list[MatchResult]:
        try:
            resp = await self._http.get("/results")
            resp.raise_for_status()
            payload = resp.json()
            if not isinstance(payload, list):
                raise ValueError(f"expected a list of results, got {type(payload).__name__}")
            return [MatchResult.model_validate(item) for item in payload]
        except (httpx.HTTPError, RuntimeError) as e:
            logger.error("failed to fetch match results: %s", e)
            raise ArchiveError(f"failed to fetch match results: {e}") from e
        except (ValidationError, ValueError) as e:
            logger.error("archive returned unreadable results: %s", e)
            raise ArchiveError(f"archive returned unreadable results: {e}") from e


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or "Winner and timestamp are required."
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    return "Winner and timestamp are required."
