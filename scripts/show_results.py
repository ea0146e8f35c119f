"""Print the match history held by the result archive.

Contract
- Input: the archive at `TICTACTOE_ARCHIVE_URL` (default http://localhost:5010/api).
- Output: one line per archived win, oldest first, then a per-mark tally.
- Exit code 1 if the archive cannot be read.

Usage:
    uv run python scripts/show_results.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections import Counter

from tictactoe.api.models import MatchResult
from tictactoe.archive_client import ArchiveClient, ArchiveError
from tictactoe.config import settings_from_env


def format_history(results: list[MatchResult]) -> list[str]:
    if not results:
        return ["No games recorded yet."]

    lines = [f"Player {r.winner} won at {r.timestamp}" for r in results]
    tally = Counter(r.winner for r in results)
    lines.append("Wins: " + ", ".join(f"{winner}: {count}" for winner, count in sorted(tally.items())))
    return lines


async def _fetch() -> list[MatchResult]:
    settings = settings_from_env()
    async with ArchiveClient(base_url=settings.archive_url, timeout_s=settings.archive_timeout_s) as client:
        return await client.list_results()


def main() -> int:
    logging.basicConfig(level=settings_from_env().log_level)
    try:
        results = asyncio.run(_fetch())
    except ArchiveError as e:
        print(f"Could not load match history: {e}", file=sys.stderr)
        return 1

    for line in format_history(results):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
