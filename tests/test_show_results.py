import httpx
import pytest

import show_results
from tictactoe.api.models import MatchResult
from tictactoe.archive_client import ArchiveClient


def test_format_history_empty() -> None:
    assert show_results.format_history([]) == ["No games recorded yet."]


def test_format_history_lists_wins_and_tally() -> None:
    results = [
        MatchResult(winner="X", timestamp="2023-10-01T12:00:00Z"),
        MatchResult(winner="O", timestamp="2023-10-01T12:05:00Z"),
        MatchResult(winner="X", timestamp="2023-10-01T12:09:00Z"),
    ]

    assert show_results.format_history(results) == [
        "Player X won at 2023-10-01T12:00:00Z",
        "Player O won at 2023-10-01T12:05:00Z",
        "Player X won at 2023-10-01T12:09:00Z",
        "Wins: O: 1, X: 2",
    ]


def test_main_reports_archive_failure(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("TICTACTOE_ARCHIVE_URL", "http://archive.invalid/api")

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    def _client(**kwargs: object) -> ArchiveClient:
        return ArchiveClient(**kwargs, transport=httpx.MockTransport(_refuse))  # type: ignore[arg-type]

    monkeypatch.setattr(show_results, "ArchiveClient", _client)

    assert show_results.main() == 1
    assert "Could not load match history" in capsys.readouterr().err
