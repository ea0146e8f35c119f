from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from tictactoe.api.models import GameSnapshot, Mark, MatchResult, RoundPhase
from tictactoe.core.board import empty_board, find_winner, is_full, is_valid_index
from tictactoe.fsm import RoundFSM


def _now() -> datetime:
    return datetime.now(tz=UTC)


def format_timestamp(ts: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix (2023-10-01T12:00:00.000Z)."""

    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Result of `GameEngine.apply_move`.

    - `accepted`: False when the move was silently ignored (state untouched).
    - `result`: set only on the move that wins the round; hand it to the archive.
    """

    accepted: bool
    result: MatchResult | None = None


REJECTED = AppliedMove(accepted=False)


class GameEngine:
    """State of a single tic-tac-toe session.

    Board, turn and round phase are per round and cleared by `reset()`.
    The score accumulates across rounds for the lifetime of the engine.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _now) -> None:
        self._clock = clock
        self._board = empty_board()
        self._turn = Mark.x
        self._winner: Mark | None = None
        self._fsm = RoundFSM()
        self._score = {Mark.x: 0, Mark.o: 0}

    @property
    def board(self) -> tuple[Mark | None, ...]:
        return tuple(self._board)

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def phase(self) -> RoundPhase:
        return self._fsm.phase

    @property
    def winner(self) -> Mark | None:
        return self._winner

    @property
    def score(self) -> dict[Mark, int]:
        return dict(self._score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=list(self._board),
            turn=self._turn,
            phase=self.phase,
            winner=self._winner,
            score=dict(self._score),
        )

    def apply_move(self, index: int) -> AppliedMove:
        if self.phase != RoundPhase.in_progress:
            return REJECTED
        if not is_valid_index(index) or self._board[index] is not None:
            return REJECTED

        mark = self._turn
        self._board[index] = mark

        if find_winner(self._board) == mark:
            self._fsm.send("win")
            self._winner = mark
            self._score[mark] += 1
            result = MatchResult(winner=mark.value, timestamp=format_timestamp(self._clock()))
            return AppliedMove(accepted=True, result=result)

        if is_full(self._board):
            # Draws are not archived.
            self._fsm.send("draw")
            return AppliedMove(accepted=True)

        self._turn = mark.other()
        return AppliedMove(accepted=True)

    def reset(self) -> None:
        """Start a new round. Safe to call at any time; the score is kept."""

        self._board = empty_board()
        self._turn = Mark.x
        self._winner = None
        self._fsm.send("restart")
