from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Mark(StrEnum):
    x = "X"
    o = "O"

    def other(self) -> "Mark":
        return Mark.o if self is Mark.x else Mark.x


class RoundPhase(StrEnum):
    in_progress = "in_progress"
    won = "won"
    draw = "draw"


class MatchResult(BaseModel):
    """A completed (won) round as stored in the archive."""

    model_config = ConfigDict(frozen=True)

    winner: str = Field(..., min_length=1)
    # ISO-8601, e.g. 2023-10-01T12:00:00.000Z
    timestamp: str = Field(..., min_length=1)


class GameSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Row-major, index 0..8; None marks an empty cell.
    board: list[Mark | None]
    turn: Mark
    phase: RoundPhase
    winner: Mark | None = None
    score: dict[Mark, int]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> str:
        if self.phase == RoundPhase.won and self.winner is not None:
            return f"Player {self.winner.value} has won!"
        if self.phase == RoundPhase.draw:
            return "The game ends in a draw!"
        return f"Player {self.turn.value} to move"


class InfoResponse(BaseModel):
    name: str
    version: str
