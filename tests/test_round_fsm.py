import warnings

import pytest
from statemachine.exceptions import TransitionNotAllowed

from tictactoe.api.models import RoundPhase
from tictactoe.fsm import RoundFSM


def test_round_starts_in_progress() -> None:
    assert RoundFSM().phase == RoundPhase.in_progress


def test_win_then_restart() -> None:
    fsm = RoundFSM()
    fsm.send("win")
    assert fsm.phase == RoundPhase.won

    fsm.send("restart")
    assert fsm.phase == RoundPhase.in_progress


def test_restart_from_any_phase() -> None:
    for phase in RoundPhase:
        fsm = RoundFSM(phase)
        fsm.send("restart")
        assert fsm.phase == RoundPhase.in_progress


@pytest.mark.parametrize("phase", [RoundPhase.won, RoundPhase.draw])
@pytest.mark.parametrize("event", ["win", "draw"])
def test_terminal_phases_reject_outcome_events(phase: RoundPhase, event: str) -> None:
    fsm = RoundFSM(phase)
    with pytest.raises(TransitionNotAllowed):
        fsm.send(event)
    assert fsm.phase == phase


def test_phase_lookup_emits_no_deprecation_warning() -> None:
    fsm = RoundFSM()
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        assert fsm.phase == RoundPhase.in_progress
