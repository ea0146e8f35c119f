from __future__ import annotations

from statemachine import State, StateMachine

from tictactoe.api.models import RoundPhase


class RoundFSM(StateMachine):
    """Guards round phase transitions.

    - in_progress -> won | draw
    - any phase -> in_progress on restart

    The engine decides *when* a round is won or drawn; the FSM only refuses
    transitions that make no sense (e.g. winning an already drawn round).
    """

    in_progress = State(
        RoundPhase.in_progress.value,
        value=RoundPhase.in_progress.value,
        initial=True,
    )
    won = State(RoundPhase.won.value, value=RoundPhase.won.value)
    drawn = State(RoundPhase.draw.value, value=RoundPhase.draw.value)

    win = in_progress.to(won)
    draw = in_progress.to(drawn)
    restart = in_progress.to(in_progress) | won.to(in_progress) | drawn.to(in_progress)

    def __init__(self, phase: RoundPhase = RoundPhase.in_progress):
        super().__init__(start_value=phase.value)

    @property
    def phase(self) -> RoundPhase:
        return RoundPhase(str(self.current_state_value))
