import pytest

from tictactoe.api.models import Mark
from tictactoe.core.board import WIN_TRIPLES, empty_board, find_winner, is_full, is_valid_index


@pytest.mark.parametrize("triple", WIN_TRIPLES)
def test_find_winner_detects_every_triple(triple: tuple[int, int, int]) -> None:
    cells = empty_board()
    for i in triple:
        cells[i] = Mark.o
    assert find_winner(cells) == Mark.o


def test_find_winner_ignores_empty_and_mixed_lines() -> None:
    assert find_winner(empty_board()) is None

    cells = empty_board()
    cells[0], cells[1], cells[2] = Mark.x, Mark.o, Mark.x
    assert find_winner(cells) is None


def test_find_winner_reports_first_triple_in_order() -> None:
    # Not reachable in play, but pins the enumeration order.
    cells = [Mark.o, Mark.o, Mark.o, Mark.x, Mark.x, Mark.x, None, None, None]
    assert find_winner(cells) == Mark.o

    cells = [Mark.o, Mark.x, Mark.x, Mark.o, Mark.x, Mark.x, Mark.o, Mark.x, Mark.o]
    # Column 0 (O) comes before column 1 (X).
    assert find_winner(cells) == Mark.o


def test_is_full() -> None:
    cells = [Mark.x] * 9
    assert is_full(cells)
    cells[4] = None
    assert not is_full(cells)


@pytest.mark.parametrize("index", [0, 4, 8])
def test_is_valid_index_accepts_board_cells(index: int) -> None:
    assert is_valid_index(index)


@pytest.mark.parametrize("index", [-1, 9, 100, True, False, 1.0, "1", None])
def test_is_valid_index_rejects_everything_else(index: object) -> None:
    assert not is_valid_index(index)
