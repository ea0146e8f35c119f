from __future__ import annotations

from collections.abc import Sequence

from tictactoe.api.models import Mark

BOARD_SIZE = 9

# Rows, columns, then diagonals. The order decides which triple is reported first.
WIN_TRIPLES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

Cells = Sequence[Mark | None]


def empty_board() -> list[Mark | None]:
    return [None] * BOARD_SIZE


def is_valid_index(index: object) -> bool:
    # bool is an int subclass; True/False are not cell indexes.
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE


def find_winner(cells: Cells) -> Mark | None:
    """Return the mark owning the first complete triple, if any."""

    for a, b, c in WIN_TRIPLES:
        mark = cells[a]
        if mark is not None and mark == cells[b] == cells[c]:
            return mark
    return None


def is_full(cells: Cells) -> bool:
    return all(cell is not None for cell in cells)
