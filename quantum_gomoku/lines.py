from __future__ import annotations

from typing import List, Optional, Sequence

from .board import BLACK, BOTH, WHITE, Cell, Player, in_bounds, index_of

WIN_LENGTH = 5

# (dx, dy): horizontal, vertical, down-right, down-left
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))


def _run_from(cells: Sequence[Cell], size: int, x: int, y: int, dx: int, dy: int, color: Player) -> List[int]:
    """Indices of the consecutive `color` cells starting at (x, y), walking (dx, dy) only."""
    run: List[int] = []
    while in_bounds(x, y, size):
        i = index_of(x, y, size)
        if cells[i] != color:
            break
        run.append(i)
        x, y = x + dx, y + dy
    return run


def find_five_in_row(cells: Sequence[Cell], size: int, color: Player) -> Optional[List[int]]:
    """
    Returns the indices of the first run of at least five `color` cells in scan order, or None.
    Each run is found from its first cell, so only the positive direction is walked.
    Pending cells never compare equal to a color.
    """
    for i, cell in enumerate(cells):
        if cell != color:
            continue
        x, y = i % size, i // size
        for dx, dy in DIRECTIONS:
            run = _run_from(cells, size, x, y, dx, dy, color)
            if len(run) >= WIN_LENGTH:
                return run
    return None


def has_five_in_row(cells: Sequence[Cell], size: int, color: Player) -> bool:
    return find_five_in_row(cells, size, color) is not None


def determine_winner(cells: Sequence[Cell], size: int) -> Optional[str]:
    """'both' when both colors have five in a row, the single winning color, or None."""
    black = has_five_in_row(cells, size, BLACK)
    white = has_five_in_row(cells, size, WHITE)
    if black and white:
        return BOTH
    if black:
        return BLACK
    if white:
        return WHITE
    return None
