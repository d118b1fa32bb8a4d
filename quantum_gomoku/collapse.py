from __future__ import annotations

import random
from typing import Callable, List, NamedTuple, Optional

from .board import BLACK, WHITE, Board, Cell, Pending, clamp_probability
from .lines import determine_winner

RandomSource = Callable[[], float]  # uniform draws in [0, 1)


class CollapseResult(NamedTuple):
    collapsed: Board
    winner: Optional[str]  # 'black', 'white', 'both' or None


def collapse_board(board: Board, size: int, random_source: RandomSource = random.random) -> CollapseResult:
    """
    Resolves every pending stone with one independent draw each, in index order.
    A stone becomes black when its draw is strictly below its (clamped) probability.
    Empty and already resolved cells are kept and consume no draws.
    """
    collapsed: List[Cell] = []
    for cell in board:
        if isinstance(cell, Pending):
            cell = BLACK if random_source() < clamp_probability(cell.probability) else WHITE
        collapsed.append(cell)
    resolved = tuple(collapsed)
    return CollapseResult(resolved, determine_winner(resolved, size))
