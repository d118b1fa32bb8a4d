from __future__ import annotations

import math
from numbers import Real

from .board import Board, Pending, Player, PLAYERS
from .errors import (
    IndexOutOfBoundsError,
    InvalidPlayerError,
    InvalidProbabilityError,
    OccupiedCellError,
)


def _check_probability(probability: object) -> float:
    if isinstance(probability, bool) or not isinstance(probability, Real):
        raise InvalidProbabilityError(f"probability must be a number, got {probability!r}")
    value = float(probability)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidProbabilityError(f"probability must be within [0, 1], got {probability!r}")
    return value


def place_stone(board: Board, index: int, player: Player, probability: float) -> Board:
    """
    Returns a new board with a pending stone for `player` at `index`.
    The input board is left untouched; every other cell is carried over as-is.
    """
    prob = _check_probability(probability)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(board):
        raise IndexOutOfBoundsError(f"index {index!r} outside board of {len(board)} cells")
    if board[index] is not None:
        raise OccupiedCellError(f"cell {index} is not empty")
    if player not in PLAYERS:
        raise InvalidPlayerError(f"unknown player {player!r}")
    return board[:index] + (Pending(player, prob),) + board[index + 1:]
