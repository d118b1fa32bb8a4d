from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import InvalidSizeError

Player = str  # 'black' or 'white'
Coord = Tuple[int, int]  # (x, y)

BLACK: Player = 'black'
WHITE: Player = 'white'
BOTH = 'both'
PLAYERS: Tuple[Player, Player] = (BLACK, WHITE)

MIN_SIZE = 5
DEFAULT_BOARD_SIZE = 15


@dataclass(frozen=True)
class Pending:
    """A stone that has not collapsed yet; `probability` is its chance of becoming black."""
    player: Player
    probability: float


# None (empty), Pending, or a resolved Player
Cell = Union[None, Pending, Player]
Board = Tuple[Cell, ...]  # row-major, length == size * size


def opponent(player: Player) -> Player:
    return WHITE if player == BLACK else BLACK


def _check_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size < MIN_SIZE:
        raise InvalidSizeError(f"size must be an integer >= {MIN_SIZE}, got {size!r}")
    return size


def create_empty_board(size: int) -> Board:
    """Creates a size x size board with every cell empty."""
    _check_size(size)
    return (None,) * (size * size)


def board_size(board: Board) -> int:
    """Recovers the side length from a flat board."""
    size = math.isqrt(len(board))
    if size * size != len(board):
        raise InvalidSizeError(f"board of length {len(board)} is not square")
    return _check_size(size)


def index_of(x: int, y: int, size: int) -> int:
    return y * size + x


def coord_of(index: int, size: int) -> Coord:
    return index % size, index // size


def in_bounds(x: int, y: int, size: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def clamp_probability(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def is_resolved(board: Board) -> bool:
    """True when no cell on the board is still pending."""
    return not any(isinstance(cell, Pending) for cell in board)


def pretty(board: Board, size: Optional[int] = None) -> str:
    """Generates a human-readable string of the board: X black, O white, NN% chance of black for pending stones."""
    if size is None:
        size = board_size(board)
    lines: List[str] = ['    ' + ' '.join(f"{x:>3}" for x in range(size))]
    for y in range(size):
        row: List[str] = []
        for x in range(size):
            cell = board[index_of(x, y, size)]
            if cell is None:
                row.append('  .')
            elif isinstance(cell, Pending):
                row.append(f"{round(clamp_probability(cell.probability) * 100):>3}")
            elif cell == BLACK:
                row.append('  X')
            else:
                row.append('  O')
        lines.append(f"{y:>3} " + ' '.join(row))
    return "\n".join(lines)
