from __future__ import annotations

# Facade module that re-exports the Quantum Gomoku core.
# The Flask app, the CLI entrypoint and the tests import from here.
# Single-responsibility modules live under quantum_gomoku/*.

from quantum_gomoku.board import (  # noqa: F401
    BLACK,
    BOTH,
    DEFAULT_BOARD_SIZE,
    MIN_SIZE,
    PLAYERS,
    WHITE,
    Board,
    Cell,
    Coord,
    Pending,
    Player,
    board_size,
    clamp_probability,
    coord_of,
    create_empty_board,
    index_of,
    is_resolved,
    opponent,
    pretty,
)
from quantum_gomoku.errors import (  # noqa: F401
    EngineError,
    IllegalActionError,
    IndexOutOfBoundsError,
    InvalidPlayerError,
    InvalidProbabilityError,
    InvalidSizeError,
    OccupiedCellError,
)
from quantum_gomoku.placement import place_stone  # noqa: F401
from quantum_gomoku.lines import (  # noqa: F401
    DIRECTIONS,
    WIN_LENGTH,
    determine_winner,
    find_five_in_row,
    has_five_in_row,
)
from quantum_gomoku.collapse import CollapseResult, RandomSource, collapse_board  # noqa: F401
from quantum_gomoku.session import (  # noqa: F401
    AWAITING_DECISION,
    GAME_OVER,
    PHASES,
    PLACING,
    VIEWING_OBSERVATION,
    Rules,
    Session,
    TieRule,
    new_session,
    next_probability,
    observe,
    place,
    reset,
    revert,
    skip,
)
from quantum_gomoku.config import rules_from_env  # noqa: F401


def main() -> None:
    # CLI driver delegated to quantum_gomoku.cli
    from quantum_gomoku.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
