from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .board import (
    BLACK,
    BOTH,
    DEFAULT_BOARD_SIZE,
    PLAYERS,
    Board,
    Player,
    _check_size,
    create_empty_board,
    opponent,
)
from .collapse import RandomSource, collapse_board
from .errors import IllegalActionError
from .placement import place_stone

logger = logging.getLogger(__name__)

PLACING = 'placing'
AWAITING_DECISION = 'awaiting_decision'
VIEWING_OBSERVATION = 'viewing_observation'
GAME_OVER = 'game_over'
PHASES = (PLACING, AWAITING_DECISION, VIEWING_OBSERVATION, GAME_OVER)

LOG_LIMIT = 6


class TieRule(str, Enum):
    """How a collapse that gives both colors five in a row is scored."""
    DRAW = 'draw'
    OBSERVER_WINS = 'observer'


@dataclass(frozen=True)
class Rules:
    board_size: int = DEFAULT_BOARD_SIZE
    tie_rule: TieRule = TieRule.DRAW
    observation_limit: Optional[int] = None  # per player; None means unlimited
    black_cycle: Tuple[float, ...] = (0.9, 0.7)
    white_cycle: Tuple[float, ...] = (0.1, 0.3)

    def __post_init__(self) -> None:
        _check_size(self.board_size)
        object.__setattr__(self, 'tie_rule', TieRule(self.tie_rule))
        if self.observation_limit is not None and self.observation_limit < 0:
            raise ValueError('observation_limit must be >= 0 or None')
        for cycle in (self.black_cycle, self.white_cycle):
            if not cycle or any(not 0.0 <= p <= 1.0 for p in cycle):
                raise ValueError(f"stone cycle must be a non-empty list of probabilities, got {cycle!r}")

    def cycle(self, player: Player) -> Tuple[float, ...]:
        return self.black_cycle if player == BLACK else self.white_cycle


@dataclass(frozen=True)
class Session:
    """Everything the observation game needs between two user actions. Transitions return a new Session."""
    rules: Rules
    board: Board
    current_player: Player = BLACK
    phase: str = PLACING
    stone_index: Tuple[int, int] = (0, 0)  # position in each player's stone cycle, (black, white)
    observations_left: Optional[Tuple[int, int]] = None  # (black, white)
    winner: Optional[str] = None
    snapshot: Optional[Board] = None  # pre-collapse board while viewing an observation
    log: Tuple[str, ...] = field(default_factory=tuple)  # newest first

    @property
    def size(self) -> int:
        return self.rules.board_size

    def observations_for(self, player: Player) -> Optional[int]:
        if self.observations_left is None:
            return None
        return self.observations_left[PLAYERS.index(player)]


def _with_log(session: Session, message: str) -> Session:
    logger.debug("%s", message)
    return replace(session, log=((message,) + session.log)[:LOG_LIMIT])


def _require(session: Session, phase: str, action: str) -> None:
    if session.phase != phase:
        raise IllegalActionError(f"cannot {action} while {session.phase}")


def _switch_turn(session: Session) -> Session:
    slot = PLAYERS.index(session.current_player)
    cycle_len = len(session.rules.cycle(session.current_player))
    stone_index = list(session.stone_index)
    stone_index[slot] = (stone_index[slot] + 1) % cycle_len
    return replace(
        session,
        stone_index=tuple(stone_index),
        current_player=opponent(session.current_player),
        phase=PLACING,
    )


def describe_player(player: str) -> str:
    return player.capitalize()


def new_session(rules: Optional[Rules] = None) -> Session:
    rules = rules or Rules()
    limit = rules.observation_limit
    return Session(
        rules=rules,
        board=create_empty_board(rules.board_size),
        observations_left=None if limit is None else (limit, limit),
    )


def reset(session: Session) -> Session:
    return new_session(session.rules)


def next_probability(session: Session, player: Optional[Player] = None) -> float:
    """Probability of becoming black for the next stone `player` (default: the player to move) would place."""
    player = player or session.current_player
    cycle = session.rules.cycle(player)
    return cycle[session.stone_index[PLAYERS.index(player)] % len(cycle)]


def place(session: Session, index: int) -> Session:
    _require(session, PLACING, 'place a stone')
    if not 0 <= index < len(session.board):
        raise IllegalActionError(f"no cell at index {index}")
    if session.board[index] is not None:
        raise IllegalActionError(f"cell {index} is occupied")
    player = session.current_player
    probability = next_probability(session)
    board = place_stone(session.board, index, player, probability)
    nxt = replace(session, board=board, phase=AWAITING_DECISION)
    return _with_log(nxt, f"{describe_player(player)} placed a {round(probability * 100)}% stone.")


def skip(session: Session) -> Session:
    _require(session, AWAITING_DECISION, 'skip')
    nxt = _switch_turn(session)
    return _with_log(nxt, f"{describe_player(session.current_player)} passed without observing.")


def observe(session: Session, random_source: RandomSource = random.random) -> Session:
    """
    Collapses the board on behalf of the player to move.
    With an exhausted observation budget this is a no-op and the same session is returned.
    """
    _require(session, AWAITING_DECISION, 'observe')
    observer = session.current_player
    left = session.observations_for(observer)
    if left == 0:
        return session
    observations_left = session.observations_left
    if observations_left is not None:
        counts = list(observations_left)
        counts[PLAYERS.index(observer)] -= 1
        observations_left = tuple(counts)

    collapsed, winner = collapse_board(session.board, session.size, random_source)
    if winner == BOTH and session.rules.tie_rule == TieRule.OBSERVER_WINS:
        winner = observer

    if winner is not None:
        nxt = replace(
            session,
            board=collapsed,
            phase=GAME_OVER,
            winner=winner,
            snapshot=None,
            observations_left=observations_left,
        )
        if winner == BOTH:
            return _with_log(nxt, 'The observation gave both players five in a row. Draw.')
        return _with_log(nxt, f"The observation decided it: {describe_player(winner)} wins!")

    nxt = replace(
        session,
        board=collapsed,
        phase=VIEWING_OBSERVATION,
        snapshot=session.board,
        observations_left=observations_left,
    )
    return _with_log(nxt, 'Observation shown on the board. No five in a row yet; go back to continue.')


def revert(session: Session) -> Session:
    """Restores the pre-observation board and hands the turn over."""
    _require(session, VIEWING_OBSERVATION, 'revert')
    restored = replace(session, board=session.snapshot, snapshot=None)
    nxt = _switch_turn(restored)
    return _with_log(nxt, f"Back to the quantum board. {describe_player(nxt.current_player)} to move.")
