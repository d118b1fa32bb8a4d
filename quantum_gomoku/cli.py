from __future__ import annotations

import argparse
import random
from typing import List, Optional

from .board import BOTH, index_of, pretty
from .config import rules_from_env
from .errors import IllegalActionError
from .session import (
    AWAITING_DECISION,
    GAME_OVER,
    PLACING,
    VIEWING_OBSERVATION,
    Rules,
    Session,
    TieRule,
    describe_player,
    new_session,
    next_probability,
    observe,
    place,
    reset,
    revert,
    skip,
)

HELP = "Commands: x,y = place | o = observe | s = skip | b = back | r = reset | q = quit"


def _parse_coord(text: str, size: int) -> Optional[int]:
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.split(sep) if t != '']
        x, y = int(x_s), int(y_s)
    except ValueError:
        return None
    if not (0 <= x < size and 0 <= y < size):
        return None
    return index_of(x, y, size)


def _status(session: Session) -> str:
    if session.phase == GAME_OVER:
        if session.winner == BOTH:
            return 'Both players made five in a row. Draw.'
        return f"{describe_player(session.winner)} wins! Enter r to play again."
    if session.phase == VIEWING_OBSERVATION:
        return 'Showing the observation. Enter b to return to the quantum board.'
    player = describe_player(session.current_player)
    pct = round(next_probability(session) * 100)
    left = session.observations_for(session.current_player)
    budget = '' if left is None else f" ({left} observations left)"
    if session.phase == AWAITING_DECISION:
        return f"{player}: observe (o) or pass the turn (s){budget}."
    return f"{player} to move; next stone is {pct}% black{budget}."


def _show(session: Session) -> None:
    print(pretty(session.board, session.size))
    if session.log:
        print(session.log[0])
    print(_status(session))


def main(argv: Optional[List[str]] = None) -> None:
    env_rules = rules_from_env()
    parser = argparse.ArgumentParser(description='Quantum Gomoku in the terminal')
    parser.add_argument('--size', type=int, default=env_rules.board_size, help='Board size (NxN), at least 5')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for observations')
    parser.add_argument('--tie-rule', choices=[r.value for r in TieRule], default=env_rules.tie_rule.value,
                        help='Scoring when both colors make five at once')
    parser.add_argument('--observations', type=int, default=env_rules.observation_limit,
                        help='Observations per player (default: unlimited)')
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        rules = Rules(board_size=args.size, tie_rule=TieRule(args.tie_rule), observation_limit=args.observations)
    except ValueError as e:
        parser.error(str(e))
    session = new_session(rules)
    print(HELP)
    _show(session)

    while True:
        try:
            text = input('> ').strip().lower()
        except EOFError:
            return
        if text in ('q', 'quit'):
            return
        try:
            if text == 'r':
                session = reset(session)
            elif text == 'o':
                before = session
                session = observe(session, rng.random)
                if session is before:
                    print('No observations left.')
            elif text == 's':
                session = skip(session)
            elif text == 'b':
                session = revert(session)
            elif session.phase == PLACING:
                index = _parse_coord(text, session.size)
                if index is None:
                    print('Could not parse. ' + HELP)
                    continue
                session = place(session, index)
            else:
                print(HELP)
                continue
        except IllegalActionError as e:
            print(f"error: {e}")
            continue
        _show(session)
