from __future__ import annotations

import os
from typing import Mapping, Optional

from .board import DEFAULT_BOARD_SIZE
from .session import Rules, TieRule


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == '' or raw.strip().lower() in ('none', 'unlimited'):
        return None
    return int(raw)


def rules_from_env(env: Optional[Mapping[str, str]] = None) -> Rules:
    """Builds Rules from QGOMOKU_BOARD_SIZE, QGOMOKU_TIE_RULE and QGOMOKU_OBSERVATION_LIMIT."""
    env = os.environ if env is None else env
    return Rules(
        board_size=int(env.get('QGOMOKU_BOARD_SIZE', str(DEFAULT_BOARD_SIZE))),
        tie_rule=TieRule(env.get('QGOMOKU_TIE_RULE', TieRule.DRAW.value).strip().lower()),
        observation_limit=_parse_limit(env.get('QGOMOKU_OBSERVATION_LIMIT')),
    )
