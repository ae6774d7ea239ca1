from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_LOG_LEVEL = 'WARNING'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game, read from the environment."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{name} must be an integer, got {raw!r}') from None


def _env_log_level(environ: Mapping[str, str]) -> str:
    level = environ.get('TICTACTOE_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f'TICTACTOE_LOG_LEVEL must be one of {", ".join(LOG_LEVELS)}, got {level!r}')
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Reads TICTACTOE_ROWS, TICTACTOE_COLS and TICTACTOE_LOG_LEVEL.

    Unset or blank variables fall back to a 3x3 board logging at WARNING.
    Raises ConfigError for values that cannot be used.
    """
    env = os.environ if environ is None else environ
    return GameConfig(
        rows=_env_int(env, 'TICTACTOE_ROWS', DEFAULT_ROWS),
        cols=_env_int(env, 'TICTACTOE_COLS', DEFAULT_COLS),
        log_level=_env_log_level(env),
    )
