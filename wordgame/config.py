# wordgame/config.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import BINGO_BONUS, MAX_PLAYERS, MIN_PLAYERS, RACK_SIZE

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a match"""
    rack_size: int = RACK_SIZE
    bingo_bonus: int = BINGO_BONUS
    # Selecting a different square: keep the play direction (False) or reset to across (True)
    reset_direction_on_select: bool = False
    min_players: int = MIN_PLAYERS
    max_players: int = MAX_PLAYERS
    dictionary_path: Optional[Path] = None
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, **overrides) -> 'GameConfig':
        """Build a config from WORDGAME_* environment variables; keyword overrides win"""
        values = {}
        if os.getenv('WORDGAME_DICTIONARY'):
            values['dictionary_path'] = Path(os.environ['WORDGAME_DICTIONARY'])
        if os.getenv('WORDGAME_SEED'):
            values['seed'] = int(os.environ['WORDGAME_SEED'])
        if os.getenv('WORDGAME_RESET_DIRECTION'):
            values['reset_direction_on_select'] = (
                os.environ['WORDGAME_RESET_DIRECTION'].strip().lower() in TRUE_VALUES
            )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
