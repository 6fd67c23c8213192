from match3.effects.board_effects import BoardEffect, BoardSnapshot, MatchEffect, RefillEffect
from match3.effects.log import EffectLog

__all__ = [
    "BoardEffect",
    "BoardSnapshot",
    "EffectLog",
    "MatchEffect",
    "RefillEffect",
]
