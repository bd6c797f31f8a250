"""
游戏逻辑模块
Game Logic Module
"""
from .move import Move
from .game_rules import GameRules, RoundResult, cyclic_beats
from .opponent import OpponentPolicy, RandomOpponent
from .round_engine import RoundEngine, MatchState

__all__ = [
    'Move',
    'GameRules',
    'RoundResult',
    'cyclic_beats',
    'OpponentPolicy',
    'RandomOpponent',
    'RoundEngine',
    'MatchState'
]
