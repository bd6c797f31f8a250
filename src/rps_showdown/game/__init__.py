"""
游戏模块
Game Module
"""
from .state_machine import GameState, GameStateMachine
from .game_logic import (
    Move, GameRules, RoundResult, OpponentPolicy, RandomOpponent,
    RoundEngine, MatchState
)
from .scheduler import ScheduledAction, TimerScheduler, ManualScheduler
from .game_controller import GameController

__all__ = [
    'GameController',
    'Move',
    'GameRules',
    'RoundResult',
    'OpponentPolicy',
    'RandomOpponent',
    'RoundEngine',
    'MatchState',
    'GameState',
    'GameStateMachine',
    'ScheduledAction',
    'TimerScheduler',
    'ManualScheduler'
]
