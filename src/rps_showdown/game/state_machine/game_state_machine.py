"""
游戏状态机
Game State Machine
"""
from typing import Dict, FrozenSet, Optional
from .game_state import GameState
from ...utils.logger import setup_logger

logger = setup_logger("RPS.GameStateMachine")


class GameStateMachine:
    """
    两状态的回合状态机

    IDLE -> AWAITING_RESOLUTION（出拳），AWAITING_RESOLUTION -> IDLE（结算或放弃）。
    重置通过 reset() 直接回到 IDLE，不经过转换规则。
    """

    ALLOWED: Dict[GameState, FrozenSet[GameState]] = {
        GameState.IDLE: frozenset({GameState.AWAITING_RESOLUTION}),
        GameState.AWAITING_RESOLUTION: frozenset({GameState.IDLE}),
    }

    def __init__(self, initial_state: GameState = GameState.IDLE):
        self.current_state = initial_state
        self.previous_state: Optional[GameState] = None

    def can_transition_to(self, state: GameState) -> bool:
        return state in self.ALLOWED.get(self.current_state, frozenset())

    def transition_to(self, new_state: GameState) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功；目标即当前状态时视为成功
        """
        if new_state == self.current_state:
            return True
        if not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        self.previous_state, self.current_state = self.current_state, new_state
        logger.debug(f"状态转换: {self.previous_state} -> {self.current_state}")
        return True

    def reset(self, state: GameState = GameState.IDLE):
        """直接回到 state"""
        self.previous_state = self.current_state
        self.current_state = state

    def get_current_state(self) -> GameState:
        return self.current_state

    def is_in_state(self, state: GameState) -> bool:
        return self.current_state == state
