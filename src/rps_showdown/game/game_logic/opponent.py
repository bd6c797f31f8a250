"""
程序对手出拳策略
Opponent Move Policy
"""
import random
from enum import Enum
from typing import Optional
from .move import Move
from .game_rules import GameRules


class OpponentPolicy(Enum):
    """对手出拳策略"""
    UNIFORM = "uniform"        # 三种出拳均匀随机，可能平局
    NON_TYING = "non_tying"    # 只在与玩家不同的两种出拳中均匀随机，不会平局

    def __str__(self):
        return self.value


class RandomOpponent:
    """随机对手"""

    def __init__(self,
                 policy: OpponentPolicy = OpponentPolicy.UNIFORM,
                 rng: Optional[random.Random] = None):
        """
        初始化随机对手

        Args:
            policy: 出拳策略
            rng: 随机数生成器（测试时可传入固定种子）
        """
        self.policy = policy
        self.rng = rng or random.Random()

    def choose(self, player_move: Move) -> Move:
        """
        选择程序出拳

        Args:
            player_move: 玩家出拳（NON_TYING 策略需要）

        Returns:
            Move: 程序出拳
        """
        if self.policy is OpponentPolicy.NON_TYING:
            return self.rng.choice(GameRules.other_moves(player_move))
        return self.rng.choice(Move.cycle())
