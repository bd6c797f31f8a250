"""
游戏规则实现
Game Rules Implementation
"""
from enum import Enum
from typing import List, Optional, Sequence, TypeVar
from .move import Move
from ...utils.logger import setup_logger

logger = setup_logger("RPS.GameRules")

T = TypeVar("T")


class RoundResult(Enum):
    """回合结果枚举（由双方出拳推导，不单独存储）"""
    PLAYER_WIN = "player_win"    # 玩家获胜
    APP_WIN = "app_win"          # 程序获胜
    DRAW = "draw"                # 平局

    @property
    def label(self) -> str:
        """界面显示文字"""
        return _LABELS[self]

    def __str__(self):
        return self.label


_LABELS = {
    RoundResult.PLAYER_WIN: "You Win!",
    RoundResult.APP_WIN: "You Lose!",
    RoundResult.DRAW: "It's a Draw!",
}


def cyclic_beats(first: T, second: T, order: Sequence[T]) -> bool:
    """
    循环胜负关系：元素 i 胜过 j 当且仅当 (i - j) mod n 位于 1..(n-1)/2

    n=3 时即每个元素胜过它的前一个；n 必须为奇数，否则关系不是完全的。

    Args:
        first: 第一个元素
        second: 第二个元素
        order: 循环顺序

    Returns:
        bool: first 是否胜过 second
    """
    size = len(order)
    if size % 2 == 0:
        raise ValueError(f"循环胜负关系需要奇数个元素，实际为 {size}")
    distance = (order.index(first) - order.index(second)) % size
    return 1 <= distance <= size // 2


class GameRules:
    """游戏规则类"""

    @staticmethod
    def beats(first: Move, second: Move) -> bool:
        """first 是否胜过 second"""
        return cyclic_beats(first, second, Move.cycle())

    @staticmethod
    def judge(player_move: Move, app_move: Move) -> RoundResult:
        """
        判断回合结果

        Args:
            player_move: 玩家出拳
            app_move: 程序出拳

        Returns:
            RoundResult: 回合结果
        """
        if player_move == app_move:
            logger.debug(f"平局: {player_move}")
            return RoundResult.DRAW

        if GameRules.beats(player_move, app_move):
            logger.debug(f"玩家获胜: {player_move} 胜 {app_move}")
            return RoundResult.PLAYER_WIN

        logger.debug(f"程序获胜: {app_move} 胜 {player_move}")
        return RoundResult.APP_WIN

    @staticmethod
    def winner_of(player_move: Optional[Move], app_move: Optional[Move]) -> Optional[str]:
        """
        界面高亮用的胜者标识

        Returns:
            Optional[str]: "player"、"app"、"draw"，任一方未出拳时为 None
        """
        if player_move is None or app_move is None:
            return None
        return {
            RoundResult.PLAYER_WIN: "player",
            RoundResult.APP_WIN: "app",
            RoundResult.DRAW: "draw",
        }[GameRules.judge(player_move, app_move)]

    @staticmethod
    def other_moves(move: Move) -> List[Move]:
        """除指定出拳以外的出拳"""
        return [m for m in Move.cycle() if m != move]
