"""
出拳枚举类型
Move Enumeration
"""
from enum import Enum
from typing import List
from ...utils.exceptions import InvalidMoveException

# 别名：部分地区把石头叫 stone
_ALIASES = {
    'stone': 'rock',
}


class Move(Enum):
    """出拳枚举，声明顺序即循环顺序，每个成员胜过它的前一个"""
    ROCK = "rock"          # 石头
    PAPER = "paper"        # 布
    SCISSORS = "scissors"  # 剪刀

    def __str__(self):
        return self.value

    @classmethod
    def cycle(cls) -> List["Move"]:
        """按循环顺序返回全部出拳"""
        return list(cls)

    @classmethod
    def from_string(cls, value: str) -> "Move":
        """
        从字符串创建出拳枚举

        Args:
            value: 出拳字符串（rock/stone, paper, scissors，不区分大小写）

        Returns:
            Move: 出拳枚举值

        Raises:
            InvalidMoveException: 无法识别的出拳
        """
        key = str(value).strip().lower()
        key = _ALIASES.get(key, key)
        for move in cls:
            if move.value == key:
                return move
        raise InvalidMoveException(f"无法识别的出拳: {value!r}", raw_value=value)
