"""
游戏状态枚举
Game State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """游戏状态枚举"""
    IDLE = auto()                  # 空闲，可以出拳
    AWAITING_RESOLUTION = auto()   # 已出拳，等待程序出拳结算

    def __str__(self):
        return self.name
