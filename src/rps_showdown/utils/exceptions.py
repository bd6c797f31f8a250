"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidMoveException(GameException):
    """无法解析的出拳"""
    def __init__(self, message: str, raw_value: Optional[str] = None):
        super().__init__(message)
        self.raw_value = raw_value


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
