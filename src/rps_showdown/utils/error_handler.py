"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional, Callable, Dict
from .exceptions import GameException, InvalidMoveException, ConfigurationException
from .logger import setup_logger

logger = setup_logger("RPS.ErrorHandler")

ErrorCallback = Callable[[Exception, Optional[str]], None]


def _log_invalid_move(exception: InvalidMoveException, context: Optional[str]):
    logger.warning(f"无效出拳 [{exception.raw_value!r}]: {exception.message}")


def _log_game_error(exception: GameException, context: Optional[str]):
    logger.error(f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}")


def _log_config_error(exception: ConfigurationException, context: Optional[str]):
    logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")


class ErrorHandler:
    """
    按异常类型分发的错误处理器

    查找顺序沿异常类的 MRO，子类的处理函数优先于父类。
    """

    DEFAULTS: Dict[type, ErrorCallback] = {
        InvalidMoveException: _log_invalid_move,
        GameException: _log_game_error,
        ConfigurationException: _log_config_error,
    }

    def __init__(self):
        self.error_callbacks: Dict[type, ErrorCallback] = dict(self.DEFAULTS)

    def register_handler(self, exception_type: type, handler: ErrorCallback):
        """注册（或替换）某类异常的处理函数"""
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")

    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            bool: 是否由已注册的处理函数成功处理
        """
        where = f" (上下文: {context})" if context else ""
        logger.debug(f"处理异常{where}: {type(exception).__name__}: {exception}")

        handler = next((self.error_callbacks[klass] for klass in type(exception).__mro__
                        if klass in self.error_callbacks), None)
        if handler is None:
            logger.error(f"未处理的异常{where}: {type(exception).__name__}: {exception}")
            logger.debug("".join(traceback.format_exception(
                type(exception), exception, exception.__traceback__)))
            return False

        try:
            handler(exception, context)
        except Exception as e:
            logger.error(f"错误处理函数执行异常: {e}", exc_info=True)
            return False
        return True


# 全局错误处理器实例
global_error_handler = ErrorHandler()
