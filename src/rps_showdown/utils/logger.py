"""
日志工具模块
Logger Utility Module
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any

ROOT_LOGGER = "RPS"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def get_log_level(level_str: Optional[str]) -> int:
    """级别名称转为 logging 常量，未知或为空时返回 INFO"""
    if not level_str:
        return logging.INFO
    return _LEVELS.get(str(level_str).upper(), logging.INFO)


def _root_logger() -> logging.Logger:
    """RPS 根记录器，第一次获取时挂载控制台处理器（stdout，INFO）"""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == target
               for h in logger.handlers)


def setup_logger(
    name: str = ROOT_LOGGER,
    log_file: Optional[str] = None,
    level: Optional[int] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    获取并配置 RPS.* 层级下的日志记录器

    处理器只挂在 RPS 根记录器上，RPS.* 子记录器不设级别、不挂处理器，
    记录向上传递，因此根记录器的级别和文件输出对所有模块生效。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选，目录不存在时自动创建；同一文件只挂一次）
        level: 日志级别（None 时子记录器继承根记录器的级别）
        format_string: 文件处理器的格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    _root_logger()
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    if log_file:
        path = Path(log_file)
        if not _has_file_handler(logger, path):
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding='utf-8')
            handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
            logger.addHandler(handler)

    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = ROOT_LOGGER) -> logging.Logger:
    """
    按配置文件的 logging 段设置日志记录器（默认作用于 RPS 根记录器）

    Args:
        config: 包含 level、file 键的字典
        name: 日志记录器名称
    """
    return setup_logger(name=name,
                        log_file=config.get('file'),
                        level=get_log_level(config.get('level')))
