"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("RPS.ConfigLoader")

DEFAULT_DELAY_SECONDS = 1.2
OPPONENT_POLICIES = ('uniform', 'non_tying')


@dataclass
class GameConfig:
    """游戏配置"""
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    opponent_policy: str = 'uniform'
    seed: Optional[int] = None
    logging: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        校验配置取值

        Raises:
            ConfigurationException: 取值非法，config_key 指出出错的键
        """
        if isinstance(self.delay_seconds, bool) or not isinstance(self.delay_seconds, (int, float)):
            raise ConfigurationException(
                f"延迟必须是数字: {self.delay_seconds!r}", config_key='game.delay_seconds')
        if self.delay_seconds <= 0:
            raise ConfigurationException(
                f"延迟必须大于0: {self.delay_seconds}", config_key='game.delay_seconds')
        if self.opponent_policy not in OPPONENT_POLICIES:
            raise ConfigurationException(
                f"未知的对手策略: {self.opponent_policy!r}", config_key='game.opponent_policy')
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigurationException(
                f"随机种子必须是整数: {self.seed!r}", config_key='game.seed')

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "GameConfig":
        """
        从完整配置字典创建游戏配置

        Args:
            config: 完整配置字典（包含 game 和 logging 段）

        Returns:
            GameConfig: 游戏配置
        """
        game = ConfigLoader.get_game_config(config)
        return cls(
            delay_seconds=game.get('delay_seconds', DEFAULT_DELAY_SECONDS),
            opponent_policy=str(game.get('opponent_policy', 'uniform')).lower(),
            seed=game.get('seed'),
            logging=ConfigLoader.get_logging_config(config)
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（与配置文件结构一致）"""
        return {
            'game': {
                'delay_seconds': self.delay_seconds,
                'opponent_policy': self.opponent_policy,
                'seed': self.seed
            },
            'logging': dict(self.logging)
        }


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            ConfigurationException: YAML解析错误或顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"YAML解析错误: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_path}")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取游戏配置"""
        return config.get('game') or {}

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取日志配置"""
        return config.get('logging') or {}

    @staticmethod
    def load_game_config(config_path: Optional[str] = None) -> GameConfig:
        """
        加载游戏配置，未指定路径时返回默认配置

        Args:
            config_path: 配置文件路径（可选）

        Returns:
            GameConfig: 游戏配置
        """
        if config_path is None:
            return GameConfig()
        return GameConfig.from_dict(ConfigLoader.load_config(config_path))
