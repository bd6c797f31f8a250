"""
剪刀石头布游戏主程序入口
Rock Paper Scissors Game Main Entry
"""
import sys
import argparse
from typing import List, Optional

from .app import ConsoleApp
from .utils.config_loader import OPPONENT_POLICIES
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException
from .utils.logger import setup_logger

logger = setup_logger("RPS.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(prog='rps-showdown', description='剪刀石头布游戏')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（YAML，可选）'
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=None,
        help='程序出拳前的延迟秒数（默认: 1.2）'
    )
    parser.add_argument(
        '--policy',
        choices=OPPONENT_POLICIES,
        default=None,
        help='对手策略: uniform 可能平局, non_tying 不会平局'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='随机种子'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)

    logger.info("剪刀石头布游戏启动 / RPS Showdown starting")

    try:
        app = ConsoleApp.from_config_file(
            args.config,
            delay_seconds=args.delay,
            opponent_policy=args.policy,
            seed=args.seed
        )
    except ConfigurationException as e:
        global_error_handler.handle(e, "加载配置")
        return 1

    app.install_signal_handlers()
    try:
        return app.run()
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        return 0
    finally:
        logger.info("程序退出 / Program exited")


if __name__ == "__main__":
    sys.exit(main())
