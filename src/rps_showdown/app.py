"""
应用程序主类（控制台界面）
Application Main Class - Console Presentation
"""
import signal
import threading
from typing import Optional, Callable
from .game import GameController, Move, MatchState, RoundResult
from .utils.logger import setup_logger, setup_logger_from_config
from .utils.config_loader import ConfigLoader, GameConfig
from .utils.error_handler import global_error_handler
from .utils.exceptions import InvalidMoveException

logger = setup_logger("RPS.App")

TITLE = "RPS Showdown"
RESET_COMMANDS = ('reset',)
QUIT_COMMANDS = ('quit', 'exit', 'q')
# 首字母快捷输入
_SHORTCUTS = {move.value[0]: move for move in Move.cycle()}


def render_state(state: MatchState) -> str:
    """
    把比赛状态渲染为文本

    Args:
        state: 比赛状态

    Returns:
        str: 多行文本
    """
    player_move = state.last_player_move.value if state.last_player_move else "-"
    if state.pending and state.last_app_move is None:
        app_move = "thinking..."
    else:
        app_move = state.last_app_move.value if state.last_app_move else "-"

    lines = [
        "Scoreboard",
        f"  Player {state.player_score} - {state.app_score} App",
        f"  You Chose: {player_move}",
        f"  App Chose: {app_move}",
    ]
    if state.outcome is not None:
        lines.append(f"  {state.outcome.label}")
    if not state.pending:
        lines.append("Play again?" if state.outcome else "Make your move!")
    return "\n".join(lines)


def parse_command(text: str):
    """
    解析用户输入

    Returns:
        Move、"reset"、"quit" 之一

    Raises:
        InvalidMoveException: 无法识别的输入
    """
    key = text.strip().lower()
    if key in RESET_COMMANDS:
        return "reset"
    if key in QUIT_COMMANDS:
        return "quit"
    if key in _SHORTCUTS:
        return _SHORTCUTS[key]
    return Move.from_string(key)


class ConsoleApp:
    """控制台应用程序，只读取比赛状态并转发两种用户操作"""

    def __init__(self,
                 config: Optional[GameConfig] = None,
                 controller: Optional[GameController] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Callable[[str], None] = print):
        """
        初始化应用程序

        Args:
            config: 游戏配置（默认配置）
            controller: 游戏控制器（默认按配置创建）
            input_func: 读取一行输入
            output_func: 输出一段文本
        """
        self.config = config or GameConfig()
        self.controller = controller or GameController.from_config(self.config)
        self.input_func = input_func or input
        self.output_func = output_func

        self.should_exit = False
        self._round_done = threading.Event()

        self.controller.on_state_changed = self._on_state_changed
        self.controller.on_round_result = self._on_round_result

    @classmethod
    def from_config_file(cls, config_path: Optional[str] = None, **overrides) -> "ConsoleApp":
        """
        从配置文件创建应用程序，文件不存在时使用默认配置

        Args:
            config_path: 配置文件路径
            overrides: 覆盖配置的字段（None 值忽略）

        Raises:
            ConfigurationException: 配置非法
        """
        try:
            config = ConfigLoader.load_game_config(config_path)
        except FileNotFoundError:
            logger.warning(f"配置文件不存在: {config_path}，使用默认配置")
            config = GameConfig()

        values = config.to_dict()['game']
        values.update({k: v for k, v in overrides.items() if v is not None})
        config = GameConfig(logging=config.logging, **values)

        if config.logging:
            setup_logger_from_config(config.logging)
        return cls(config=config)

    def install_signal_handlers(self):
        """注册信号处理"""
        signal.signal(signal.SIGTERM, self._signal_handler)

    def _signal_handler(self, signum, frame):
        logger.info(f"收到信号 {signum}，准备退出")
        self.should_exit = True
        self._round_done.set()

    def _on_state_changed(self, state: MatchState):
        self.output_func(render_state(state))
        # 结算后的比分板输出完毕才放行下一次输入提示
        if not state.pending:
            self._round_done.set()

    def _on_round_result(self, result: RoundResult, state: MatchState):
        logger.debug(f"回合结果: {result.label}")

    def handle_line(self, line: str) -> bool:
        """
        处理一行输入

        Args:
            line: 用户输入

        Returns:
            bool: 是否继续运行
        """
        try:
            command = parse_command(line)
        except InvalidMoveException as e:
            global_error_handler.handle(e, "读取输入")
            self.output_func(f"Unknown move {line.strip()!r}. Choose rock, paper or scissors.")
            return True

        if command == "quit":
            return False
        if command == "reset":
            self.controller.reset()
            return True

        self._round_done.clear()
        if not self.controller.play(command):
            self.output_func("Still choosing, please wait...")
            return True
        self.wait_for_round()
        return True

    def wait_for_round(self, timeout: Optional[float] = None) -> bool:
        """等待当前回合结算"""
        if timeout is None:
            timeout = self.controller.delay_seconds * 5
        return self._round_done.wait(timeout)

    def run(self) -> int:
        """
        主循环

        Returns:
            int: 退出码
        """
        self.output_func(TITLE)
        self.output_func(render_state(self.controller.get_state()))
        try:
            while not self.should_exit:
                try:
                    line = self.input_func("> ")
                except EOFError:
                    break
                if not self.handle_line(line):
                    break
        finally:
            self.cleanup()
        return 0

    def cleanup(self):
        """清理资源"""
        self.controller.shutdown()
        logger.info("应用程序已退出")


__all__ = ['ConsoleApp', 'render_state', 'parse_command']
