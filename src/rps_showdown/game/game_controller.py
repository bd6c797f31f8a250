"""
游戏控制器
Game Controller - 负责延迟结算、取消和界面回调
"""
import random
import threading
from typing import Optional, Callable
from .state_machine import GameState
from .game_logic import Move, RoundEngine, RoundResult, MatchState, OpponentPolicy, RandomOpponent
from .scheduler import ScheduledAction, TimerScheduler
from ..utils.config_loader import GameConfig
from ..utils.logger import setup_logger

logger = setup_logger("RPS.GameController")


class GameController:
    """游戏控制器类，持有回合引擎和唯一的延迟结算任务"""

    def __init__(self,
                 engine: Optional[RoundEngine] = None,
                 scheduler=None,
                 delay_seconds: float = 1.2):
        """
        初始化游戏控制器

        Args:
            engine: 回合引擎（默认均匀随机对手）
            scheduler: 调度器，需提供 schedule(delay, callback)（默认 TimerScheduler）
            delay_seconds: 程序“思考”的延迟秒数，必须大于0
        """
        if delay_seconds <= 0:
            raise ValueError(f"延迟必须大于0: {delay_seconds}")

        self.engine = engine or RoundEngine()
        self.scheduler = scheduler or TimerScheduler()
        self.delay_seconds = delay_seconds

        self._lock = threading.RLock()
        self._generation = 0
        self._pending_action: Optional[ScheduledAction] = None

        # 回调函数
        self.on_state_changed: Optional[Callable[[MatchState], None]] = None
        self.on_round_result: Optional[Callable[[RoundResult, MatchState], None]] = None

        logger.info(f"游戏控制器初始化完成，延迟: {delay_seconds}s")

    @classmethod
    def from_config(cls, config: GameConfig, scheduler=None) -> "GameController":
        """
        根据游戏配置创建控制器

        Args:
            config: 游戏配置
            scheduler: 调度器（可选）

        Returns:
            GameController: 游戏控制器
        """
        rng = random.Random(config.seed)
        opponent = RandomOpponent(policy=OpponentPolicy(config.opponent_policy), rng=rng)
        return cls(engine=RoundEngine(opponent=opponent),
                   scheduler=scheduler,
                   delay_seconds=config.delay_seconds)

    @property
    def generation(self) -> int:
        """重置计数，延迟任务据此判断是否过期"""
        return self._generation

    def play(self, move: Move) -> bool:
        """
        玩家出拳，程序出拳在延迟之后结算

        Args:
            move: 玩家出拳

        Returns:
            bool: 是否接受了本次出拳（待结算期间返回 False）
        """
        with self._lock:
            if not self.engine.start_round(move):
                return False
            token = self._generation
            self._pending_action = self.scheduler.schedule(
                self.delay_seconds, lambda: self._resolve(token))
            # 通知在锁内发出，顺序与状态变化一致
            self._notify_state_changed(self.engine.state.snapshot())
        return True

    def _resolve(self, token: int):
        """延迟到期后的结算回调"""
        with self._lock:
            if token != self._generation:
                logger.debug(f"忽略过期的结算回调 (token={token}, 当前={self._generation})")
                return
            if not self.engine.pending:
                logger.debug("没有待结算的回合，忽略结算回调")
                return
            self._pending_action = None
            result = self.engine.resolve_round()
            snapshot = self.engine.state.snapshot()

            if self.on_round_result:
                try:
                    self.on_round_result(result, snapshot)
                except Exception as e:
                    logger.error(f"回合结果回调异常: {e}", exc_info=True)
            self._notify_state_changed(snapshot)

    def reset(self):
        """重置比赛，取消尚未结算的回合"""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self.engine.reset()
            logger.info("重置比赛")
            self._notify_state_changed(self.engine.state.snapshot())

    def shutdown(self):
        """
        停止控制器：取消尚未执行的延迟任务并放弃进行中的回合

        比分保留，之后仍可继续出拳。
        """
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self.engine.abandon_round()
        logger.info("游戏控制器已停止")

    def _cancel_pending(self):
        if self._pending_action is not None:
            self._pending_action.cancel()
            logger.debug("已取消待结算的回合")
            self._pending_action = None

    def _notify_state_changed(self, snapshot: MatchState):
        """通知状态改变"""
        if self.on_state_changed:
            try:
                self.on_state_changed(snapshot)
            except Exception as e:
                logger.error(f"状态改变回调异常: {e}", exc_info=True)

    def get_state(self) -> MatchState:
        """获取比赛状态副本"""
        with self._lock:
            return self.engine.state.snapshot()

    def get_current_state(self) -> GameState:
        """获取状态机当前状态"""
        return self.engine.state_machine.get_current_state()

    def is_pending(self) -> bool:
        """是否有回合待结算"""
        with self._lock:
            return self.engine.pending
