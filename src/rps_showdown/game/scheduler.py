"""
延迟任务调度
Deferred Action Scheduling
"""
import threading
from typing import Callable, List
from ..utils.logger import setup_logger

logger = setup_logger("RPS.Scheduler")


class ScheduledAction:
    """已调度的延迟任务句柄"""

    def __init__(self, callback: Callable[[], None], delay: float):
        self.callback = callback
        self.delay = delay
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        """任务是否仍待执行"""
        return not self.cancelled and not self.fired

    def cancel(self):
        """取消任务，已执行的任务取消无效果"""
        self.cancelled = True

    def fire(self):
        """执行回调（已取消或已执行则忽略）"""
        if not self.active:
            return
        self.fired = True
        self.callback()


class TimerScheduler:
    """基于 threading.Timer 的调度器，回调在计时线程中执行"""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        """
        在 delay 秒后执行回调

        Args:
            delay: 延迟秒数
            callback: 回调函数

        Returns:
            ScheduledAction: 可取消的任务句柄
        """
        action = _TimerAction(callback, delay)
        action.start()
        logger.debug(f"已调度延迟任务: {delay:.2f}s")
        return action


class _TimerAction(ScheduledAction):

    def __init__(self, callback: Callable[[], None], delay: float):
        super().__init__(callback, delay)
        self._timer = threading.Timer(delay, self.fire)
        self._timer.daemon = True

    def start(self):
        self._timer.start()

    def cancel(self):
        super().cancel()
        self._timer.cancel()


class ManualScheduler:
    """
    手动推进的调度器

    任务只在调用 advance() 或 run_pending() 时执行，适用于测试
    和由主循环驱动时间的界面。
    """

    def __init__(self):
        self.now = 0.0
        self._queue: List[tuple] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        action = ScheduledAction(callback, delay)
        self._queue.append((self.now + delay, action))
        return action

    @property
    def pending_count(self) -> int:
        """仍待执行的任务数"""
        return sum(1 for _, action in self._queue if action.active)

    def advance(self, seconds: float) -> int:
        """
        推进时间并执行到期任务

        Args:
            seconds: 推进的秒数

        Returns:
            int: 本次执行的任务数
        """
        self.now += seconds
        due = [(t, a) for t, a in self._queue if t <= self.now]
        self._queue = [(t, a) for t, a in self._queue if t > self.now]
        fired = 0
        for _, action in sorted(due, key=lambda item: item[0]):
            if action.active:
                action.fire()
                fired += 1
        return fired

    def run_pending(self) -> int:
        """立即执行所有未取消的任务"""
        if not self._queue:
            return 0
        latest = max(t for t, _ in self._queue)
        return self.advance(max(0.0, latest - self.now))
