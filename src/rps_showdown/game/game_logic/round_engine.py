"""
回合引擎
Round Engine
"""
from typing import Optional
from dataclasses import dataclass, fields, replace
from .move import Move
from .game_rules import GameRules, RoundResult
from .opponent import RandomOpponent
from ..state_machine import GameState, GameStateMachine
from ...utils.exceptions import GameException
from ...utils.logger import setup_logger

logger = setup_logger("RPS.RoundEngine")


@dataclass
class MatchState:
    """比赛状态：比分、最近出拳、结果以及是否有回合待结算"""
    player_score: int = 0
    app_score: int = 0
    draws: int = 0
    last_player_move: Optional[Move] = None
    last_app_move: Optional[Move] = None
    outcome: Optional[RoundResult] = None
    pending: bool = False

    @property
    def rounds_played(self) -> int:
        """已完成的回合数"""
        return self.player_score + self.app_score + self.draws

    @property
    def winner(self) -> Optional[str]:
        """最近一回合的胜者标识（player/app/draw）"""
        return GameRules.winner_of(self.last_player_move, self.last_app_move)

    def snapshot(self) -> "MatchState":
        """返回当前状态的副本，供界面读取"""
        return replace(self)

    def clear(self):
        """原地恢复初始值，持有本对象引用的一方随之看到重置后的状态"""
        for f in fields(self):
            setattr(self, f.name, f.default)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'player_score': self.player_score,
            'app_score': self.app_score,
            'draws': self.draws,
            'rounds_played': self.rounds_played,
            'last_player_move': self.last_player_move.value if self.last_player_move else None,
            'last_app_move': self.last_app_move.value if self.last_app_move else None,
            'outcome': self.outcome.label if self.outcome else None,
            'pending': self.pending
        }


class RoundEngine:
    """回合引擎：接收玩家出拳，结算回合并维护比分"""

    def __init__(self, opponent: Optional[RandomOpponent] = None):
        """
        初始化回合引擎

        Args:
            opponent: 程序对手（默认均匀随机）
        """
        self.opponent = opponent or RandomOpponent()
        self.state = MatchState()
        self.state_machine = GameStateMachine(initial_state=GameState.IDLE)

        logger.info(f"回合引擎初始化，对手策略: {self.opponent.policy}")

    @property
    def pending(self) -> bool:
        """是否有回合待结算"""
        return self.state.pending

    def start_round(self, player_move: Move) -> bool:
        """
        开始一回合

        待结算期间的出拳被静默忽略。

        Args:
            player_move: 玩家出拳

        Returns:
            bool: 是否接受了本次出拳
        """
        if self.state.pending:
            logger.debug(f"回合待结算，忽略出拳: {player_move}")
            return False

        self.state.last_player_move = player_move
        self.state.last_app_move = None
        self.state.outcome = None
        self.state.pending = True
        self.state_machine.transition_to(GameState.AWAITING_RESOLUTION)

        logger.info(f"玩家出拳: {player_move}")
        return True

    def resolve_round(self, app_move: Optional[Move] = None) -> RoundResult:
        """
        结算当前回合

        Args:
            app_move: 程序出拳（为 None 时由对手策略选择）

        Returns:
            RoundResult: 回合结果

        Raises:
            GameException: 没有待结算的回合
        """
        if not self.state.pending or self.state.last_player_move is None:
            raise GameException("没有待结算的回合",
                                game_state=str(self.state_machine.get_current_state()))

        player_move = self.state.last_player_move
        if app_move is None:
            app_move = self.opponent.choose(player_move)

        result = GameRules.judge(player_move, app_move)

        if result is RoundResult.PLAYER_WIN:
            self.state.player_score += 1
        elif result is RoundResult.APP_WIN:
            self.state.app_score += 1
        else:
            self.state.draws += 1

        self.state.last_app_move = app_move
        self.state.outcome = result
        self.state.pending = False
        self.state_machine.transition_to(GameState.IDLE)

        logger.info(f"回合 {self.state.rounds_played}: {player_move} vs {app_move} -> {result.label} "
                    f"(比分 {self.state.player_score}:{self.state.app_score})")
        return result

    def abandon_round(self):
        """放弃待结算的回合，比分不变"""
        if not self.state.pending:
            return
        self.state.last_player_move = None
        self.state.pending = False
        self.state_machine.transition_to(GameState.IDLE)
        logger.info("已放弃待结算的回合")

    def reset(self):
        """重置比分和出拳；取消延迟结算由调用方负责"""
        self.state.clear()
        self.state_machine.reset(GameState.IDLE)
        logger.info("比赛已重置")
