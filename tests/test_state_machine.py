"""
游戏状态机与调度器测试
Game State Machine and Scheduler Tests
"""
from rps_showdown.game.state_machine import GameState, GameStateMachine
from rps_showdown.game.scheduler import ManualScheduler


def test_valid_transitions():
    machine = GameStateMachine()
    assert machine.transition_to(GameState.AWAITING_RESOLUTION)
    assert machine.previous_state is GameState.IDLE
    assert machine.transition_to(GameState.IDLE)
    assert machine.is_in_state(GameState.IDLE)


def test_same_state_transition_is_noop():
    machine = GameStateMachine()
    assert machine.transition_to(GameState.IDLE)
    assert machine.previous_state is None


def test_reset_returns_to_idle():
    machine = GameStateMachine()
    machine.transition_to(GameState.AWAITING_RESOLUTION)
    machine.reset()
    assert machine.get_current_state() is GameState.IDLE
    assert machine.previous_state is GameState.AWAITING_RESOLUTION


def test_manual_scheduler_orders_and_cancels():
    scheduler = ManualScheduler()
    fired = []
    scheduler.schedule(2.0, lambda: fired.append("late"))
    cancelled = scheduler.schedule(1.0, lambda: fired.append("cancelled"))
    scheduler.schedule(0.5, lambda: fired.append("early"))
    cancelled.cancel()

    assert scheduler.pending_count == 2
    assert scheduler.advance(1.0) == 1
    assert fired == ["early"]
    assert scheduler.run_pending() == 1
    assert fired == ["early", "late"]
    assert scheduler.pending_count == 0
