"""
游戏规则测试
Game Rules Tests
"""
import itertools
import random

import pytest

from rps_showdown.game.game_logic import (
    Move, GameRules, RoundResult, cyclic_beats, OpponentPolicy, RandomOpponent
)
from rps_showdown.utils.exceptions import InvalidMoveException


def test_beats_relation_is_a_tournament():
    """任意两个不同出拳恰好一方获胜"""
    for a, b in itertools.combinations(Move.cycle(), 2):
        assert GameRules.beats(a, b) != GameRules.beats(b, a)
    for move in Move.cycle():
        assert not GameRules.beats(move, move)


def test_classic_table():
    assert GameRules.beats(Move.ROCK, Move.SCISSORS)
    assert GameRules.beats(Move.SCISSORS, Move.PAPER)
    assert GameRules.beats(Move.PAPER, Move.ROCK)


def test_judge_results():
    assert GameRules.judge(Move.ROCK, Move.SCISSORS) is RoundResult.PLAYER_WIN
    assert GameRules.judge(Move.PAPER, Move.ROCK) is RoundResult.PLAYER_WIN
    assert GameRules.judge(Move.PAPER, Move.SCISSORS) is RoundResult.APP_WIN
    for move in Move.cycle():
        assert GameRules.judge(move, move) is RoundResult.DRAW


def test_result_labels():
    assert RoundResult.PLAYER_WIN.label == "You Win!"
    assert RoundResult.APP_WIN.label == "You Lose!"
    assert RoundResult.DRAW.label == "It's a Draw!"


def test_cyclic_beats_generalizes_to_five():
    """五元循环同样是完全、反对称的关系，每个元素胜两个"""
    order = ["rock", "paper", "scissors", "spock", "lizard"]
    for a, b in itertools.permutations(order, 2):
        assert cyclic_beats(a, b, order) != cyclic_beats(b, a, order)
    for a in order:
        assert sum(cyclic_beats(a, b, order) for b in order) == 2


def test_cyclic_beats_rejects_even_cycle():
    with pytest.raises(ValueError):
        cyclic_beats(1, 2, [1, 2, 3, 4])


def test_winner_of_for_highlighting():
    assert GameRules.winner_of(Move.SCISSORS, Move.PAPER) == "player"
    assert GameRules.winner_of(Move.SCISSORS, Move.ROCK) == "app"
    assert GameRules.winner_of(Move.SCISSORS, None) is None


def test_move_from_string():
    assert Move.from_string("Rock") is Move.ROCK
    assert Move.from_string(" stone ") is Move.ROCK
    assert Move.from_string("SCISSORS") is Move.SCISSORS
    with pytest.raises(InvalidMoveException) as excinfo:
        Move.from_string("lizard")
    assert excinfo.value.raw_value == "lizard"


def test_non_tying_opponent_never_ties():
    opponent = RandomOpponent(OpponentPolicy.NON_TYING, rng=random.Random(7))
    for move in Move.cycle():
        choices = {opponent.choose(move) for _ in range(200)}
        assert move not in choices
        assert len(choices) == 2


def test_uniform_opponent_uses_all_moves():
    opponent = RandomOpponent(OpponentPolicy.UNIFORM, rng=random.Random(7))
    choices = {opponent.choose(Move.ROCK) for _ in range(200)}
    assert choices == set(Move.cycle())
