"""
配置加载与错误处理测试
Configuration Loader and Error Handler Tests
"""
import logging

import pytest

from rps_showdown.utils.config_loader import ConfigLoader, GameConfig
from rps_showdown.utils.error_handler import ErrorHandler
from rps_showdown.utils.exceptions import (
    ConfigurationException, GameException, InvalidMoveException
)
from rps_showdown.app import ConsoleApp
from rps_showdown.game.game_logic import RoundEngine
from rps_showdown.utils.logger import (
    ROOT_LOGGER, get_log_level, setup_logger, setup_logger_from_config
)


def test_load_game_config_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "game:\n"
        "  delay_seconds: 0.3\n"
        "  opponent_policy: NON_TYING\n"
        "  seed: 5\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    config = ConfigLoader.load_game_config(str(path))
    assert config.delay_seconds == 0.3
    assert config.opponent_policy == "non_tying"
    assert config.seed == 5
    assert config.logging == {"level": "DEBUG"}


def test_defaults_without_file():
    config = ConfigLoader.load_game_config()
    assert config.delay_seconds == 1.2
    assert config.opponent_policy == "uniform"
    assert config.seed is None


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader.load_config(str(path)) == {}
    assert ConfigLoader.load_game_config(str(path)) == GameConfig()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(str(tmp_path / "nope.yaml"))


def test_malformed_yaml_raises_configuration_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("game: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationException):
        ConfigLoader.load_config(str(path))


@pytest.mark.parametrize("game, key", [
    ({"delay_seconds": 0}, "game.delay_seconds"),
    ({"delay_seconds": "soon"}, "game.delay_seconds"),
    ({"opponent_policy": "smart"}, "game.opponent_policy"),
    ({"seed": "abc"}, "game.seed"),
])
def test_invalid_values_name_the_key(game, key):
    with pytest.raises(ConfigurationException) as excinfo:
        GameConfig.from_dict({"game": game})
    assert excinfo.value.config_key == key


def test_to_dict_matches_file_layout():
    config = GameConfig(delay_seconds=2.0, opponent_policy="non_tying", seed=3)
    assert GameConfig.from_dict(config.to_dict()) == config


def test_error_handler_prefers_most_specific_handler():
    handler = ErrorHandler()
    calls = []
    handler.register_handler(GameException, lambda e, ctx: calls.append("game"))
    handler.register_handler(InvalidMoveException, lambda e, ctx: calls.append("move"))

    assert handler.handle(InvalidMoveException("bad", raw_value="x"), "test")
    assert handler.handle(GameException("oops"))
    assert calls == ["move", "game"]


def test_error_handler_unregistered_exception():
    handler = ErrorHandler()
    assert not handler.handle(KeyError("missing"))


def test_error_handler_broken_handler_returns_false():
    handler = ErrorHandler()

    def broken(e, ctx):
        raise RuntimeError("boom")

    handler.register_handler(ConfigurationException, broken)
    assert not handler.handle(ConfigurationException("bad", config_key="game.seed"))


def test_log_level_names():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO
    assert get_log_level(None) == logging.INFO


def test_module_loggers_share_root_handlers():
    """RPS.* 子记录器不挂处理器，记录传递到 RPS 根记录器"""
    child = setup_logger("RPS.Test.Child")
    setup_logger("RPS.Test.Child")
    root = logging.getLogger(ROOT_LOGGER)
    assert child.handlers == []
    assert child.level == logging.NOTSET
    assert child.propagate
    assert len([h for h in root.handlers if not isinstance(h, logging.FileHandler)]) == 1


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER)
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_logging_section_applies_to_all_modules(tmp_path, restore_root_logger):
    """logging 段的级别和文件对引擎等所有模块生效"""
    log_file = tmp_path / "logs" / "rps.log"
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: WARNING\n"
        f"  file: {log_file.as_posix()}\n",
        encoding="utf-8",
    )

    ConsoleApp.from_config_file(str(path))
    RoundEngine()
    logging.getLogger("RPS.RoundEngine").warning("engine-warning-marker")
    setup_logger_from_config({"level": "WARNING", "file": str(log_file)})

    assert logging.getLogger("RPS.RoundEngine").getEffectiveLevel() == logging.WARNING
    file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    text = log_file.read_text(encoding="utf-8")
    assert "engine-warning-marker" in text
    assert "回合引擎初始化" not in text
