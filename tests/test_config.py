import pytest

from retrocade.config import (
    GAME_CONFIGS,
    Settings,
    configs_by_category,
    configs_with_module,
    get_config,
    sorted_by_difficulty,
)
from retrocade.errors import UnknownGameError
from retrocade.games import GAME_CLASSES, available_games, create_game
from tests.helpers import ManualScheduler, RecordingHost


def test_every_config_has_an_implementation():
    assert set(GAME_CONFIGS) == set(GAME_CLASSES)
    assert available_games() == list(GAME_CONFIGS)


def test_unknown_slug_raises():
    with pytest.raises(UnknownGameError) as excinfo:
        get_config("tetris-99")
    assert excinfo.value.slug == "tetris-99"
    assert isinstance(excinfo.value, KeyError)

    with pytest.raises(UnknownGameError):
        create_game("nope", RecordingHost())


def test_create_game_builds_registered_class():
    game = create_game("wormy", RecordingHost(), scheduler=ManualScheduler())
    assert type(game) is GAME_CLASSES["wormy"]
    assert game.config.canvas_width == 400


def test_with_options_leaves_original_untouched():
    base = get_config("wormy")
    tuned = base.with_options(wrap=False)
    assert tuned.option("wrap") is False
    assert base.option("wrap") is True
    assert tuned.option("missing", 7) == 7


def test_catalogue_queries():
    assert "number-defenders" in {cfg.slug for cfg in configs_by_category("educational")}
    assert {cfg.slug for cfg in configs_with_module("rocket")} >= {"number-defenders"}
    order = [cfg.difficulty for cfg in sorted_by_difficulty()]
    assert order == sorted(order, key=["easy", "medium", "hard"].index)


def test_settings_from_env():
    settings = Settings.from_env({"RETROCADE_GAME": "wormy", "RETROCADE_FULLSCREEN": "yes",
                                  "RETROCADE_LOG_LEVEL": "debug"})
    assert settings == Settings(game="wormy", fullscreen=True, log_level="DEBUG")
    assert Settings.from_env({}) == Settings()
