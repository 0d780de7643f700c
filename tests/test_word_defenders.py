from retrocade.components.body import Body
from retrocade.components.session import SessionState
from retrocade.games.word_defenders.components import FallingLetter
from retrocade.games.word_defenders.factory import next_word
from retrocade.games.word_defenders.game import WordDefendersGame
from retrocade.games.word_defenders.systems import word_target
from tests.helpers import RecordingHost, start_game


def _force_word(game, word):
    next_word(game.world, game.words, game.config.canvas_width, word=word)


def _letters(game):
    return list(game.world.get_components(FallingLetter, Body))


def test_letters_drop_from_above_the_canvas():
    game = start_game(WordDefendersGame)
    _force_word(game, "code")
    assert word_target(game.world).word == "CODE"
    letters = sorted((letter.index, letter.char, body.y) for _, (letter, body) in _letters(game))
    assert [char for _index, char, _y in letters] == ["C", "O", "D", "E"]
    assert [y for _index, _char, y in letters] == [-50, -80, -110, -140]


def test_typing_the_word_scores_per_level():
    host = RecordingHost()
    game = start_game(WordDefendersGame, host=host)
    _force_word(game, "FUN")

    for key in "fun":
        game.key_down(key)
    game.tick()

    assert host.last("score") == 100
    assert host.last("level") == 2
    assert word_target(game.world).typed == ""

    _force_word(game, "WEB")
    for key in "WEB":
        game.key_down(key)
    game.tick()
    assert host.last("score") == 300


def test_backspace_and_enter_edit_the_typed_text():
    game = start_game(WordDefendersGame)
    _force_word(game, "HELLO")

    for key in "HEX":
        game.key_down(key)
    game.key_down("Backspace")
    game.tick()
    assert word_target(game.world).typed == "HE"

    game.key_down("Enter")
    game.tick()
    assert word_target(game.world).typed == ""


def test_letter_reaching_the_bottom_costs_a_life():
    host = RecordingHost()
    game = start_game(WordDefendersGame, host=host)
    _force_word(game, "GAME")
    _, (_letter, body) = _letters(game)[0]
    body.y = 601

    game.tick()

    assert host.last("lives") == 2
    assert len(_letters(game)) == 3
    assert word_target(game.world).word == "GAME"


def test_empty_sky_brings_the_next_word():
    game = start_game(WordDefendersGame)
    _force_word(game, "GAME")
    letters = _letters(game)
    for ent, _ in letters[1:]:
        game.world.delete_entity(ent, immediate=True)
    letters[0][1][1].y = 601

    game.tick()

    assert len(_letters(game)) == len(word_target(game.world).word)
    assert word_target(game.world).typed == ""


def test_last_life_ends_on_the_landing_letter():
    game = start_game(WordDefendersGame)
    game.session.lives = 1
    _force_word(game, "APP")
    _, (_letter, body) = _letters(game)[0]
    body.y = 601

    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert len(_letters(game)) == 2
