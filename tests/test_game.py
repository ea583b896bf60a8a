import pytest

import guessword
from guessword import (
    Accuracy, Dictionary, Game, GameStatus, GuessResult,
    create_game, submit_guess, reveal_answer,
)

MISSES = ['erase', 'abide', 'crane', 'stare', 'raise', 'level']


@pytest.fixture
def game(dictionary):
    return Game(dictionary, answer='speed')


def test_new_game(game):
    assert game.status is GameStatus.IN_PROGRESS
    assert game.history == ()
    assert game.attempts == 0
    assert game.remaining == guessword.guess_max
    assert game.reveal_answer() is None

def test_random_answer(dictionary, rng):
    game = Game(dictionary, rng=rng)
    assert game.status is GameStatus.IN_PROGRESS
    assert len(game.dictionary) == 12

def test_explicit_answer_must_be_a_word(dictionary):
    with pytest.raises(ValueError):
        Game(dictionary, answer='zzzzz')

    with pytest.raises(ValueError):
        Game(dictionary, answer='spee')

def test_valid_guess(game):
    status, result, word_guess = game.guess('erase')

    assert status is GameStatus.IN_PROGRESS
    assert result is GuessResult.VALID
    assert word_guess.response == 'iooii'
    assert [gl.accuracy for gl in word_guess][:2] == [Accuracy.IN_WORD, Accuracy.NOT_IN_WORD]
    assert game.history == (word_guess,)
    assert game.attempts == 1

def test_win(dictionary):
    game = Game(dictionary, answer='abide')
    outcome = game.guess('abide')

    assert outcome.status is GameStatus.WON
    assert outcome.result is GuessResult.VALID
    assert outcome.word_guess.is_correct
    assert all(gl.accuracy is Accuracy.IN_RIGHT_PLACE for gl in outcome.word_guess)
    assert game.reveal_answer() == 'abide'

def test_win_on_last_guess(game):
    for word in MISSES[:-1]:
        game.guess(word)

    assert game.guess('speed').status is GameStatus.WON

def test_loss(game):
    for i, word in enumerate(MISSES, 1):
        outcome = game.guess(word)
        assert outcome.result is GuessResult.VALID

        if i < len(MISSES):
            assert outcome.status is GameStatus.IN_PROGRESS
            assert game.reveal_answer() is None

    assert outcome.status is GameStatus.LOST
    assert game.attempts == 6
    assert game.reveal_answer() == 'speed'

def test_incorrect_length(game):
    outcome = game.guess('sped')

    assert outcome.status is GameStatus.IN_PROGRESS
    assert outcome.result is GuessResult.INCORRECT_LENGTH
    assert outcome.word_guess is None
    assert game.attempts == 0

    assert game.guess('speeds').result is GuessResult.INCORRECT_LENGTH
    assert game.guess('').result is GuessResult.INCORRECT_LENGTH

def test_duplicate_guess(game):
    assert game.guess('erase').result is GuessResult.VALID
    assert game.guess('erase').result is GuessResult.DUPLICATE_GUESS
    assert game.attempts == 1

def test_duplicate_ignores_case(game):
    game.guess('erase')
    assert game.guess('ERASE').result is GuessResult.DUPLICATE_GUESS

def test_not_in_dictionary(game):
    outcome = game.guess('zebra')
    assert outcome.result is GuessResult.NOT_IN_DICTIONARY
    assert game.attempts == 0

def test_validation_order(game):
    # length is checked before the dictionary
    assert game.guess('zz').result is GuessResult.INCORRECT_LENGTH

    # a replayed word is a duplicate, not a new dictionary lookup
    game.guess('crane')
    assert game.guess('crane').result is GuessResult.DUPLICATE_GUESS

def test_guess_is_normalized(game):
    outcome = game.guess('  SPEED\n')
    assert outcome.status is GameStatus.WON
    assert outcome.word_guess.word == 'speed'

def test_no_guesses_after_win(game):
    game.guess('speed')
    outcome = game.guess('erase')

    assert outcome.status is GameStatus.WON
    assert outcome.result is GuessResult.GAME_OVER
    assert game.attempts == 1

def test_no_guesses_after_loss(game):
    for word in MISSES:
        game.guess(word)

    outcome = game.guess('speed')
    assert outcome.status is GameStatus.LOST
    assert outcome.result is GuessResult.GAME_OVER
    assert game.attempts == 6

def test_guess_max(dictionary):
    game = Game(dictionary, answer='speed', guess_max=2)
    game.guess('erase')
    assert game.guess('abide').status is GameStatus.LOST

def test_history_is_read_only(game):
    game.guess('erase')
    history = game.history

    with pytest.raises(AttributeError):
        history.append(None)

def test_shared_dictionary(dictionary):
    a = Game(dictionary, answer='speed')
    b = Game(dictionary, answer='crane')

    a.guess('crane')
    assert b.attempts == 0
    assert a.dictionary is b.dictionary

def test_messages():
    for result in GuessResult:
        assert isinstance(result.message, str)

    assert GuessResult.VALID.message == ''
    assert GuessResult.NOT_IN_DICTIONARY.message


def test_front_end_contract(dictionary):
    game = create_game(dictionary, answer='speed')

    status, result, word_guess = submit_guess(game, 'erase')
    assert result is GuessResult.VALID
    assert reveal_answer(game) is None

    submit_guess(game, 'speed')
    assert reveal_answer(game) == 'speed'

def test_create_game_shares_default_dictionary():
    a = create_game()
    b = create_game()
    assert a.dictionary is b.dictionary
    assert isinstance(a.dictionary, Dictionary)
