import collections
import enum

import guessword
from guessword import logger, signals
from .dictionary import Dictionary, normalize
from .scorer import score


class GameStatus(enum.Enum):
    IN_PROGRESS = 'in progress'
    WON         = 'won'
    LOST        = 'lost'


class GuessResult(enum.Enum):

    VALID             = 'valid'
    INCORRECT_LENGTH  = 'incorrect length'
    DUPLICATE_GUESS   = 'duplicate guess'
    NOT_IN_DICTIONARY = 'not in dictionary'
    GAME_OVER         = 'game over'

    @property
    def message(self):
        return {
            GuessResult.VALID:             '',
            GuessResult.INCORRECT_LENGTH:  "wrong word length",
            GuessResult.DUPLICATE_GUESS:   "you already guessed that word",
            GuessResult.NOT_IN_DICTIONARY: "your guess is not in dictionary",
            GuessResult.GAME_OVER:         "the game is over",
        }[self]


Outcome = collections.namedtuple('Outcome', 'status result word_guess')


class Game:
    """
    a single round of guessing one hidden word

    Not thread safe, give each player their own Game. The Dictionary
    can be shared.
    """

    def __init__(self, dictionary, answer=None, guess_max=None, rng=None):
        self.dictionary = dictionary
        self.guess_max  = guess_max or guessword.guess_max
        self._history   = []

        if answer is None:
            answer = dictionary.random_word(rng)
        else:
            answer = normalize(answer)

            if len(answer) != self.wordlen or answer not in dictionary:
                raise ValueError(f"answer {answer!r} is not a word in the dictionary")

        self._answer = answer

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.status.value} {self.attempts}/{self.guess_max}>"

    @property
    def wordlen(self):
        return self.dictionary.wordlen

    @property
    def history(self):
        return tuple(self._history)

    @property
    def attempts(self):
        return len(self._history)

    @property
    def remaining(self):
        return self.guess_max - self.attempts

    @property
    def status(self):
        if self._history and self._history[-1].word == self._answer:
            return GameStatus.WON

        if self.attempts >= self.guess_max:
            return GameStatus.LOST

        return GameStatus.IN_PROGRESS

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    def validate(self, word):
        """
        return the reason word can't be played, None if it can
        """
        if self.is_over:
            return GuessResult.GAME_OVER

        if len(word) != self.wordlen:
            return GuessResult.INCORRECT_LENGTH

        if word in [wg.word for wg in self._history]:
            return GuessResult.DUPLICATE_GUESS

        if word not in self.dictionary:
            return GuessResult.NOT_IN_DICTIONARY

        return None

    def guess(self, text):
        word = normalize(text)

        if reason := self.validate(word):
            logger.debug(f"rejected guess {word!r}: {reason.value}")
            signals.guess_rejected.send(self, result=reason)
            return Outcome(self.status, reason, None)

        word_guess = score(self._answer, word)
        self._history.append(word_guess)
        signals.guess_scored.send(self, word_guess=word_guess)

        status = self.status
        if status is not GameStatus.IN_PROGRESS:
            logger.debug(f"game {status.value} after {self.attempts} guesses")
            signals.game_over.send(self, status=status)

        return Outcome(status, GuessResult.VALID, word_guess)

    def reveal_answer(self):
        """
        the answer, but only once the game is over
        """
        if not self.is_over:
            return None

        return self._answer


_dictionary = None

def default_dictionary():
    """
    the bundled word list, loaded once and shared by every game
    """
    global _dictionary

    if _dictionary is None:
        _dictionary = Dictionary.default()

    return _dictionary

def create_game(dictionary=None, **kw):
    if dictionary is None:
        dictionary = default_dictionary()

    return Game(dictionary, **kw)

def submit_guess(game, text):
    return game.guess(text)

def reveal_answer(game):
    return game.reveal_answer()
