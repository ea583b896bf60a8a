import collections
import enum

from guessword import logger


class Accuracy(enum.Enum):

    IN_RIGHT_PLACE = 'e' # exact spot
    IN_WORD        = 'i' # in, in word but wrong spot
    NOT_IN_WORD    = 'o' # out, not in word

    @property
    def code(self):
        return self.value

    @classmethod
    def response_set(cls):
        return set([a.code for a in cls])


class GuessLetter(collections.namedtuple('GuessLetter', 'letter accuracy')):
    __slots__ = ()


class WordGuess(tuple):
    """
    one scored guess, a GuessLetter per position
    """

    __slots__ = ()

    def __new__(cls, letters):
        return super().__new__(cls, letters)

    @property
    def word(self):
        return ''.join([gl.letter for gl in self])

    @property
    def response(self):
        """
        compact response string, eg. 'eioeo'
        """
        return ''.join([gl.accuracy.code for gl in self])

    @property
    def is_correct(self):
        return all([gl.accuracy is Accuracy.IN_RIGHT_PLACE for gl in self])

    def __repr__(self):
        return f"WordGuess({self.word!r}, {self.response!r})"


def score(answer, guess):
    """
    score guess against answer

    Each letter of the answer can only be credited once. Exact matches
    claim their credit before any letter is marked as elsewhere in the
    word, so extra copies of a letter in the guess come back as out.
    eg. answer: speed, guess: erase -> iooii
    """
    if len(answer) != len(guess):
        raise ValueError(f"guess {guess!r} is not the same length as the answer")

    credit = collections.Counter(answer)
    resp = [None] * len(guess)

    # exact matches first, all the way across
    for i, (a, g) in enumerate(zip(answer, guess)):
        if a == g:
            resp[i] = Accuracy.IN_RIGHT_PLACE
            credit[g] -= 1

    for i, g in enumerate(guess):
        if resp[i] is not None:
            continue

        if credit[g] > 0:
            resp[i] = Accuracy.IN_WORD
            credit[g] -= 1
        else:
            resp[i] = Accuracy.NOT_IN_WORD

    word_guess = WordGuess([GuessLetter(g, r) for g, r in zip(guess, resp)])
    logger.debug(f"scored {guess}: {word_guess.response}")
    return word_guess
