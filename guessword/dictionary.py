import random

import guessword
from guessword import logger
from .errors import EmptyDictionary


def normalize(word):
    return word.strip().lower()


class Dictionary:
    """
    the read-only set of words a game can pick an answer from and
    accept as a guess. Safe to share between games.
    """

    def __init__(self, words, wordlen=None):
        self.wordlen = wordlen or guessword.wordlen

        accepted = set()
        rejected = 0

        for word in words:
            word = normalize(word)

            if not word:                # blank lines, trailing newline
                continue

            if all([
                len(word) == self.wordlen,
                word.isalpha(),
            ]):
                accepted.add(word)
            else:
                rejected += 1

        if rejected:
            logger.warning(f"rejected {rejected} entries that are not {self.wordlen} letter words")

        if not accepted:
            raise EmptyDictionary(f"no {self.wordlen} letter words found")

        self._words  = frozenset(accepted)
        self._sorted = sorted(accepted) # stable order for random picks
        logger.debug(f"dictionary contains {len(self._words)}, {self.wordlen} letter words")

    @classmethod
    def from_lines(cls, lines, wordlen=None):
        return cls(lines, wordlen)

    @classmethod
    def load(cls, dictpath, wordlen=None):
        """
        read a newline delimited word list
        """
        logger.debug(f"loading dictionary: {dictpath}")

        with dictpath.open() as f:
            return cls(f.read().splitlines(), wordlen)

    @classmethod
    def default(cls, wordlen=None):
        return cls.load(guessword.dictfile, wordlen)

    @property
    def words(self):
        return self._words

    def __contains__(self, word):
        return normalize(word) in self._words

    contains = __contains__

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._sorted)

    def __repr__(self):
        return f"<{self.__class__.__name__} words={len(self)} wordlen={self.wordlen}>"

    def random_word(self, rng=None):
        rng = rng or random
        return rng.choice(self._sorted)
