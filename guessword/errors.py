class GuessWordError(Exception):
    """base class for errors raised by the guessword core"""


class EmptyDictionary(GuessWordError):
    """
    no usable words were found when building a Dictionary, so no
    answer can ever be picked
    """
