import pathlib

dictfile  = pathlib.Path(__file__).parent / 'words.txt'
wordlen   = 5
guess_max = 6

import logging
logger = logging.getLogger('guessword')

from .errors import GuessWordError, EmptyDictionary
from .dictionary import Dictionary
from .scorer import Accuracy, GuessLetter, WordGuess, score
from .game import (
    Game, GameStatus, GuessResult, Outcome,
    create_game, submit_guess, reveal_answer,
)
