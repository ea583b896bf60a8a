"""
events sent by a Game while it is played

handlers are called synchronously, in the thread that submitted the guess

    guess_rejected: sender=game, result=GuessResult
    guess_scored:   sender=game, word_guess=WordGuess
    game_over:      sender=game, status=GameStatus
"""

from blinker import Namespace

_signals = Namespace()

guess_rejected = _signals.signal('guess-rejected', doc='called when a guess fails validation')
guess_scored   = _signals.signal('guess-scored',   doc='called with each accepted and scored guess')
game_over      = _signals.signal('game-over',      doc='called once when the game is won or lost')
