import pathlib

import click

import guessword
from guessword import logger
from .dictionary import Dictionary
from .errors import GuessWordError
from .game import Game, GameStatus, GuessResult
from .scorer import Accuracy
from .utils import dotdict, setup_logging

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print


def load_game(args):
    """
    build a Game from the cli options
    """
    dictionary = Dictionary.load(args.dict, args.wordlen)

    # a forced word doesn't have to be in the word list
    if args.start_word and args.start_word not in dictionary:
        dictionary = Dictionary(list(dictionary) + [args.start_word], args.wordlen)

    return Game(dictionary, answer=args.start_word, guess_max=args.guess_max)


class WordleUI:

    EMOJI_IN     = '🟨'
    EMOJI_OUT    = '⬜'
    EMOJI_EXACT  = '🟩'

    @classmethod
    def colorize(cls, accuracy, text):
        """
        colorize text using rich color tags
        accuracy: an Accuracy of the letter
        text: the text to wrap with color tags
        """
        if accuracy is Accuracy.IN_WORD:
            color = 'bold dark_goldenrod'
        elif accuracy is Accuracy.NOT_IN_WORD:
            color = 'grey50'
        elif accuracy is Accuracy.IN_RIGHT_PLACE:
            color = 'green'
        else:
            raise RuntimeError(f"unknown accuracy: {accuracy}")

        return f"[{color}]{text}[/{color}]"

    @classmethod
    def colorize_guess(cls, word_guess):
        return ' '.join([
            cls.colorize(gl.accuracy, gl.letter)
            for gl in word_guess
        ])

    @classmethod
    def emoji(cls, word_guess):
        return ''.join([
            {
                Accuracy.IN_WORD:        cls.EMOJI_IN,
                Accuracy.NOT_IN_WORD:    cls.EMOJI_OUT,
                Accuracy.IN_RIGHT_PLACE: cls.EMOJI_EXACT,
            }[gl.accuracy]
            for gl in word_guess
        ])

    def __init__(self, args):
        args = dotdict(args)

        self.args = args
        self.game = load_game(args)
        self.dictionary = self.game.dictionary

    def get_guess(self):
        return input("what's your guess: ")

    def print_guess(self, word_guess):
        print(self.colorize_guess(word_guess))

    def show_rounds(self):
        for word_guess in self.game.history:
            self.print_guess(word_guess)

    def show_summary(self):
        for word_guess in self.game.history:
            print(self.emoji(word_guess))
        print()

    def play(self):

        if self.args.start_word:
            print(f"using given word: {self.args.start_word}")
        else:
            print("I picked a word, what's your guess?")

        while not self.game.is_over:
            status, result, word_guess = self.game.guess(self.get_guess())

            if result is not GuessResult.VALID:
                print(f"invalid guess: {result.message}")
                continue

            self.show_rounds()

        if self.game.status is GameStatus.WON:
            print(f"[bold green]You got it in {self.game.attempts} tries![/bold green]")
        else:
            print(f"[bold yellow]You ran out of tries. The word was: [blue]{self.game.reveal_answer()}[/blue][/bold yellow]")

        self.show_summary()


@click.command()
@click.option('--dict', default=guessword.dictfile, envvar='GUESSWORD_DICT', type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--len', 'wordlen', default=guessword.wordlen, type=int)
@click.option('--max', 'guess_max', default=guessword.guess_max, type=int, help="number of guesses allowed")
@click.option('--verbose', '-v', is_flag=True, help="show debug logging")
@click.argument('start_word', required=False) # text="use this word instead of a random one")
@click.pass_context
def cli(ctx, *args, **kw):
    """
    play a game of wordle

    provide a START_WORD to force a specific one (useful for testing) or
    omit and a random word from the dictionary file will be chosen.
    """
    setup_logging(kw['verbose'])

    try:
        ui = WordleUI(kw)
    except GuessWordError as e:
        raise click.ClickException(str(e))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='START_WORD')

    logger.debug(f"playing with {ui.dictionary}")

    try:
        ui.play()
    except (KeyboardInterrupt, EOFError):
        pass
