import pathlib
import logging

import click
import urwid
from blinker import signal

import guessword
from guessword import logger, signals
from .errors import GuessWordError
from .game import GameStatus
from .scorer import Accuracy
from .utils import dotdict, setup_logging
from .wordleui import load_game


class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, *args, **kw):
        self._value = kw.pop('value', None)
        self._signal = signal(*args, **kw)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


announce = Signal('announce', value='')


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__

    @property
    def original_widget(self):
        # return what's inside the LineBox
        return self._w


class WinAnnounce(urwid.WidgetWrap):
    def __init__(self):
        super().__init__(urwid.Text('', align='center'))
        announce.connect(self.cb_announce)

    def cb_announce(self, sender, value):
        self._w.set_text(('announce', value))


class WinBoard(Window):
    """
    one row per guess, each letter coloured by its accuracy
    """

    ATTRS = {
        Accuracy.IN_RIGHT_PLACE: 'exact',
        Accuracy.IN_WORD:        'in',
        Accuracy.NOT_IN_WORD:    'out',
    }

    def __init__(self, game):
        self.pile = urwid.Pile([urwid.Text('')])
        super().__init__(
            urwid.Filler(self.pile, valign='top'),
            title='Guesses', title_align='left',
        )

        signals.guess_scored.connect(self.cb_guess_scored, sender=game)

    @classmethod
    def markup(cls, word_guess):
        markup = []
        for gl in word_guess:
            markup.append((cls.ATTRS[gl.accuracy], f" {gl.letter.upper()} "))
            markup.append(' ')
        return markup

    def cb_guess_scored(self, sender, word_guess):
        row = urwid.Text(self.markup(word_guess), align='center')
        self.pile.contents.append((row, self.pile.options()))


class WinInput(Window):
    def __init__(self):
        self.edit = urwid.Edit('guess: ', '', multiline=False, wrap='clip')
        super().__init__(
            urwid.AttrMap(self.edit, 'default', 'focused'),
        )

    @property
    def text(self):
        return self.edit.get_edit_text()

    @text.setter
    def text(self, text):
        self.edit.set_edit_text(text)
        self.edit.edit_pos = len(text)


class WinLogging(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.BoxAdapter(
                urwid.ListBox(urwid.SimpleListWalker([])),
                height=3
            ),
            title="Logging", title_align='left',
        )

    @property
    def listbox(self):
        return self.original_widget.original_widget.original_widget


class MainFrame(urwid.Frame):
    def __init__(self, game, **kw):
        self.win_board   = WinBoard(game)
        self.win_input   = WinInput()
        self.win_logging = WinLogging()

        header = urwid.Pile([
            urwid.Text(('title', 'GuessWord'), align='center'),
            WinAnnounce(),
        ])
        footer = urwid.Pile([
            self.win_input,
            self.win_logging,
        ])

        super().__init__(self.win_board, header=header, footer=footer, **kw)


class App:

    def __init__(self, args):
        self.args = dotdict(args)

    def setup(self):
        self.game = load_game(self.args)

        self.frame = MainFrame(self.game, focus_part='footer')
        replace_handlers(logger, self.frame.win_logging.listbox)

        signals.guess_rejected.connect(self.cb_guess_rejected, sender=self.game)
        signals.game_over.connect(self.cb_game_over, sender=self.game)

        announce.value = f"guess the {self.game.wordlen} letter word, you have {self.game.guess_max} tries"

    def cb_guess_rejected(self, sender, result):
        announce.value = result.message

    def cb_game_over(self, sender, status):
        if status is GameStatus.WON:
            announce.value = "You Win!"
        else:
            announce.value = f"You Lost! (answer: {sender.reveal_answer()})"

    def submit(self):
        outcome = self.game.guess(self.frame.win_input.text)
        self.frame.win_input.text = ''

        if outcome.status is GameStatus.IN_PROGRESS and outcome.word_guess:
            announce.value = f"{self.game.remaining} tries left"

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            ('default', 'default', '', '', '', ''),
            ('focused', 'light gray', 'dark blue', '', '#ffd', '#00a'),
            ('title', 'light gray,bold', '', 'bold', '#888,bold', ''),
            ('announce', 'light blue', '', '', '#06f', ''),
            ('exact', 'white,bold', 'dark green', 'standout', '#fff,bold', '#080'),
            ('in', 'black,bold', 'brown', 'standout', '#000,bold', '#da0'),
            ('out', 'white', 'dark gray', '', '#fff', '#666'),
        ]

        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        if key == 'enter':
            self.submit()
            return True

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]
    logger.propagate = False


@click.command()
@click.option('--dict', default=guessword.dictfile, envvar='GUESSWORD_DICT', type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--len', 'wordlen', default=guessword.wordlen, type=int)
@click.option('--max', 'guess_max', default=guessword.guess_max, type=int, help="number of guesses allowed")
@click.option('--verbose', '-v', is_flag=True, help="show debug logging")
@click.argument('start_word', required=False)
@click.pass_context
def cli(ctx, *_, **args):
    """
    play a game of wordle full screen

    \b
    enter   submit your guess
    esc     quit
    """
    setup_logging(args['verbose'])

    app = App(args)

    try:
        app.setup()
    except GuessWordError as e:
        raise click.ClickException(str(e))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='START_WORD')

    try:
        app.run()       # blocking call
    except KeyboardInterrupt:
        pass
