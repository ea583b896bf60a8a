import random

import pytest

from guessword import Dictionary

WORDS = """\
speed
erase
abide
crane
stare
raise
level
otter
hello
scoop
geese
eerie
"""

@pytest.fixture
def dictpath(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text(WORDS)
    return path

@pytest.fixture
def dictionary(dictpath):
    return Dictionary.load(dictpath)

@pytest.fixture
def rng():
    return random.Random(1234)
