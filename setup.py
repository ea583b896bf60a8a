from setuptools import setup

# install with: pip install -e .

setup(
    name='guessword',
    version='0.1.0',
    packages=['guessword'],
    package_data={
        'guessword': ['words.txt'],
    },
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'guessword = guessword.wordleui:cli',
            'guessword-tui = guessword.interactive:cli',
        ],
    },
)
