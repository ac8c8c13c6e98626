from typing import Dict, Optional

import morse_talk as mtalk

from .errors import ConfigurationError

DOT = '.'
DASH = '-'
WORD_GAP = ' '

MARKS = (DOT, DASH, WORD_GAP)

MORSE_CODE = {
    'a': '.-', 'b': '-...', 'c': '-.-.',
    'd': '-..', 'e': '.', 'f': '..-.',
    'g': '--.', 'h': '....', 'i': '..',
    'j': '.---', 'k': '-.-', 'l': '.-..',
    'm': '--', 'n': '-.', 'o': '---',
    'p': '.--.', 'q': '--.-', 'r': '.-.',
    's': '...', 't': '-', 'u': '..-',
    'v': '...-', 'w': '.--', 'x': '-..-',
    'y': '-.--', 'z': '--..',
    '1': '.----', '2': '..---', '3': '...--',
    '4': '....-', '5': '.....', '6': '-....',
    '7': '--...', '8': '---..', '9': '----.',
    '0': '-----',
    '.': '.-.-.-', ',': '--..--', '?': '..--..',
    '"': '.-..-.', '/': '-..-.', ':': '---...',
    "'": '.----.',
    '-': '-....-',
    '=': '-...-',   # BT, break
    '+': '.-.-.',   # AR, end of message
    '&': '.-...',   # AS, wait
    '$': '...-.-',  # SK, end of contact
    '@': '.--.-.',
    ' ': WORD_GAP,
    '\n': WORD_GAP  # end of line sounds like a space
}


class Codebook:
    """
    Read-only mapping from a character to its Morse marks.

    Patterns are strings of '.', '-' and ' ' (a word gap). Lookups are
    case-insensitive: upper case is folded to lower case first.
    """

    def __init__(self, table: Dict[str, str], name: str = "custom"):
        self.name = name
        self._table = {char.lower(): pattern for char, pattern in table.items()}

    def lookup(self, char: str) -> Optional[str]:
        return self._table.get(char.lower())

    def __contains__(self, char: str) -> bool:
        return self.lookup(char) is not None

    def __len__(self) -> int:
        return len(self._table)


class MorseTalkCodebook(Codebook):
    # delegates printable characters to morse_talk's own alphabet

    def __init__(self):
        super().__init__({' ': WORD_GAP, '\n': WORD_GAP}, name="morse_talk")

    def lookup(self, char: str) -> Optional[str]:
        pattern = super().lookup(char)
        if pattern is not None:
            return pattern

        if not char.strip():
            return None

        try:
            pattern = mtalk.encode(char.upper()).strip()
        except (KeyError, ValueError):
            return None

        # morse_talk answers "?" for characters it has no code for
        if not pattern or not set(pattern) <= {DOT, DASH}:
            return None

        return pattern


ITU = Codebook(MORSE_CODE, name="itu")

CODEBOOKS = {
    "itu": lambda: ITU,
    "morse_talk": MorseTalkCodebook
}


def get_codebook(name: str) -> Codebook:
    try:
        return CODEBOOKS[name.lower()]()
    except KeyError:
        raise ConfigurationError(f"Unknown codebook '{name}' (choose from: {', '.join(CODEBOOKS)})")
