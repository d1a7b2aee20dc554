"""
Splits input data into runs of digits, printable characters and control codes.

Each run becomes one token; the encoder picks a Code128 subset per token.
"""

import logging
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)

DIGIT = 'digit'
SYMBOL = 'symbol'
CONTROL = 'control'


class InvalidByteError(ValueError):
    '''
    Raised when the input contains a byte that no Code128 subset can encode
    through the printer's invocation codes (DEL and anything above 0x7F).
    '''

    def __init__(self, byte, position):
        self.byte = byte
        self.position = position
        super().__init__("invalid byte 0x%02X at position %i" % (byte, position))


@dataclass(frozen=True)
class Token:
    data: bytes

    def __len__(self):
        return len(self.data)


class Digits(Token):
    pass


class Chars(Token):
    pass


class Controls(Token):
    pass


TOKEN_TYPES = {
    DIGIT: Digits,
    SYMBOL: Chars,
    CONTROL: Controls,
}


def classify(byte: int) -> Optional[str]:
    """returns the class of *byte*, or None if it cannot be encoded"""
    if 0x30 <= byte <= 0x39:
        return DIGIT
    if 0x20 <= byte <= 0x7E:
        return SYMBOL
    if 0 <= byte <= 0x1F:
        return CONTROL
    return None


class Tokenizer:
    '''
    Iterates over the maximal same-class runs of *source*.

    *source* is bytes, a str (taken code point by code point) or any iterable
    of integers. The tokenizer is single pass: once exhausted it stays
    exhausted.
    '''

    def __init__(self, source):
        if isinstance(source, str):
            source = map(ord, source)
        self._source = iter(source)
        # position of the byte under the cursor
        self._position = 0
        self._cursor = None
        self._started = False

    def _advance(self):
        if self._started:
            self._position += 1
        self._started = True
        self._cursor = next(self._source, None)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._started:
            self._advance()
        if self._cursor is None:
            raise StopIteration

        kind = classify(self._cursor)
        if kind is None:
            raise InvalidByteError(self._cursor, self._position)

        run = bytearray()
        while self._cursor is not None and classify(self._cursor) == kind:
            run.append(self._cursor)
            self._advance()

        token = TOKEN_TYPES[kind](bytes(run))
        log.debug("parsed token: %r", token)
        return token


def tokenize(source):
    return Tokenizer(source)
