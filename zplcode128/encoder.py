"""
Code128 payload encoder for the ZPL ^BC command.

The payload uses the printer's invocation codes to switch subsets:

    >;  start in subset C        >5  switch to subset C
    >:  start in subset B        >6  switch to subset B
    >9  start in subset A        >7  switch to subset A

Digit runs of four or more go to subset C, printable characters to subset B
and control codes to subset A.
"""

import logging
from enum import Enum

from .tokenizer import Chars, Controls, Digits, tokenize

log = logging.getLogger(__name__)

START_A = '>9'
START_B = '>:'
START_C = '>;'
SWITCH_A = '>7'
SWITCH_B = '>6'
SWITCH_C = '>5'

# shortest digit run worth the switch to subset C
MIN_DIGITS_C = 4
# shortest digit run switched to subset C when more tokens follow
MIN_DIGITS_C_INLINE = 6


class Subset(Enum):
    A = 'A'
    B = 'B'
    C = 'C'


def _text(data):
    return data.decode('ascii')


def _controls_padded(data):
    return ''.join('%02i' % byte for byte in data)


def _check_controls(token):
    if not isinstance(token, Controls):
        raise TypeError("not a Digits, Chars or Controls token: %r" % (token,))


def _open(token, following):
    """
    Encodes the first *token*, peeking at *following* to decide which subset
    the first run ends in.

    returns (emitted text, subset)
    """
    if token is None:
        return '', Subset.B

    if isinstance(token, Digits):
        if isinstance(following, Digits):
            raise AssertionError("adjacent digit runs: %r, %r" % (token, following))
        digits = _text(token.data)

        if len(token) >= MIN_DIGITS_C:
            if len(token) % 2 == 0:
                return START_C + digits, Subset.C
            if isinstance(following, Controls):
                return START_C + digits[:-2] + SWITCH_A + digits[-2:], Subset.A
            return START_C + digits[:-1] + SWITCH_B + digits[-1:], Subset.B

        if isinstance(following, Chars):
            return START_B + digits, Subset.B
        if isinstance(following, Controls):
            return START_A + digits, Subset.A
        # lone short digit run: the switch lands before the last two
        # characters of the payload, start code included
        payload = START_C + digits
        return payload[:-2] + SWITCH_B + payload[-2:], Subset.B

    if isinstance(token, Chars):
        return START_B + _text(token.data), Subset.B

    _check_controls(token)
    # initial control codes go out as raw characters, unlike later runs
    return START_A + _text(token.data), Subset.A


def _digits(token, subset, more):
    digits = _text(token.data)
    if len(digits) < MIN_DIGITS_C:
        return digits, subset

    head = ''
    if len(digits) % 2:
        head, digits = digits[:1], digits[1:]

    if len(token) < MIN_DIGITS_C_INLINE and more:
        return head + digits, subset
    return head + SWITCH_C + digits, Subset.C


def _chars(token, subset):
    chars = _text(token.data)
    if subset is Subset.A:
        if len(chars) >= 2:
            return SWITCH_B + chars, Subset.B
        return SWITCH_A + chars, Subset.A
    if subset is Subset.B:
        return chars, Subset.B
    return SWITCH_B + chars, Subset.B


def _controls(token, subset):
    if subset is Subset.A:
        return ''.join('%i' % byte for byte in token.data), Subset.A
    if subset is Subset.B:
        if len(token) >= 2:
            return SWITCH_A + _controls_padded(token.data), Subset.A
        return SWITCH_A + _controls_padded(token.data), Subset.B
    return SWITCH_C + _controls_padded(token.data), Subset.A


def _step(token, subset, more):
    """
    Encodes one token after the first, given the active *subset*.

    *more* tells whether further tokens follow.
    returns (emitted text, subset)
    """
    if isinstance(token, Digits):
        return _digits(token, subset, more)
    if isinstance(token, Chars):
        return _chars(token, subset)
    _check_controls(token)
    return _controls(token, subset)


def encode_tokens(tokens):
    """
    Encodes a token sequence into a ^BC field payload.

    The sequence is consumed once, holding at most one token of lookahead.
    """
    tokens = iter(tokens)
    token = next(tokens, None)
    following = next(tokens, None)

    emitted, subset = _open(token, following)
    payload = [emitted]
    log.debug("starting in subset %s", subset.name)

    while following is not None:
        if isinstance(token, Digits) and isinstance(following, Digits):
            raise AssertionError("adjacent digit runs: %r, %r" % (token, following))
        token, following = following, next(tokens, None)
        emitted, new_subset = _step(token, subset, following is not None)
        payload.append(emitted)
        if new_subset is not subset:
            log.debug("switching from subset %s to %s", subset.name, new_subset.name)
        subset = new_subset

    return ''.join(payload)


def encode(data):
    """
    Encodes *data* (bytes or str) into a payload for a Code128 barcode.

    Raises InvalidByteError if data contains DEL or anything above 0x7F.
    """
    return encode_tokens(tokenize(data))
