"""
Catalog Escape Decoder

Rewrites the escaped text of a catalog message line into its literal bytes.

Supported escapes:
    \\b \\e \\f \\n \\r \\t \\v \\\\    control bytes (\\e is ESC, 0x1B)
    \\dNNN                   exactly three decimal digits
    \\N, \\NN, \\NNN           one to three octal digits
    \\xH...                  any number of hex digits
    \\<other>                the other byte, backslash dropped

Decoding never fails. A numeric escape cut short by a non-digit emits the
value accumulated so far, then the non-digit is processed again as normal
text. The decoder is a table-driven state machine so that "process this byte
again under the next state" is a plain loop step.
"""

from enum import Enum, auto
from typing import Dict, FrozenSet, List, Optional, Tuple


class State(Enum):
    """Decoder states."""
    NORMAL = auto()      # copying literal bytes
    ESCAPE = auto()      # just saw a backslash
    DECIMAL_1 = auto()   # \d, no digits yet
    DECIMAL_2 = auto()   # \d, one digit
    DECIMAL_3 = auto()   # \d, two digits
    OCTAL_2 = auto()     # \N, one octal digit
    OCTAL_3 = auto()     # \NN, two octal digits
    HEX = auto()         # \x, zero or more hex digits


class Action(Enum):
    """What a transition does with the current byte."""
    COPY = auto()          # append the byte, consume it
    CONTROL = auto()       # append the control byte it names, consume it
    SUPPRESS = auto()      # reset the accumulator, consume the byte
    DECIMAL = auto()       # accumulate a decimal digit
    DECIMAL_EMIT = auto()  # accumulate the last decimal digit and emit
    OCTAL = auto()         # accumulate an octal digit
    OCTAL_EMIT = auto()    # accumulate the last octal digit and emit
    HEX = auto()           # accumulate a hex digit
    RETAIN = auto()        # emit the accumulator, reprocess the byte


BACKSLASH = ord('\\')

DIGITS = frozenset(b"0123456789")
OCTAL_DIGITS = frozenset(b"01234567")
HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

CONTROL_ESCAPES: Dict[int, int] = {
    ord('b'): 0x08,
    ord('e'): 0x1B,
    ord('f'): 0x0C,
    ord('n'): 0x0A,
    ord('r'): 0x0D,
    ord('t'): 0x09,
    ord('v'): 0x0B,
    BACKSLASH: BACKSLASH,
}

# None matches any byte
_Match = Optional[FrozenSet[int]]

# (state, bytes matched, action, next state), first matching row wins
TRANSITIONS: List[Tuple[State, _Match, Action, State]] = [
    (State.NORMAL, frozenset([BACKSLASH]), Action.SUPPRESS, State.ESCAPE),
    (State.NORMAL, None, Action.COPY, State.NORMAL),

    (State.ESCAPE, frozenset(CONTROL_ESCAPES), Action.CONTROL, State.NORMAL),
    (State.ESCAPE, frozenset(b"d"), Action.SUPPRESS, State.DECIMAL_1),
    (State.ESCAPE, OCTAL_DIGITS, Action.OCTAL, State.OCTAL_2),
    (State.ESCAPE, frozenset(b"x"), Action.SUPPRESS, State.HEX),
    (State.ESCAPE, None, Action.COPY, State.NORMAL),

    (State.DECIMAL_1, DIGITS, Action.DECIMAL, State.DECIMAL_2),
    (State.DECIMAL_1, None, Action.RETAIN, State.NORMAL),
    (State.DECIMAL_2, DIGITS, Action.DECIMAL, State.DECIMAL_3),
    (State.DECIMAL_2, None, Action.RETAIN, State.NORMAL),
    (State.DECIMAL_3, DIGITS, Action.DECIMAL_EMIT, State.NORMAL),
    (State.DECIMAL_3, None, Action.RETAIN, State.NORMAL),

    (State.OCTAL_2, OCTAL_DIGITS, Action.OCTAL, State.OCTAL_3),
    (State.OCTAL_2, None, Action.RETAIN, State.NORMAL),
    (State.OCTAL_3, OCTAL_DIGITS, Action.OCTAL_EMIT, State.NORMAL),
    (State.OCTAL_3, None, Action.RETAIN, State.NORMAL),

    (State.HEX, HEX_DIGITS, Action.HEX, State.HEX),
    (State.HEX, None, Action.RETAIN, State.NORMAL),
]

_BY_STATE: Dict[State, List[Tuple[_Match, Action, State]]] = {}
for _state, _match, _action, _next in TRANSITIONS:
    _BY_STATE.setdefault(_state, []).append((_match, _action, _next))


def transition(state: State, byte: int) -> Tuple[Action, State]:
    """Look up the (action, next state) pair for a byte read in `state`."""
    for match, action, next_state in _BY_STATE[state]:
        if match is None or byte in match:
            return action, next_state
    raise AssertionError(f"no transition from {state.name}")


def decode_escapes(line: bytes) -> bytes:
    """
    Decode the escape sequences in a catalog message.

    Args:
        line: Raw message text as read from the catalog file

    Returns:
        The literal bytes. Never raises for malformed escapes.
    """
    out = bytearray()
    state = State.NORMAL
    accum = 0
    digits = 0
    pos = 0
    length = len(line)

    while pos < length:
        c = line[pos]
        action, next_state = transition(state, c)

        if action is Action.COPY:
            out.append(c)
            pos += 1
        elif action is Action.CONTROL:
            out.append(CONTROL_ESCAPES[c])
            pos += 1
        elif action is Action.SUPPRESS:
            accum = 0
            digits = 0
            pos += 1
        elif action is Action.DECIMAL:
            accum = accum * 10 + (c - 0x30)
            digits += 1
            pos += 1
        elif action is Action.OCTAL:
            accum = (accum << 3) + (c - 0x30)
            digits += 1
            pos += 1
        elif action is Action.HEX:
            accum = ((accum << 4) + int(chr(c), 16)) & 0xFF
            digits += 1
            pos += 1
        elif action is Action.DECIMAL_EMIT:
            out.append((accum * 10 + (c - 0x30)) & 0xFF)
            accum = digits = 0
            pos += 1
        elif action is Action.OCTAL_EMIT:
            out.append(((accum << 3) + (c - 0x30)) & 0xFF)
            accum = digits = 0
            pos += 1
        elif action is Action.RETAIN:
            # Byte is not consumed; it is read again in next_state
            out.append(accum & 0xFF)
            accum = digits = 0

        state = next_state

    # Flush a numeric escape that ran into the end of the line
    if state is not State.NORMAL and digits > 0:
        out.append(accum & 0xFF)

    return bytes(out)


def encode_escapes(text: bytes) -> str:
    """
    Render message bytes as a printable, re-escapable string.

    Control bytes with a letter escape use it; other non-printable bytes use
    three-digit octal. Used for display (``nlscat dump``), not for writing
    catalogs.
    """
    names = {v: chr(k) for k, v in CONTROL_ESCAPES.items()}
    parts = []
    for b in text:
        if b in names:
            parts.append('\\' + names[b])
        elif 0x20 <= b < 0x7F:
            parts.append(chr(b))
        else:
            parts.append(f"\\{b:03o}")
    return ''.join(parts)
