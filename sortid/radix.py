"""Radix conversion between non-negative integers and base36/base62 text.

Digits are taken from the base's alphabet (``0-9a-z`` then ``A-Z``) and
never padded, so the encoded width grows with the magnitude.
"""

from core.errors import InvalidCharacter
from sortid.options import Base


def encode(value, base=Base.BASE36):
    """Encode a non-negative integer in the given base."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Cannot encode {value!r}: expected a non-negative integer")

    alphabet = Base(base).alphabet
    if value == 0:
        return alphabet[0]

    chars = []
    while value > 0:
        value, remainder = divmod(value, len(alphabet))
        chars.append(alphabet[remainder])

    return "".join(reversed(chars))


def decode(text, base=Base.BASE36):
    """Decode text produced by encode back to its integer value."""
    base = Base(base)
    if not text:
        raise InvalidCharacter(f"Nothing to decode for base {int(base)}", base=int(base))

    alphabet = base.alphabet
    result = 0
    for char in text:
        digit = alphabet.find(char)
        if digit < 0:
            raise InvalidCharacter(f"Invalid character {char!r} for base {int(base)}",
                                   char=char, base=int(base))
        result = result * base + digit
    return result
