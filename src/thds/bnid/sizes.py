"""How long can an encoded identifier be? Useful for sizing database columns and for
cheaply rejecting input before trying to decode it.
"""

import math

from . import encodings
from .bits import resolve_bit_length

_DEFAULT_BIT_LENGTH = 128


def _plain_bounds(encoding: str, bit_length: int):
    enc = encodings.canonical(encoding)
    bit_length = resolve_bit_length(bit_length, default=_DEFAULT_BIT_LENGTH)
    if encodings.is_base16(enc):
        # exactly 2 characters per byte
        return bit_length // 4, bit_length // 4
    # best case every byte is a leading zero and each becomes a single '1'.
    return bit_length // 8, math.ceil(bit_length / encodings.BITS_PER_SYMBOL[enc])


def min_encoded_id_bytes(
    *, encoding: str = "base58", bit_length: int = _DEFAULT_BIT_LENGTH, multibase: bool = True
) -> int:
    return _plain_bounds(encoding, bit_length)[0] + (1 if multibase else 0)


def max_encoded_id_bytes(
    *, encoding: str = "base58", bit_length: int = _DEFAULT_BIT_LENGTH, multibase: bool = True
) -> int:
    return _plain_bounds(encoding, bit_length)[1] + (1 if multibase else 0)
