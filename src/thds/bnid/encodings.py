"""The text encodings an identifier can be rendered in, and the one-character multibase
prefix that lets a reader tell them apart.

base16 is the stdlib's hex codec; base58 (Bitcoin alphabet, no checksum) comes from the
`base58` distribution. Neither one knows anything about prefixes or framing.
"""

import binascii
import math
import typing as ty

import base58

from .bits import Buffer
from .errors import InvalidDataError, InvalidLengthError, UnknownEncodingError, UnknownPrefixError

Encoding = ty.Literal["base16", "base16upper", "base58"]

_CANONICAL: ty.Dict[str, Encoding] = {
    "hex": "base16",
    "base16": "base16",
    "base16upper": "base16upper",
    "base58": "base58",
    "base58btc": "base58",
}
MULTIBASE_PREFIXES: ty.Dict[Encoding, str] = {"base16": "f", "base16upper": "F", "base58": "z"}
_BY_PREFIX: ty.Dict[str, Encoding] = {prefix: enc for enc, prefix in MULTIBASE_PREFIXES.items()}

ZERO_SYMBOLS: ty.Dict[Encoding, str] = {"base16": "0", "base16upper": "0", "base58": "1"}
# what each encoding renders a single zero byte as, and so what it may be left-padded with.
BITS_PER_SYMBOL: ty.Dict[Encoding, float] = {
    "base16": 4,
    "base16upper": 4,
    "base58": math.log2(58),
}


def canonical(encoding: str) -> Encoding:
    try:
        return _CANONICAL[encoding]
    except KeyError:
        raise UnknownEncodingError(f'Unknown encoding type: "{encoding}".') from None


def from_prefix(text: str) -> ty.Tuple[Encoding, str]:
    """Split a multibase string into its encoding and its payload."""
    if not text:
        raise UnknownPrefixError("Multibase encoding not found.")
    try:
        return _BY_PREFIX[text[0]], text[1:]
    except KeyError:
        raise UnknownPrefixError(f'Unknown multibase prefix "{text[0]}".') from None


def is_base16(encoding: Encoding) -> bool:
    return encoding in ("base16", "base16upper")


def encode(encoding: Encoding, the_bytes: Buffer) -> str:
    """No prefix, no padding - just the symbols."""
    if is_base16(encoding):
        hexed = binascii.hexlify(the_bytes).decode()
        return hexed.upper() if encoding == "base16upper" else hexed
    return base58.b58encode(bytes(the_bytes)).decode("ascii")


def decode(encoding: Encoding, the_str: str) -> bytes:
    if is_base16(encoding):
        if len(the_str) % 2 != 0:
            raise InvalidLengthError("Invalid base16 data length.")
        try:
            return binascii.unhexlify(the_str)  # case-insensitive
        except (binascii.Error, ValueError) as err:
            raise InvalidDataError(f'Invalid encoded data "{the_str}".') from err

    if the_str != the_str.rstrip():
        # b58decode strips trailing whitespace; an id has exactly one text form.
        raise InvalidDataError(f'Invalid encoded data "{the_str}".')
    try:
        return base58.b58decode(the_str)
    except ValueError as err:
        # includes UnicodeEncodeError for anything outside ascii
        raise InvalidDataError(f'Invalid encoded data "{the_str}".') from err
