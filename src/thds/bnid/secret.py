"""Secret key seeds: random bytes that can be stored as a string and later used to derive
a key pair, whose public key may then serve as an identifier.

The seed itself is NOT an identifier. Both the raw bytes and the encoded string MUST be
kept secret - don't log them, don't put them in URLs.
"""

import typing as ty

from . import _config
from .generator import RandomFill
from .ids import decode_id, generate_id


def generate_secret_key_seed(
    *,
    encoding: ty.Optional[str] = None,
    bit_length: ty.Optional[int] = None,
    multibase: bool = True,
    multihash: bool = True,
    rng: ty.Optional[RandomFill] = None,
) -> str:
    # fixed_length is forced off: padding a seed to a fixed length is not something we
    # want to happen to secret material by accident.
    return generate_id(
        encoding=encoding,
        bit_length=_config.SECRET_SEED_BIT_LENGTH() if bit_length is None else bit_length,
        fixed_length=False,
        multibase=multibase,
        multihash=multihash,
        rng=rng,
    )


def decode_secret_key_seed(
    secret_key_seed: str,
    *,
    multibase: bool = True,
    multihash: bool = True,
    expected_size: int = 32,
) -> bytes:
    return decode_id(
        secret_key_seed, multibase=multibase, multihash=multihash, expected_size=expected_size
    )
