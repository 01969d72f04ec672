"""One-shot helpers for when you don't need to hold on to an encoder or decoder."""

import typing as ty

from .decoder import DecoderConfig, IdDecoder
from .encoder import EncoderConfig, IdEncoder
from .generator import IdGenerator, RandomFill


def _parts(
    encoding: ty.Optional[str],
    bit_length: ty.Optional[int],
    fixed_length: bool,
    fixed_bit_length: ty.Optional[int],
    multibase: bool,
    multihash: bool,
    rng: ty.Optional[RandomFill],
) -> ty.Tuple[IdGenerator, IdEncoder]:
    # build both before generating anything, so bad options never cost us randomness.
    encoder = IdEncoder(
        EncoderConfig(
            encoding=encoding or "",
            fixed_length=fixed_length,
            fixed_bit_length=fixed_bit_length,
            multibase=multibase,
            multihash=multihash,
        )
    )
    return IdGenerator(bit_length, rng), encoder


def generate_id(
    *,
    encoding: ty.Optional[str] = None,
    bit_length: ty.Optional[int] = None,
    fixed_length: bool = False,
    fixed_bit_length: ty.Optional[int] = None,
    multibase: bool = True,
    multihash: bool = False,
    rng: ty.Optional[RandomFill] = None,
) -> str:
    """Generates an encoded id string from random bits. See EncoderConfig for the options."""
    generator, encoder = _parts(
        encoding, bit_length, fixed_length, fixed_bit_length, multibase, multihash, rng
    )
    return encoder.encode(generator.generate())


async def agenerate_id(
    *,
    encoding: ty.Optional[str] = None,
    bit_length: ty.Optional[int] = None,
    fixed_length: bool = False,
    fixed_bit_length: ty.Optional[int] = None,
    multibase: bool = True,
    multihash: bool = False,
    rng: ty.Optional[RandomFill] = None,
) -> str:
    generator, encoder = _parts(
        encoding, bit_length, fixed_length, fixed_bit_length, multibase, multihash, rng
    )
    return encoder.encode(await generator.agenerate())


def decode_id(
    id_: str,
    *,
    encoding: ty.Optional[str] = None,
    fixed_bit_length: int = 0,
    multibase: bool = True,
    multihash: bool = False,
    expected_size: ty.Optional[int] = None,
) -> bytes:
    return IdDecoder(
        DecoderConfig(
            encoding=encoding or "",
            fixed_bit_length=fixed_bit_length,
            multibase=multibase,
            multihash=multihash,
            expected_size=expected_size,
        )
    ).decode(id_)
