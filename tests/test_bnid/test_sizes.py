import typing as ty

import pytest

from thds.bnid import errors
from thds.bnid.sizes import max_encoded_id_bytes, min_encoded_id_bytes

BIT_LENGTHS = [8, 16, 32, 64, 128, 256]
BASE16_BYTES = [2, 4, 8, 16, 32, 64]


@pytest.mark.parametrize(
    ["encodings", "min_bytes", "max_bytes"],
    [
        pytest.param(["hex", "base16", "base16upper"], BASE16_BYTES, BASE16_BYTES, id="base16"),
        pytest.param(
            ["base58", "base58btc"], [1, 2, 4, 8, 16, 32], [2, 3, 6, 11, 22, 44], id="base58"
        ),
    ],
)
def test_min_max_encoded_bytes(
    encodings: ty.List[str], min_bytes: ty.List[int], max_bytes: ty.List[int]
):
    for encoding in encodings:
        for bit_length, min_, max_ in zip(BIT_LENGTHS, min_bytes, max_bytes):
            for multibase in (False, True):
                extra = 1 if multibase else 0
                kw = dict(encoding=encoding, bit_length=bit_length, multibase=multibase)
                assert min_encoded_id_bytes(**kw) == min_ + extra, kw  # type: ignore
                assert max_encoded_id_bytes(**kw) == max_ + extra, kw  # type: ignore


def test_defaults():
    # base58, 128 bits, multibase
    assert min_encoded_id_bytes() == 17
    assert max_encoded_id_bytes() == 23


def test_256_bit_base58():
    assert min_encoded_id_bytes(encoding="base58", bit_length=256, multibase=False) == 32
    assert max_encoded_id_bytes(encoding="base58", bit_length=256, multibase=False) == 44


@pytest.mark.parametrize("f", [min_encoded_id_bytes, max_encoded_id_bytes])
def test_rejects_unknown_encoding(f):
    with pytest.raises(errors.UnknownEncodingError):
        f(encoding="baseBogus")


@pytest.mark.parametrize("f", [min_encoded_id_bytes, max_encoded_id_bytes])
def test_rejects_partial_bytes(f):
    with pytest.raises(errors.ConfigurationError):
        f(bit_length=12)
