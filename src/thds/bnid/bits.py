import typing as ty

from .errors import ConfigurationError, DataTooLargeError

Buffer = ty.Union[bytes, bytearray, memoryview]

MIN_BIT_LENGTH = 8


def resolve_bit_length(
    bit_length: ty.Optional[int], *, default: int, minimum: int = MIN_BIT_LENGTH
) -> int:
    """None means 'use the default', which we trust. Anything else must be whole bytes
    and at least `minimum` bits. No rounding - a bad value is a configuration error.
    """
    if bit_length is None:
        return default
    if bit_length % 8 != 0:
        raise ConfigurationError("Bit length must be a multiple of 8.")
    if bit_length < minimum:
        raise ConfigurationError(f"Minimum bit length is {minimum}.")
    return bit_length


def with_bit_length(data: Buffer, bit_length: int) -> bytes:
    """Left-pad with zero bytes, or strip leading zero bytes, until the data is exactly
    `bit_length` bits long.

    Stripping a non-zero byte would change the identifier, so that raises instead.
    """
    data = bytes(data)
    length = len(data) * 8
    if length == bit_length:
        return data
    if length < bit_length:
        return bytes(bit_length // 8 - len(data)) + data

    start = (length - bit_length) // 8
    if any(data[:start]):
        raise DataTooLargeError(f"Data length greater than {bit_length} bits.")
    return data[start:]
