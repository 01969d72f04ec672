"""A reduced multihash: <function code><digest size><digest>, where the function is
always 'identity'. Nothing gets hashed - the frame just makes the byte length of an
identifier self-describing.

Both header fields are single bytes rather than real varints, which is why digests are
capped at 127 bytes. Going beyond that means encoding the size as a proper varint.
"""

from .bits import Buffer
from .errors import DataTooLargeError, InvalidFrameError, SizeMismatchError

IDENTITY_FUNCTION_CODE = 0x00
MAX_DIGEST_SIZE = 127


def frame(digest: Buffer) -> bytes:
    size = len(digest)
    if size > MAX_DIGEST_SIZE:
        raise DataTooLargeError("Identifier size too large.")
    return bytes((IDENTITY_FUNCTION_CODE, size)) + bytes(digest)


def unframe(framed: Buffer, expected_size: int = 0) -> bytes:
    """Returns the digest. A nonzero expected_size must match it exactly."""
    framed = bytes(framed)
    if len(framed) < 2:
        raise InvalidFrameError("Multihash frame too short.")
    if framed[0] != IDENTITY_FUNCTION_CODE:
        raise InvalidFrameError("Invalid multihash function code.")

    size = framed[1]
    if size > MAX_DIGEST_SIZE:
        raise DataTooLargeError("Decoded identifier size too large.")
    digest = framed[2:]
    if len(digest) != size:
        raise SizeMismatchError("Unexpected identifier size.")
    if expected_size and size != expected_size:
        raise SizeMismatchError(
            f'Invalid decoded identifier size. Identifier must be "{expected_size}" bytes.'
        )
    return digest
