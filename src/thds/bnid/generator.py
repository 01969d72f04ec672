import asyncio
import secrets
import typing as ty
from dataclasses import dataclass, field

from thds.core import log

from . import _config
from .bits import resolve_bit_length

logger = log.getLogger(__name__)


class RandomFill(ty.Protocol):
    """Fills the buffer in place with cryptographically strong random bytes and returns it.

    This is the only source of non-determinism in the library.
    """

    def __call__(self, __buffer: bytearray) -> bytearray:
        ...


def urandom_fill(buffer: bytearray) -> bytearray:
    buffer[:] = secrets.token_bytes(len(buffer))
    return buffer


@dataclass(frozen=True, init=False)
class IdGenerator:
    """Generates random id bytes. bit_length defaults to the configured id size (128),
    rng to `urandom_fill`.
    """

    bit_length: int
    rng: RandomFill = field(repr=False, compare=False)

    def __init__(self, bit_length: ty.Optional[int] = None, rng: ty.Optional[RandomFill] = None):
        set_ = super().__setattr__  # this works around dataclass.frozen.
        set_("bit_length", resolve_bit_length(bit_length, default=_config.ID_BIT_LENGTH()))
        set_("rng", rng or urandom_fill)
        logger.debug("Built id generator", bit_length=self.bit_length)

    def generate(self) -> bytes:
        size = self.bit_length // 8
        filled = self.rng(bytearray(size))
        if len(filled) != size:
            raise RuntimeError(f"Random fill returned {len(filled)} bytes; expected {size}.")
        return bytes(filled)

    async def agenerate(self) -> bytes:
        """The RNG fill runs in a worker thread - that's the only point where this suspends."""
        return await asyncio.to_thread(self.generate)
