import math
import typing as ty
from dataclasses import dataclass

from thds.core import log

from . import _config, encodings, multihash
from .bits import Buffer, resolve_bit_length
from .errors import DataTooLargeError

logger = log.getLogger(__name__)


@dataclass(frozen=True, init=False)
class EncoderConfig:
    """Validated once, at construction. After that it's just data, and may be shared freely.

    - encoding: any name `encodings.canonical` accepts. Empty means the configured default.
    - fixed_length: left-pad the encoded output so that every id of a given size
      renders to the same number of characters, regardless of leading zero bytes.
    - fixed_bit_length: the size to pad for. Passing one implies fixed_length. With
      fixed_length but no fixed_bit_length, the input's own size is used.
    - multibase: prepend the one-character prefix that identifies the encoding.
    - multihash: frame the bytes so the decoder can recover their exact length.
    """

    encoding: encodings.Encoding
    fixed_length: bool
    fixed_bit_length: int
    multibase: bool
    multihash: bool

    def __init__(
        self,
        encoding: str = "",
        fixed_length: bool = False,
        fixed_bit_length: ty.Optional[int] = None,
        multibase: bool = True,
        multihash: bool = False,
    ):
        set_ = super().__setattr__  # this works around dataclass.frozen.
        set_("encoding", encodings.canonical(encoding or _config.DEFAULT_ENCODING()))
        fixed_length = fixed_length or fixed_bit_length is not None
        set_("fixed_length", fixed_length)
        set_(
            "fixed_bit_length",
            # 0 means 'size of whatever we're given'
            resolve_bit_length(fixed_bit_length, default=0) if fixed_length else 0,
        )
        set_("multibase", multibase)
        set_("multihash", multihash)

    @property
    def multibase_prefix(self) -> str:
        return encodings.MULTIBASE_PREFIXES[self.encoding]


class IdEncoder:
    """Encodes id bytes into a string."""

    def __init__(self, config: ty.Optional[EncoderConfig] = None):
        self.config = config or EncoderConfig()
        logger.debug(
            "Built id encoder",
            encoding=self.config.encoding,
            fixed_bit_length=self.config.fixed_bit_length if self.config.fixed_length else None,
            multibase=self.config.multibase,
            multihash=self.config.multihash,
        )

    def _pad(self, encoded: str, input_bit_length: int) -> str:
        encoding = self.config.encoding
        fixed_bit_length = self.config.fixed_bit_length or input_bit_length
        if input_bit_length > fixed_bit_length:
            raise DataTooLargeError(f"Input length greater than {fixed_bit_length} bits.")
        want_length = math.ceil(fixed_bit_length / encodings.BITS_PER_SYMBOL[encoding])
        return encoded.rjust(want_length, encodings.ZERO_SYMBOLS[encoding])

    def encode(self, data: Buffer) -> str:
        cfg = self.config
        if cfg.multihash:
            data = multihash.frame(data)
        encoded = encodings.encode(cfg.encoding, data)
        if cfg.fixed_length:
            encoded = self._pad(encoded, len(data) * 8)
        if cfg.multibase:
            return cfg.multibase_prefix + encoded
        return encoded
