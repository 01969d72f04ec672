import typing as ty
from dataclasses import dataclass

from thds.core import log

from . import _config, encodings
from .bits import resolve_bit_length, with_bit_length
from .errors import ConfigurationError
from .multihash import MAX_DIGEST_SIZE, unframe

logger = log.getLogger(__name__)


@dataclass(frozen=True, init=False)
class DecoderConfig:
    """The mirror image of EncoderConfig.

    - encoding: only consulted when multibase is off. Empty means the configured default.
    - fixed_bit_length: force the decoded bytes to exactly this size (0 disables).
      Recommended, since base58 padding otherwise decodes to extra leading zero bytes.
      Values with leading non-zero data beyond this size are an error.
    - multibase: detect the encoding from the first character.
    - multihash: strip and check the multihash frame.
    - expected_size: the digest size in bytes a multihash frame must describe (0 disables).
      None means the configured default.
    """

    encoding: encodings.Encoding
    fixed_bit_length: int
    multibase: bool
    multihash: bool
    expected_size: int

    def __init__(
        self,
        encoding: str = "",
        fixed_bit_length: int = 0,
        multibase: bool = True,
        multihash: bool = False,
        expected_size: ty.Optional[int] = None,
    ):
        set_ = super().__setattr__  # this works around dataclass.frozen.
        set_("encoding", encodings.canonical(encoding or _config.DEFAULT_ENCODING()))
        if fixed_bit_length:
            resolve_bit_length(fixed_bit_length, default=0)
        set_("fixed_bit_length", fixed_bit_length)
        set_("multibase", multibase)
        set_("multihash", multihash)
        expected_size = _config.EXPECTED_SIZE() if expected_size is None else expected_size
        if not 0 <= expected_size <= MAX_DIGEST_SIZE:
            raise ConfigurationError(
                f"Expected size must be between 0 and {MAX_DIGEST_SIZE} bytes."
            )
        set_("expected_size", expected_size)


class IdDecoder:
    """Decodes an id string into bytes.

    Each step either succeeds or raises - nothing partial is ever returned.
    """

    def __init__(self, config: ty.Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()
        logger.debug(
            "Built id decoder",
            encoding=None if self.config.multibase else self.config.encoding,
            fixed_bit_length=self.config.fixed_bit_length,
            multihash=self.config.multihash,
            expected_size=self.config.expected_size,
        )

    def decode(self, id_: str) -> bytes:
        cfg = self.config
        if cfg.multibase:
            encoding, payload = encodings.from_prefix(id_)
        else:
            encoding, payload = cfg.encoding, id_

        decoded = encodings.decode(encoding, payload)
        if cfg.fixed_bit_length:
            decoded = with_bit_length(decoded, cfg.fixed_bit_length)
        if cfg.multihash:
            decoded = unframe(decoded, cfg.expected_size)
        return decoded
