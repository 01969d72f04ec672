"""Random binary identifiers, and compact self-describing text encodings for them."""

from thds.core import meta

from . import encodings, errors, multihash  # noqa: F401
from .bits import resolve_bit_length, with_bit_length  # noqa: F401
from .decoder import DecoderConfig, IdDecoder  # noqa: F401
from .encoder import EncoderConfig, IdEncoder  # noqa: F401
from .generator import IdGenerator, RandomFill  # noqa: F401
from .ids import agenerate_id, decode_id, generate_id  # noqa: F401
from .secret import decode_secret_key_seed, generate_secret_key_seed  # noqa: F401
from .sizes import max_encoded_id_bytes, min_encoded_id_bytes  # noqa: F401

__version__ = meta.get_version(__name__)
