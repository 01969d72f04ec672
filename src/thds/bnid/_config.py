"""Process-wide defaults. These are read when an encoder, decoder or generator is built,
so changing them never affects objects that already exist.

export THDS_BNID_DEFAULT_ENCODING=base16
"""

from thds.core import config

DEFAULT_ENCODING = config.ConfigItem("thds.bnid.default_encoding", "base58", parse=str)
ID_BIT_LENGTH = config.ConfigItem("thds.bnid.id_bit_length", 128, parse=int)
SECRET_SEED_BIT_LENGTH = config.ConfigItem("thds.bnid.secret_seed_bit_length", 256, parse=int)
EXPECTED_SIZE = config.ConfigItem("thds.bnid.expected_size", 32, parse=int)
# in bytes, only checked when decoding multihash frames. 0 disables the check.
