"""Everything this library raises is a ValueError - the caller handed us options or data
we can't work with. Nothing here is retried or swallowed internally.
"""


class BnidError(ValueError):
    pass


class ConfigurationError(BnidError):
    """Bad constructor options - detected when the config is built, never at use time."""


class UnknownEncodingError(ConfigurationError):
    pass


class UnknownPrefixError(BnidError):
    """The multibase prefix is missing or not one we recognize."""


class InvalidLengthError(BnidError):
    pass


class InvalidDataError(BnidError):
    """The base codec rejected the payload."""


class DataTooLargeError(BnidError):
    """Data would have to be truncated to fit, or exceeds what a multihash frame can describe."""


class SizeMismatchError(BnidError):
    pass


class InvalidFrameError(BnidError):
    pass
