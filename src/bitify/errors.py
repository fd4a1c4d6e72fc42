class BitifyError(Exception):
    """Base class for errors raised while converting an image."""


class DecodeError(BitifyError):
    """The source image is missing, unreadable, or not a decodable format."""


class ValidationError(BitifyError, ValueError):
    """The requested grid would have a zero or negative dimension."""


class PersistenceError(BitifyError, OSError):
    """The rendered PNG could not be written to disk."""
