"""
Exceptions raised while decoding bencoded data.
"""


class BencodeDecodeError(Exception):
    """Base exception for Bencode decoding errors."""

    @property
    def kind(self) -> str:
        """Name of the failure, e.g. 'TruncatedString'."""
        return type(self).__name__


class MalformedInteger(BencodeDecodeError):
    """i...e body is not a terminated signed 64-bit decimal."""


class MalformedLength(BencodeDecodeError):
    """String length prefix is not a non-negative decimal followed by ':'."""


class TruncatedString(BencodeDecodeError):
    """Fewer bytes remain than the string length prefix declares."""


class OddEntryCount(BencodeDecodeError):
    """Dictionary body ends with a key that has no value."""


class NonStringKey(BencodeDecodeError):
    """Dictionary key is not a byte string."""


class UnknownToken(BencodeDecodeError):
    pass


class UnterminatedSequence(BencodeDecodeError):
    """Input ended inside a list or dictionary body."""


class NestingTooDeep(BencodeDecodeError):
    pass


class TrailingData(BencodeDecodeError):
    """Strict decoding found bytes after the top-level value."""
