"""
Bencode package for decoding BitTorrent data into an immutable value tree.
"""
from .decoder import DEFAULT_MAX_DEPTH, BencodeDecoder, decode, decode_with_remainder
from .encoder import encode
from .errors import (
    BencodeDecodeError,
    MalformedInteger,
    MalformedLength,
    NestingTooDeep,
    NonStringKey,
    OddEntryCount,
    TrailingData,
    TruncatedString,
    UnknownToken,
    UnterminatedSequence,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'decode_with_remainder', 'encode', 'BencodeDecoder', 'DEFAULT_MAX_DEPTH',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'MalformedInteger', 'MalformedLength', 'TruncatedString',
    'OddEntryCount', 'NonStringKey', 'UnknownToken', 'UnterminatedSequence',
    'NestingTooDeep', 'TrailingData',
]
