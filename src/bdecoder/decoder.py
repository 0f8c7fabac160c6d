"""
Bencode decoder for BitTorrent metainfo and peer-wire payloads.

Every parse step takes the unconsumed input as a memoryview and returns the
decoded value together with the remainder it did not consume. Remainders are
zero-copy suffixes of the original input, so the consumed prefix and the
remainder always partition the slice that was passed in.
"""
from typing import List, Tuple, Union

from .errors import (
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
from .structure import (
    INT64_MAX,
    INT64_MIN,
    BencodeDict,
    BencodeInt,
    BencodeList,
    BencodeString,
    BencodeType,
)

BytesLike = Union[bytes, bytearray, memoryview, str]

INT_PREFIX = ord("i")
LIST_PREFIX = ord("l")
DICT_PREFIX = ord("d")
SUFFIX = ord("e")
COLON = ord(":")
MINUS = ord("-")
DIGITS = frozenset(b"0123456789")
# len(str(2 ** 63)), leading zeros included
INT64_DIGITS = 19

# Each nesting level costs two interpreter frames (value + sequence).
DEFAULT_MAX_DEPTH = 256


def as_view(data: BytesLike) -> memoryview:
    """Wraps the input in a flat byte memoryview. Text is encoded as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Cannot decode object of type {type(data)}")
    return memoryview(data).cast("B")


class BencodeDecoder:
    """
    Decodes Bencoded data into an immutable BencodeType tree.

    The decoder only holds configuration. Position is carried by the
    remainder passed between calls, so an instance can be shared freely.
    """
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, strict: bool = False):
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {max_depth!r}")
        self.max_depth = max_depth
        self.strict = strict

    def decode(self, data: BytesLike) -> BencodeType:
        """Decodes exactly one top-level value."""
        value, rest = self.decode_with_remainder(data)
        if self.strict and rest:
            raise TrailingData(f"{len(rest)} bytes left after top-level value")
        return value

    def decode_with_remainder(self, data: BytesLike) -> Tuple[BencodeType, bytes]:
        """Decodes one top-level value and returns the trailing bytes as well."""
        try:
            value, rest = self.decode_value(as_view(data))
        except RecursionError as exc:
            raise NestingTooDeep("Nesting exceeds the interpreter recursion limit") from exc
        return value, rest.tobytes()

    # --------------------------
    # Parsing functions
    # --------------------------

    def decode_value(self, data: memoryview, depth: int = 0) -> Tuple[BencodeType, memoryview]:
        """
        Parses exactly one value from the start of `data`.

        Returns the value and the remainder that follows it.
        """
        if not isinstance(data, memoryview):
            data = as_view(data)
        if not data:
            raise UnknownToken("Unexpected end of input")

        lead = data[0]

        if lead == INT_PREFIX:
            return self._parse_int(data)

        if lead == LIST_PREFIX:
            self._check_depth(depth)
            items, rest = self.decode_sequence(data[1:], depth)
            return BencodeList(items), rest

        if lead == DICT_PREFIX:
            self._check_depth(depth)
            items, rest = self.decode_sequence(data[1:], depth)
            return self._pair_entries(items), rest

        if lead in DIGITS:
            return self._parse_string(data)

        raise UnknownToken(f"Invalid token {chr(lead)!r}")

    def decode_sequence(self, data: memoryview, depth: int = 0) -> Tuple[List[BencodeType], memoryview]:
        """
        Collects values until the terminating 'e', which is consumed.

        `data` starts just after the opening 'l' or 'd'.
        """
        items = []
        rest = data

        while rest and rest[0] != SUFFIX:
            item, rest = self.decode_value(rest, depth + 1)
            items.append(item)

        if not rest:
            raise UnterminatedSequence(f"Missing 'e' after {len(items)} items")

        return items, rest[1:]  # skip 'e'

    def _check_depth(self, depth: int):
        if depth >= self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels")

    @staticmethod
    def _parse_int(data: memoryview) -> Tuple[BencodeInt, memoryview]:
        """Parses i<digits>e."""
        start = 1
        if start < len(data) and data[start] == MINUS:
            start += 1
        end = _scan_digits(data, start)

        if end == start:
            raise MalformedInteger("Integer has no digits")
        if end >= len(data) or data[end] != SUFFIX:
            raise MalformedInteger("Integer is not terminated by 'e'")

        if end - start > INT64_DIGITS:
            raise MalformedInteger(f"Integer has {end - start} digits, more than 64 bits allow")

        try:
            num = int(data[1:end].tobytes())
        except ValueError as exc:
            raise MalformedInteger("Invalid integer format") from exc
        if not INT64_MIN <= num <= INT64_MAX:
            raise MalformedInteger(f"Integer out of 64-bit range: {num}")

        return BencodeInt(num), data[end + 1:]

    @staticmethod
    def _parse_string(data: memoryview) -> Tuple[BencodeString, memoryview]:
        """Parses <len>:<bytes>."""
        colon = _scan_digits(data, 0)
        if colon >= len(data) or data[colon] != COLON:
            raise MalformedLength("String length is not followed by ':'")

        try:
            length = int(data[:colon].tobytes())
        except ValueError as exc:
            raise MalformedLength("Invalid string length") from exc
        body = data[colon + 1:]
        if len(body) < length:
            raise TruncatedString(f"Declared {length} bytes, only {len(body)} remain")

        return BencodeString(body[:length]), body[length:]

    @staticmethod
    def _pair_entries(items: List[BencodeType]) -> BencodeDict:
        """Pairs the flattened dictionary body into key/value entries."""
        if len(items) % 2:
            raise OddEntryCount(f"Dictionary key {items[-1]!r} has no value")

        obj = {}
        for key, value in zip(items[::2], items[1::2]):
            # keys MUST be strings
            if not isinstance(key, BencodeString):
                raise NonStringKey(f"Dictionary key must be a byte string, got {key!r}")
            obj[key.value] = value

        return BencodeDict(obj)


def _scan_digits(data: memoryview, start: int) -> int:
    end = start
    while end < len(data) and data[end] in DIGITS:
        end += 1
    return end


def decode(data: BytesLike, max_depth: int = DEFAULT_MAX_DEPTH, strict: bool = False) -> BencodeType:
    """
    Convenience function to decode Bencoded data.
    """
    return BencodeDecoder(max_depth=max_depth, strict=strict).decode(data)


def decode_with_remainder(data: BytesLike, max_depth: int = DEFAULT_MAX_DEPTH) -> Tuple[BencodeType, bytes]:
    return BencodeDecoder(max_depth=max_depth).decode_with_remainder(data)
