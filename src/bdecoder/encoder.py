"""
Bencode encoder, the inverse of the decoder.
"""
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString


def encode(obj, sort_keys: bool = True) -> bytes:
    """
    Encodes a Python object or BencodeType into bencoded bytes.

    Dictionary keys are emitted in raw byte order unless `sort_keys` is
    False, in which case insertion order is kept.
    """
    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool")

    if isinstance(obj, (int, BencodeInt)):
        value = obj if isinstance(obj, int) else obj.value
        return encode_int(value)

    if isinstance(obj, str):
        return encode_str(obj)

    if isinstance(obj, (bytes, bytearray, BencodeString)):
        value = obj.value if isinstance(obj, BencodeString) else bytes(obj)
        return encode_bytes(value)

    if isinstance(obj, (list, tuple, BencodeList)):
        value = obj.value if isinstance(obj, BencodeList) else obj
        return encode_list(value, sort_keys)

    if isinstance(obj, (dict, BencodeDict)):
        value = obj.value if isinstance(obj, BencodeDict) else obj
        return encode_dict(value, sort_keys)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    return f"i{n}e".encode()


def encode_bytes(b: bytes) -> bytes:
    """Encodes bytes to bencoded bytes (e.g., 4:spam)."""
    return str(len(b)).encode() + b":" + b


def encode_str(s: str) -> bytes:
    return encode_bytes(s.encode())


def encode_list(lst, sort_keys: bool = True) -> bytes:
    """Encodes a list to bencoded bytes (e.g., l4:spame)."""
    encoded_items = b"".join(encode(x, sort_keys) for x in lst)
    return b"l" + encoded_items + b"e"


def encode_dict(d, sort_keys: bool = True) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""

    def key_to_bytes(k):
        if isinstance(k, str):
            return k.encode()
        if isinstance(k, (bytes, bytearray)):
            return bytes(k)
        raise TypeError(f"Dictionary keys must be bytes or str, not {type(k)}")

    keys = sorted(d.keys(), key=key_to_bytes) if sort_keys else list(d.keys())

    parts = [b"d"]
    for key in keys:
        parts.append(encode_bytes(key_to_bytes(key)))
        parts.append(encode(d[key], sort_keys))
    parts.append(b"e")

    return b"".join(parts)
