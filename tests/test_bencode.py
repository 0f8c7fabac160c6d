from bdecoder.decoder import decode
from bdecoder.encoder import encode
from bdecoder.structure import BencodeInt, BencodeString, BencodeList, BencodeDict


def test_int():
    print("Testing integer decoding...")
    obj = decode(b"i42e")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeInt)
    assert obj.value == 42

    print("Testing integer encoding...")
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"i42e"


def test_int_edge_values():
    assert decode(b"i-42e") == BencodeInt(-42)
    assert decode(b"i0e") == BencodeInt(0)
    assert decode(b"i-0e") == BencodeInt(0)
    assert decode(b"i007e") == BencodeInt(7)
    assert decode(b"i9223372036854775807e") == BencodeInt(2 ** 63 - 1)
    assert decode(b"i-9223372036854775808e") == BencodeInt(-(2 ** 63))


def test_int_from_any_number():
    for n in (1, -1, 52, 123, 10 ** 12, -(10 ** 18)):
        assert decode("i" + str(n) + "e") == BencodeInt(n)


def test_string():
    print("Testing string decoding...")
    obj = decode(b"4:spam")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeString)
    assert obj.value == b"spam"

    print("Testing string encoding...")
    assert encode(obj) == b"4:spam"


def test_string_lengths():
    for s in (b"", b"a", b"hello world", b"x" * 1000, b"e:i:l:d"):
        assert decode(str(len(s)).encode() + b":" + s) == BencodeString(s)


def test_binary_string():
    raw = bytes([0xff, 0x00, 0xfe, 0x65])
    obj = decode(b"4:" + raw)
    assert obj.value == raw


def test_text_input_counts_utf8_bytes():
    # "é" is two bytes in UTF-8
    assert decode("2:é") == BencodeString("é".encode())


def test_list():
    print("Testing list decoding...")
    obj = decode(b"l4:spami3ee")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeList)
    assert len(obj.value) == 2
    assert obj.value == (BencodeString(b"spam"), BencodeInt(3))


def test_empty_containers():
    assert decode("le") == BencodeList([])
    assert decode("de") == BencodeDict({})


def test_nested_list():
    obj = decode("l5:helloi52e2:hil1:bed4:test2:okee")
    assert obj == BencodeList([
        BencodeString(b"hello"),
        BencodeInt(52),
        BencodeString(b"hi"),
        BencodeList([BencodeString(b"b")]),
        BencodeDict({b"test": BencodeString(b"ok")}),
    ])
    assert obj.to_python() == [b"hello", 52, b"hi", [b"b"], {b"test": b"ok"}]


def test_dict():
    print("Testing dictionary decoding & encoding...")
    obj = decode(b"d3:cow3:mooe")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeDict)
    assert obj.value[b"cow"].value == b"moo"
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"d3:cow3:mooe"


def test_nested_dict_keeps_key_order():
    obj = decode("d3:foo3:bar5:helloi52e2:nod2:hi2:byee")
    assert list(obj.value.keys()) == [b"foo", b"hello", b"no"]
    assert obj.to_python() == {
        b"foo": b"bar",
        b"hello": 52,
        b"no": {b"hi": b"by"},
    }


def test_unsorted_keys_keep_insertion_order():
    obj = decode(b"d1:bi1e1:ai2ee")
    assert list(obj.value.keys()) == [b"b", b"a"]
    assert encode(obj, sort_keys=False) == b"d1:bi1e1:ai2ee"
    assert encode(obj) == b"d1:ai2e1:bi1ee"


def test_duplicate_key_last_value_wins():
    obj = decode(b"d1:ai1e1:bi2e1:ai3ee")
    assert list(obj.value.keys()) == [b"a", b"b"]
    assert obj.value[b"a"] == BencodeInt(3)


def test_trailing_data_is_ignored():
    assert decode(b"i1eextra") == BencodeInt(1)
    assert decode(b"4:spam4:eggs") == BencodeString(b"spam")


def test_metainfo_like_document():
    data = (b"d8:announce35:http://tracker.example.com/announce"
            b"4:infod6:lengthi123456e4:name8:test.txt"
            b"12:piece lengthi32768e6:pieces20:" + b"a" * 20 + b"ee")
    obj = decode(data)
    info = obj.value[b"info"]
    assert info.value[b"length"] == BencodeInt(123456)
    assert info.value[b"pieces"].value == b"a" * 20
    assert encode(obj) == data


def test_roundtrip():
    docs = [
        b"i-17e",
        b"0:",
        b"l4:spam4:eggse",
        b"d3:cow3:moo4:spam4:eggse",
        b"d4:listl5:apple6:bananai42ee3:numi7ee",
        b"lllleeee",
        b"d1:ad1:bd1:cleeee",
    ]
    for doc in docs:
        assert encode(decode(doc)) == doc
