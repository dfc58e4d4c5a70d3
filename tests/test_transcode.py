import random

import pytest

from pyt61 import tables, transcode
from pyt61.reports import InvalidEncoding, OutOfMemory
from pyt61.transcode import (
    first_invalid_t61_offset,
    is_representable,
    is_t61_valid,
    str_t61_length,
    str_to_t61,
    t61_to_str,
    t61_to_utf8,
    t61_utf8_length,
    unrepresentable_chars,
    utf8_t61_length,
    utf8_to_t61
)


DEFINED_BYTES = [byte for byte in range(256) if tables.T61_TO_UNICODE[byte]]
ORDINARY_BYTES = [byte for byte in DEFINED_BYTES if not tables.is_combining_lead(byte)]
UNDEFINED_BYTES = [byte for byte in range(256) if not tables.T61_TO_UNICODE[byte]]

COMPOSITE_PAIRS = [
    (0xc0 | accent, (group_i << 5) | i, code_point)
    for accent, groups in enumerate(tables.COMPOSITES) if groups is not None
    for group_i, group in enumerate(groups) if group is not None
    for i, code_point in enumerate(group) if code_point
]


def test_empty():
    assert is_t61_valid(b"")
    assert t61_to_utf8(b"") == b""
    assert utf8_to_t61(b"") == b""
    assert t61_utf8_length(b"") == 0
    assert utf8_t61_length(b"") == 0


def test_validity():
    assert is_t61_valid(b"Hello, world!")
    assert is_t61_valid(bytearray(b"\xc1A\xe0"))
    assert is_t61_valid(memoryview(b"\xcc"))
    assert not is_t61_valid(b"a\\b")
    assert first_invalid_t61_offset(b"abc{") == 3
    assert first_invalid_t61_offset(b"abc") is None


@pytest.mark.parametrize("byte", UNDEFINED_BYTES)
def test_undefined_byte(byte):
    data = b"ok" + bytes((byte,))
    assert not is_t61_valid(data)
    with pytest.raises(InvalidEncoding) as exc_info:
        t61_to_utf8(data)
    assert (exc_info.value.start, exc_info.value.end) == (2, 3)


@pytest.mark.parametrize("byte", ORDINARY_BYTES)
def test_ordinary_byte(byte):
    code_point = tables.T61_TO_UNICODE[byte]
    assert t61_to_utf8(bytes((byte,))) == chr(code_point).encode("utf-8")


@pytest.mark.parametrize("byte", ORDINARY_BYTES)
def test_ordinary_byte_round_trip(byte):
    assert utf8_to_t61(t61_to_utf8(bytes((byte,)))) == bytes((byte,))


def test_ordinary_bytes_round_trip():
    data = bytes(ORDINARY_BYTES)
    assert utf8_to_t61(t61_to_utf8(data)) == data


@pytest.mark.parametrize(
    "t61, text",
    [
        (b"\xa4\xa6\xa8", "$#¤"),
        (b"\xe0", "\u2126"),
        (b"\xc2", "´"),
        (b"\xc2 ", "´"),
        (b"\xc2 x", "´x"),
        (b"x\xcf", "xˇ"),
        (b"\xc1A", "À"),
        (b"\xc1a", "à"),
        (b"\xc2\xe1", "Ǽ"),
        (b"\xc8t", "ẗ"),
        (b"Fran\xcbcais", "Français"),
        (b"\xc1B", "B\u0300"),
        (b"\xccA", "A\u0332"),
        (b"\xcc ", " \u0332"),
        (b"\xc2\xc3", "\u0302\u0301"),
        (b"\xc7i", "i\u0307"),
    ]
)
def test_forward(t61, text):
    assert t61_to_str(t61) == text
    assert t61_to_utf8(t61) == text.encode("utf-8")


@pytest.mark.parametrize("lead, following, code_point", COMPOSITE_PAIRS)
def test_composite_pair(lead, following, code_point):
    pair = bytes((lead, following))
    assert t61_to_str(pair) == chr(code_point)
    assert str_to_t61(chr(code_point)) == pair


def test_trailing_accent_without_spacing_form():
    with pytest.raises(InvalidEncoding) as exc_info:
        t61_to_utf8(b"A\xcc")
    assert (exc_info.value.start, exc_info.value.end) == (1, 2)


def test_undefined_byte_after_accent():
    with pytest.raises(InvalidEncoding) as exc_info:
        t61_to_utf8(b"xy\xc1\\z")
    assert (exc_info.value.start, exc_info.value.end) == (2, 4)
    assert "0x5c" in exc_info.value.reason


def test_forward_errors():
    assert t61_to_str(b"A\\B", errors="replace") == "A\ufffdB"
    assert t61_to_str(b"\xc1\\B", errors="replace") == "\ufffdB"
    assert t61_to_str(b"A\\B\xcc", errors="ignore") == "AB"


def test_unknown_error_handler():
    with pytest.raises(ValueError):
        t61_to_str(b"A\\B", errors="surrogateescape")
    with pytest.raises(ValueError):
        t61_to_str(b"AB", errors="")


def test_out_of_memory(monkeypatch):
    def exhausted(*args):
        raise MemoryError()
        yield  # pragma: no cover

    monkeypatch.setattr(transcode, "iter_t61_code_points", exhausted)
    with pytest.raises(OutOfMemory):
        t61_to_utf8(b"abc")

    monkeypatch.setattr(transcode, "iter_t61_units", exhausted)
    with pytest.raises(OutOfMemory):
        str_to_t61("abc")


@pytest.mark.parametrize(
    "text, t61",
    [
        ("Hello", b"Hello"),
        ("#$", b"\xa6\xa4"),
        ("^`~", b"\xc3 \xc1 \xc4 "),
        ("À", b"\xc1A"),
        ("été", b"\xc2et\xc2e"),
        ("Æß", b"\xe1\xfb"),
        ("Ĳ", b"\xe6"),
        ("˘", b"\xc6 "),
        ("ȳ", b"\xc5y"),
        ("ǎ", b"\xcfa"),
        ("ẁ", b"\xc1w"),
        ("Ỳ", b"\xc1Y"),
        ("\u2126", b"\xe0"),
        ("\u03a9", b"?"),
        ("\u2127", b"?"),
        ("€", b"?"),
        ("\\{}", b"???"),
        ("ƀ", b"?"),
        ("\U0001f600", b"?"),
        ("?", b"?"),
    ]
)
def test_reverse(text, t61):
    assert utf8_to_t61(text.encode("utf-8")) == t61
    assert str_to_t61(text) == t61


@pytest.mark.parametrize(
    "text, t61",
    [
        ("e\u0301", b"\xc2e"),
        ("ab\u0301", b"a\xc2b"),
        ("\u0301", b"\xc2"),
        ("\u0301x", b"\xc2x"),
        ("e\u0305", b"e?"),
        ("e\u0345", b"e?"),
        ("B\u0300", b"\xc1B"),
        ("A\u0332", b"\xccA"),
        ("\u0302\u0301", b"\xc2\xc3"),
        # Inserted before the last byte, which is the base of a pair here
        ("á\u0301", b"\xc2\xc2a"),
    ]
)
def test_combining_marks_are_moved_before_base(text, t61):
    assert str_to_t61(text) == t61


def test_reverse_never_fails_on_well_formed_input():
    text = "".join(chr(code_point) for code_point in range(0x0, 0x3000) if not 0xd800 <= code_point < 0xe000)
    data = utf8_to_t61(text.encode("utf-8"))
    assert len(data) == utf8_t61_length(text.encode("utf-8"))


@pytest.mark.parametrize(
    "data, start",
    [
        (b"\xff", 0),
        (b"a\xc3", 1),
        (b"ab\x80", 2),
        (b"\xed\xa0\x80", 0),
        (b"\xc0\xaf", 0),
    ]
)
def test_malformed_utf8(data, start):
    with pytest.raises(InvalidEncoding) as exc_info:
        utf8_to_t61(data)
    assert exc_info.value.start == start
    with pytest.raises(ValueError):
        utf8_t61_length(data)


def test_lossy_accent_round_trip():
    # A trailing accent gains a space on the way back, which is what the
    # spacing form maps to
    assert utf8_to_t61(t61_to_utf8(b"\xc2")) == b"\xc2 "
    assert utf8_to_t61(t61_to_utf8(b"\xc1B")) == b"\xc1B"


def test_unrepresentable_chars():
    assert unrepresentable_chars("Grüße €€ ☺?\\") == ["€", "☺", "\\"]
    assert unrepresentable_chars("") == []
    assert is_representable("?")
    assert is_representable("\u2126")
    assert not is_representable("\u2127")


def _random_t61(rng):
    data = bytes(rng.choice(DEFINED_BYTES) for _ in range(rng.randrange(40)))
    if data.endswith(b"\xcc"):
        data += b"A"
    return data


def test_forward_length_matches_output():
    rng = random.Random(61)
    for _ in range(2000):
        data = _random_t61(rng)
        assert t61_utf8_length(data) == len(t61_to_utf8(data))


def test_reverse_length_matches_output():
    rng = random.Random(61)
    code_points = list(range(0x250)) + list(range(0x2c0, 0x370)) + list(range(0x1e00, 0x1f00)) + [0x2126, 0x2127, 0x20ac, 0x1f600]
    for _ in range(2000):
        text = "".join(chr(rng.choice(code_points)) for _ in range(rng.randrange(40)))
        assert str_t61_length(text) == len(str_to_t61(text))
        assert utf8_t61_length(text.encode("utf-8")) == len(utf8_to_t61(text.encode("utf-8")))


def test_decoded_t61_encodes_to_valid_t61():
    rng = random.Random(1345)
    for _ in range(2000):
        data = _random_t61(rng)
        assert is_t61_valid(utf8_to_t61(t61_to_utf8(data)))
