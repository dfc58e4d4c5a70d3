"""T.61 <-> Unicode transcoding.

T.61 to Unicode is lossless over the T.61 repertoire. Unicode to T.61 is lossy:
whatever has no T.61 form becomes '?'.

T.61 writes an accented letter as a non-spacing accent byte (xC1..xCF)
followed by the base letter, the opposite of Unicode's combining marks. Known
pairs are turned into precomposed code points, unknown pairs are emitted as the
base letter followed by the combining mark. In the other direction precomposed
letters are split into accent and base, and a combining mark is moved in front
of the byte written just before it.

Both directions compute their output as a sequence of units first. The length
functions and the converters consume the very same sequence, so the computed
length always matches what gets written.
"""

from collections import namedtuple

from . import reports
from .reports import Context, InvalidEncoding, OutOfMemory
from .tables import (
    ACCENT_NAMES, FALLBACK, OHM_BYTE, OHM_SIGN, SPACE, SPACING_ACCENTS, T61_TO_UNICODE,
    accent_class, composite, is_combining_lead, reverse_entry
)


REPLACEMENT_CHARACTER = 0xFFFD


def first_invalid_t61_offset(data):
    for offset, byte in enumerate(data):
        if not T61_TO_UNICODE[byte]:
            return offset
    return None


def is_t61_valid(data) -> bool:
    return first_invalid_t61_offset(data) is None


def iter_t61_code_points(data, filename="<input>", errors="strict"):
    """Yield the Unicode code points a T.61 byte string stands for.

    With errors="strict" the first undefined byte raises InvalidEncoding;
    "replace" yields U+FFFD for it instead and "ignore" skips it. The span of
    an error always starts at the beginning of the offending unit, i.e. at the
    accent byte when the byte following an accent is undefined.
    """
    if errors not in ("strict", "replace", "ignore"):
        raise ValueError(f"T.61 decoding doesn't support the {errors!r} error handler")

    length = len(data)
    i = 0
    while i < length:
        byte = data[i]
        code_point = T61_TO_UNICODE[byte]

        if not code_point:
            error = InvalidEncoding(i, i + 1, f"byte 0x{byte:02x} is not defined in T.61")
        elif not is_combining_lead(byte):
            yield code_point
            i += 1
            continue
        else:
            error, consumed = yield from _iter_accented(data, i, filename)
            if error is None:
                i += consumed
                continue

        if errors == "strict":
            raise error
        if errors == "replace":
            yield REPLACEMENT_CHARACTER
        i = error.end


def _iter_accented(data, i, filename):
    byte = data[i]
    accent = accent_class(byte)

    # A trailing accent is treated as if it were followed by a space
    if i + 1 == len(data):
        if SPACING_ACCENTS[accent]:
            yield SPACING_ACCENTS[accent]
            return None, 1
        return InvalidEncoding(i, i + 1, f"non-spacing accent 0x{byte:02x} at end of input has no spacing form"), 0

    following = data[i + 1]
    if following == SPACE and SPACING_ACCENTS[accent]:
        yield SPACING_ACCENTS[accent]
        return None, 2

    if not T61_TO_UNICODE[following]:
        return InvalidEncoding(i, i + 2, f"byte 0x{following:02x} after accent 0x{byte:02x} is not defined in T.61"), 0

    code_point = composite(accent, following)
    if code_point:
        yield code_point
        return None, 2

    if reports.is_active():
        reports.warning(
            "decomposed-pair",
            (
                Context(filename, data, i),
                Context(filename, data, i + 2),
                f"No precomposed form for U+{T61_TO_UNICODE[following]:04X} with U+{T61_TO_UNICODE[byte]:04X} ({ACCENT_NAMES[accent]}), emitting the combining mark after the base character"
            )
        )
    yield T61_TO_UNICODE[following]
    yield T61_TO_UNICODE[byte]
    return None, 2


def _utf8_width(code_point):
    if code_point < 0x80:
        return 1
    elif code_point < 0x800:
        return 2
    elif code_point < 0x10000:
        return 3
    else:
        return 4


def t61_utf8_length(data, filename="<input>"):
    return sum(_utf8_width(code_point) for code_point in iter_t61_code_points(data, filename))


def t61_to_str(data, filename="<input>", errors="strict"):
    return "".join(map(chr, iter_t61_code_points(data, filename, errors)))


def t61_to_utf8(data, filename="<input>"):
    """Transcode a T.61 byte string to UTF-8.

    Raises InvalidEncoding if a byte, including the one following an accent,
    isn't defined in T.61, and OutOfMemory if the result can't be allocated.
    Nothing is allocated before the whole input has been validated.
    """
    try:
        code_points = list(iter_t61_code_points(data, filename))
        buffer = bytearray(sum(map(_utf8_width, code_points)))
        offset = 0
        for code_point in code_points:
            encoded = chr(code_point).encode("utf-8")
            buffer[offset:offset + len(encoded)] = encoded
            offset += len(encoded)
    except MemoryError:
        raise OutOfMemory(f"Could not allocate UTF-8 output for {len(data)} bytes of T.61") from None
    assert offset == len(buffer)
    return bytes(buffer)


# A unit of T.61 output: `data` is appended, unless `before_last` is set, in
# which case it is inserted right before the last byte written so far.
Unit = namedtuple("Unit", ["data", "before_last"])

_FALLBACK_UNIT = Unit(bytes((FALLBACK,)), False)
_OHM_UNIT = Unit(bytes((OHM_BYTE,)), False)


def _unit_for(code_point):
    if code_point == OHM_SIGN:
        return _OHM_UNIT

    entry = reverse_entry(code_point)
    if entry is None or entry == FALLBACK:
        return _FALLBACK_UNIT

    if code_point >> 8 == 0x03:
        # Combining marks only ever map to a lone accent byte
        return Unit(bytes((entry,)), True)
    elif entry > 0xff:
        return Unit(bytes((entry >> 8, entry & 0xff)), False)
    else:
        return Unit(bytes((entry,)), False)


def is_representable(char):
    return char == "?" or _unit_for(ord(char)) is not _FALLBACK_UNIT


def unrepresentable_chars(text):
    """List the distinct characters of text that can't be written in T.61."""
    seen = []
    for char in text:
        if char not in seen and not is_representable(char):
            seen.append(char)
    return seen


def iter_t61_units(text, filename="<input>"):
    for index, char in enumerate(text):
        unit = _unit_for(ord(char))
        if unit is _FALLBACK_UNIT and char != "?" and reports.is_active():
            reports.warning(
                "unrepresentable-character",
                (
                    Context(filename, text, index),
                    Context(filename, text, index + 1),
                    f"U+{ord(char):04X} has no T.61 form and was replaced with '?'"
                )
            )
        yield unit


def str_t61_length(text, filename="<input>"):
    return sum(len(unit.data) for unit in iter_t61_units(text, filename))


def str_to_t61(text, filename="<input>"):
    try:
        units = list(iter_t61_units(text, filename))
        buffer = bytearray()
        for unit in units:
            if unit.before_last and buffer:
                # The base letter was written by the previous step; T.61 wants
                # the accent in front of it
                buffer[-1:-1] = unit.data
            else:
                buffer += unit.data
    except MemoryError:
        raise OutOfMemory(f"Could not allocate T.61 output for {len(text)} characters") from None
    return bytes(buffer)


def _decode_utf8(data):
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as ex:
        raise InvalidEncoding(ex.start, ex.end, f"malformed UTF-8: {ex.reason}") from None


def utf8_t61_length(data, filename="<input>"):
    return str_t61_length(_decode_utf8(data), filename)


def utf8_to_t61(data, filename="<input>"):
    """Transcode UTF-8 to T.61, replacing anything T.61 can't express with '?'.

    Raises InvalidEncoding only if data isn't well-formed UTF-8.
    """
    return str_to_t61(_decode_utf8(data), filename)
