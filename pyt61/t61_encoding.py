import codecs

from .reports import InvalidEncoding
from .transcode import str_to_t61, t61_to_str


NAMES = ("t61", "t.61", "t61_8bit", "teletex")


def encode(string: str, errors: str="strict"):
    # Encoding is lossy by design: '?' stands in for anything T.61 lacks, so
    # "strict" and "replace" behave the same
    if errors not in ("strict", "replace"):
        raise ValueError(f"t61 encoding doesn't support the {errors!r} error handler")
    return str_to_t61(string), len(string)


def decode(data: bytes, errors: str="strict"):
    if errors not in ("strict", "replace", "ignore"):
        raise ValueError(f"t61 decoding doesn't support the {errors!r} error handler")
    data = bytes(data)
    try:
        return t61_to_str(data, errors=errors), len(data)
    except InvalidEncoding as ex:
        raise UnicodeDecodeError("t61", data, ex.start, ex.end, ex.reason) from None


def _search(name: str):
    if name.replace("-", "_") in NAMES:
        return codecs.CodecInfo(encode, decode, name="t61")
    else:
        return None


def register():
    codecs.register(_search)


register()
