# T.61 repertoire as defined by RFC 1345 (charmap T.61-8BIT), with the
# non-spacing accents xC1..xCF mapped to the U+03xx combining block rather
# than to the private use area.
#
# Even though '#' and '$' exist in the 7-bit space, T.61 puts them at xA6
# and xA4. Backslash, caret, backquote, braces and tilde are missing
# altogether. xC9 and xC0 are unused.


FALLBACK = 0x3F
SPACE = 0x20

OHM_SIGN = 0x2126
OHM_BYTE = 0xE0

COMBINING_LEAD_MASK = 0xF0
COMBINING_LEAD = 0xC0


T61_TO_UNICODE = (
    0x0000, 0x0001, 0x0002, 0x0003, 0x0004, 0x0005, 0x0006, 0x0007,
    0x0008, 0x0009, 0x000a, 0x000b, 0x000c, 0x000d, 0x000e, 0x000f,
    0x0010, 0x0011, 0x0012, 0x0013, 0x0014, 0x0015, 0x0016, 0x0017,
    0x0018, 0x0019, 0x001a, 0x001b, 0x001c, 0x001d, 0x001e, 0x001f,
    0x0020, 0x0021, 0x0022, 0x0000, 0x0000, 0x0025, 0x0026, 0x0027,
    0x0028, 0x0029, 0x002a, 0x002b, 0x002c, 0x002d, 0x002e, 0x002f,
    0x0030, 0x0031, 0x0032, 0x0033, 0x0034, 0x0035, 0x0036, 0x0037,
    0x0038, 0x0039, 0x003a, 0x003b, 0x003c, 0x003d, 0x003e, 0x003f,
    0x0040, 0x0041, 0x0042, 0x0043, 0x0044, 0x0045, 0x0046, 0x0047,
    0x0048, 0x0049, 0x004a, 0x004b, 0x004c, 0x004d, 0x004e, 0x004f,
    0x0050, 0x0051, 0x0052, 0x0053, 0x0054, 0x0055, 0x0056, 0x0057,
    0x0058, 0x0059, 0x005a, 0x005b, 0x0000, 0x005d, 0x0000, 0x005f,
    0x0000, 0x0061, 0x0062, 0x0063, 0x0064, 0x0065, 0x0066, 0x0067,
    0x0068, 0x0069, 0x006a, 0x006b, 0x006c, 0x006d, 0x006e, 0x006f,
    0x0070, 0x0071, 0x0072, 0x0073, 0x0074, 0x0075, 0x0076, 0x0077,
    0x0078, 0x0079, 0x007a, 0x0000, 0x007c, 0x0000, 0x0000, 0x007f,
    0x0080, 0x0081, 0x0082, 0x0083, 0x0084, 0x0085, 0x0086, 0x0087,
    0x0088, 0x0089, 0x008a, 0x008b, 0x008c, 0x008d, 0x008e, 0x008f,
    0x0090, 0x0091, 0x0092, 0x0093, 0x0094, 0x0095, 0x0096, 0x0097,
    0x0098, 0x0099, 0x009a, 0x009b, 0x009c, 0x009d, 0x009e, 0x009f,
    0x00a0, 0x00a1, 0x00a2, 0x00a3, 0x0024, 0x00a5, 0x0023, 0x00a7,
    0x00a4, 0x0000, 0x0000, 0x00ab, 0x0000, 0x0000, 0x0000, 0x0000,
    0x00b0, 0x00b1, 0x00b2, 0x00b3, 0x00d7, 0x00b5, 0x00b6, 0x00b7,
    0x00f7, 0x0000, 0x0000, 0x00bb, 0x00bc, 0x00bd, 0x00be, 0x00bf,
    0x0000, 0x0300, 0x0301, 0x0302, 0x0303, 0x0304, 0x0306, 0x0307,
    0x0308, 0x0000, 0x030a, 0x0327, 0x0332, 0x030b, 0x0328, 0x030c,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x2126, 0x00c6, 0x00d0, 0x00aa, 0x0126, 0x0000, 0x0132, 0x013f,
    0x0141, 0x00d8, 0x0152, 0x00ba, 0x00de, 0x0166, 0x014a, 0x0149,
    0x0138, 0x00e6, 0x0111, 0x00f0, 0x0127, 0x0131, 0x0133, 0x0140,
    0x0142, 0x00f8, 0x0153, 0x00df, 0x00fe, 0x0167, 0x014b, 0x0000,
)


# Spacing forms used when xC1..xCF stands alone or before a space
SPACING_ACCENTS = (
    0x0000, 0x0060, 0x00b4, 0x005e, 0x007e, 0x00af, 0x02d8, 0x02d9,
    0x00a8, 0x0000, 0x02da, 0x00b8, 0x0000, 0x02dd, 0x02db, 0x02c7,
)

ACCENT_NAMES = (
    None, "grave", "acute", "circumflex", "tilde", "macron", "breve", "dot above",
    "diaeresis", None, "ring above", "cedilla", "low line", "double acute", "ogonek", "caron",
)


# Composite tables are indexed by the following byte: its top three bits select
# a group of 32 (2 is upper case, 3 is lower case, 7 holds Æ/æ at xE1/xF1), the
# low five bits select the letter. Letters noted in parentheses aren't defined
# by T.61 but have a precomposed Unicode form anyway.

def _groups(upper=None, lower=None, ae=None):
    return (None, None, upper, lower, None, None, None, ae)


# AEIOU (NWY)
_GRAVE = _groups(
    upper=(
        0, 0x00c0, 0, 0, 0, 0x00c8, 0, 0, 0, 0x00cc, 0, 0, 0, 0, 0x01f8, 0x00d2,
        0, 0, 0, 0, 0, 0x00d9, 0, 0x1e80, 0, 0x1ef2, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e0, 0, 0, 0, 0x00e8, 0, 0, 0, 0x00ec, 0, 0, 0, 0, 0x01f9, 0x00f2,
        0, 0, 0, 0, 0, 0x00f9, 0, 0x1e81, 0, 0x1ef3, 0, 0, 0, 0, 0, 0,
    ),
)

# AEIOUYCLNRSZ (GKMPW)
_ACUTE = _groups(
    upper=(
        0, 0x00c1, 0, 0x0106, 0, 0x00c9, 0, 0x01f4,
        0, 0x00cd, 0, 0x1e30, 0x0139, 0x1e3e, 0x0143, 0x00d3,
        0x1e54, 0, 0x0154, 0x015a, 0, 0x00da, 0, 0x1e82,
        0, 0x00dd, 0x0179, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e1, 0, 0x0107, 0, 0x00e9, 0, 0x01f5,
        0, 0x00ed, 0, 0x1e31, 0x013a, 0x1e3f, 0x0144, 0x00f3,
        0x1e55, 0, 0x0155, 0x015b, 0, 0x00fa, 0, 0x1e83,
        0, 0x00fd, 0x017a, 0, 0, 0, 0, 0,
    ),
    ae=(
        0, 0x01fc, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0x01fd, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# AEIOUYCGHJSW (Z)
_CIRCUMFLEX = _groups(
    upper=(
        0, 0x00c2, 0, 0x0108, 0, 0x00ca, 0, 0x011c,
        0x0124, 0x00ce, 0x0134, 0, 0, 0, 0, 0x00d4,
        0, 0, 0, 0x015c, 0, 0x00db, 0, 0x0174,
        0, 0x0176, 0x1e90, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e2, 0, 0x0109, 0, 0x00ea, 0, 0x011d,
        0x0125, 0x00ee, 0x0135, 0, 0, 0, 0, 0x00f4,
        0, 0, 0, 0x015d, 0, 0x00fb, 0, 0x0175,
        0, 0x0177, 0x1e91, 0, 0, 0, 0, 0,
    ),
)

# AIOUN (EVY)
_TILDE = _groups(
    upper=(
        0, 0x00c3, 0, 0, 0, 0x1ebc, 0, 0, 0, 0x0128, 0, 0, 0, 0, 0x00d1, 0x00d5,
        0, 0, 0, 0, 0, 0x0168, 0x1e7c, 0, 0, 0x1ef8, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e3, 0, 0, 0, 0x1ebd, 0, 0, 0, 0x0129, 0, 0, 0, 0, 0x00f1, 0x00f5,
        0, 0, 0, 0, 0, 0x0169, 0x1e7d, 0, 0, 0x1ef9, 0, 0, 0, 0, 0, 0,
    ),
)

# AEIOU (YG)
_MACRON = _groups(
    upper=(
        0, 0x0100, 0, 0, 0, 0x0112, 0, 0x1e20, 0, 0x012a, 0, 0, 0, 0, 0, 0x014c,
        0, 0, 0, 0, 0, 0x016a, 0, 0, 0, 0x0232, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x0101, 0, 0, 0, 0x0113, 0, 0x1e21, 0, 0x012b, 0, 0, 0, 0, 0, 0x014d,
        0, 0, 0, 0, 0, 0x016b, 0, 0, 0, 0x0233, 0, 0, 0, 0, 0, 0,
    ),
    ae=(
        0, 0x01e2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0x01e3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# AUG (EIO)
_BREVE = _groups(
    upper=(
        0, 0x0102, 0, 0, 0, 0x0114, 0, 0x011e, 0, 0x012c, 0, 0, 0, 0, 0, 0x014e,
        0, 0, 0, 0, 0, 0x016c, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x0103, 0, 0, 0, 0x0115, 0, 0x011f, 0, 0x012d, 0, 0, 0, 0, 0, 0x014f,
        0, 0, 0, 0, 0, 0x016d, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# CEGIZ (AOBDFHMNPRSTWXY)
_DOT_ABOVE = _groups(
    upper=(
        0, 0x0226, 0x1e02, 0x010a, 0x1e0a, 0x0116, 0x1e1e, 0x0120,
        0x1e22, 0x0130, 0, 0, 0, 0x1e40, 0x1e44, 0x022e,
        0x1e56, 0, 0x1e58, 0x1e60, 0x1e6a, 0, 0, 0x1e86,
        0x1e8a, 0x1e8e, 0x017b, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x0227, 0x1e03, 0x010b, 0x1e0b, 0x0117, 0x1e1f, 0x0121,
        0x1e23, 0, 0, 0, 0, 0x1e41, 0x1e45, 0x022f,
        0x1e57, 0, 0x1e59, 0x1e61, 0x1e6b, 0, 0, 0x1e87,
        0x1e8b, 0x1e8f, 0x017c, 0, 0, 0, 0, 0,
    ),
)

# AEIOUY (HWXt)
_DIAERESIS = _groups(
    upper=(
        0, 0x00c4, 0, 0, 0, 0x00cb, 0, 0, 0x1e26, 0x00cf, 0, 0, 0, 0, 0, 0x00d6,
        0, 0, 0, 0, 0, 0x00dc, 0, 0x1e84, 0x1e8c, 0x0178, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e4, 0, 0, 0, 0x00eb, 0, 0, 0x1e27, 0x00ef, 0, 0, 0, 0, 0, 0x00f6,
        0, 0, 0, 0, 0x1e97, 0x00fc, 0, 0x1e85, 0x1e8d, 0x00ff, 0, 0, 0, 0, 0, 0,
    ),
)

# AU (wy)
_RING_ABOVE = _groups(
    upper=(
        0, 0x00c5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 0x016e, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x00e5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 0x016f, 0, 0x1e98, 0, 0x1e99, 0, 0, 0, 0, 0, 0,
    ),
)

# CGKLNRST (EDH)
_CEDILLA = _groups(
    upper=(
        0, 0, 0, 0x00c7, 0x1e10, 0x0228, 0, 0x0122,
        0x1e28, 0, 0, 0x0136, 0x013b, 0, 0x0145, 0,
        0, 0, 0x0156, 0x015e, 0x0162, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0, 0, 0x00e7, 0x1e11, 0x0229, 0, 0x0123,
        0x1e29, 0, 0, 0x0137, 0x013c, 0, 0x0146, 0,
        0, 0, 0x0157, 0x015f, 0x0163, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# OU
_DOUBLE_ACUTE = _groups(
    upper=(
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x0150,
        0, 0, 0, 0, 0, 0x0170, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x0151,
        0, 0, 0, 0, 0, 0x0171, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# AEIU (O)
_OGONEK = _groups(
    upper=(
        0, 0x0104, 0, 0, 0, 0x0118, 0, 0, 0, 0x012e, 0, 0, 0, 0, 0, 0x01ea,
        0, 0, 0, 0, 0, 0x0172, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x0105, 0, 0, 0, 0x0119, 0, 0, 0, 0x012f, 0, 0, 0, 0, 0, 0x01eb,
        0, 0, 0, 0, 0, 0x0173, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ),
)

# CDELNRSTZ (AIOUGKjH)
_CARON = _groups(
    upper=(
        0, 0x01cd, 0, 0x010c, 0x010e, 0x011a, 0, 0x01e6,
        0x021e, 0x01cf, 0, 0x01e8, 0x013d, 0, 0x0147, 0x01d1,
        0, 0, 0x0158, 0x0160, 0x0164, 0x01d3, 0, 0,
        0, 0, 0x017d, 0, 0, 0, 0, 0,
    ),
    lower=(
        0, 0x01ce, 0, 0x010d, 0x010f, 0x011b, 0, 0x01e7,
        0x021f, 0x01d0, 0x01f0, 0x01e9, 0x013e, 0, 0x0148, 0x01d2,
        0, 0, 0x0159, 0x0161, 0x0165, 0x01d4, 0, 0,
        0, 0, 0x017e, 0, 0, 0, 0, 0,
    ),
)

COMPOSITES = (
    None, _GRAVE, _ACUTE, _CIRCUMFLEX, _TILDE, _MACRON, _BREVE, _DOT_ABOVE,
    _DIAERESIS, None, _RING_ABOVE, _CEDILLA, None, _DOUBLE_ACUTE, _OGONEK, _CARON,
)


# Reverse tables cover 64 code points each. A value above 0xff packs an accent
# byte (high) and a base byte (low) in T.61 order. Caret, backquote and tilde
# have no T.61 form of their own, so they map to their accent followed by a space.

_U0000 = (
    0x0000, 0x0001, 0x0002, 0x0003, 0x0004, 0x0005, 0x0006, 0x0007,
    0x0008, 0x0009, 0x000a, 0x000b, 0x000c, 0x000d, 0x000e, 0x000f,
    0x0010, 0x0011, 0x0012, 0x0013, 0x0014, 0x0015, 0x0016, 0x0017,
    0x0018, 0x0019, 0x001a, 0x001b, 0x001c, 0x001d, 0x001e, 0x001f,
    0x0020, 0x0021, 0x0022, 0x00a6, 0x00a4, 0x0025, 0x0026, 0x0027,
    0x0028, 0x0029, 0x002a, 0x002b, 0x002c, 0x002d, 0x002e, 0x002f,
    0x0030, 0x0031, 0x0032, 0x0033, 0x0034, 0x0035, 0x0036, 0x0037,
    0x0038, 0x0039, 0x003a, 0x003b, 0x003c, 0x003d, 0x003e, 0x003f,
)

_U0040 = (
    0x0040, 0x0041, 0x0042, 0x0043, 0x0044, 0x0045, 0x0046, 0x0047,
    0x0048, 0x0049, 0x004a, 0x004b, 0x004c, 0x004d, 0x004e, 0x004f,
    0x0050, 0x0051, 0x0052, 0x0053, 0x0054, 0x0055, 0x0056, 0x0057,
    0x0058, 0x0059, 0x005a, 0x005b, 0x003f, 0x005d, 0xc320, 0x005f,
    0xc120, 0x0061, 0x0062, 0x0063, 0x0064, 0x0065, 0x0066, 0x0067,
    0x0068, 0x0069, 0x006a, 0x006b, 0x006c, 0x006d, 0x006e, 0x006f,
    0x0070, 0x0071, 0x0072, 0x0073, 0x0074, 0x0075, 0x0076, 0x0077,
    0x0078, 0x0079, 0x007a, 0x003f, 0x007c, 0x003f, 0xc420, 0x007f,
)

_U0080 = (
    0x0080, 0x0081, 0x0082, 0x0083, 0x0084, 0x0085, 0x0086, 0x0087,
    0x0088, 0x0089, 0x008a, 0x008b, 0x008c, 0x008d, 0x008e, 0x008f,
    0x0090, 0x0091, 0x0092, 0x0093, 0x0094, 0x0095, 0x0096, 0x0097,
    0x0098, 0x0099, 0x009a, 0x009b, 0x009c, 0x009d, 0x009e, 0x009f,
    0x00a0, 0x00a1, 0x00a2, 0x00a3, 0x00a8, 0x00a5, 0x003f, 0x00a7,
    0xc820, 0x003f, 0x00e3, 0x00ab, 0x003f, 0x003f, 0x003f, 0xc520,
    0x00b0, 0x00b1, 0x00b2, 0x00b3, 0xc220, 0x00b5, 0x00b6, 0x00b7,
    0xcb20, 0x003f, 0x00eb, 0x00bb, 0x00bc, 0x00bd, 0x00be, 0x00bf,
)

_U00C0 = (
    0xc141, 0xc241, 0xc341, 0xc441, 0xc841, 0xca41, 0x00e1, 0xcb43,
    0xc145, 0xc245, 0xc345, 0xc845, 0xc149, 0xc249, 0xc349, 0xc849,
    0x00e2, 0xc44e, 0xc14f, 0xc24f, 0xc34f, 0xc44f, 0xc84f, 0x00b4,
    0x00e9, 0xc155, 0xc255, 0xc355, 0xc855, 0xc259, 0x00ec, 0x00fb,
    0xc161, 0xc261, 0xc361, 0xc461, 0xc861, 0xca61, 0x00f1, 0xcb63,
    0xc165, 0xc265, 0xc365, 0xc865, 0xc169, 0xc269, 0xc369, 0xc869,
    0x00f3, 0xc46e, 0xc16f, 0xc26f, 0xc36f, 0xc46f, 0xc86f, 0x00b8,
    0x00f9, 0xc175, 0xc275, 0xc375, 0xc875, 0xc279, 0x00fc, 0xc879,
)

# U+0114/0115, U+012C/012D (breve E and I) aren't defined by T.61
_U0100 = (
    0xc541, 0xc561, 0xc641, 0xc661, 0xce41, 0xce61, 0xc243, 0xc263,
    0xc343, 0xc363, 0xc743, 0xc763, 0xcf43, 0xcf63, 0xcf44, 0xcf64,
    0x003f, 0x00f2, 0xc545, 0xc565, 0xc645, 0xc665, 0xc745, 0xc765,
    0xce45, 0xce65, 0xcf45, 0xcf65, 0xc347, 0xc367, 0xc647, 0xc667,
    0xc747, 0xc767, 0xcb47, 0xcb67, 0xc348, 0xc368, 0x00e4, 0x00f4,
    0xc449, 0xc469, 0xc549, 0xc569, 0xc649, 0xc669, 0xce49, 0xce69,
    0xc749, 0x00f5, 0x00e6, 0x00f6, 0xc34a, 0xc36a, 0xcb4b, 0xcb6b,
    0x00f0, 0xc24c, 0xc26c, 0xcb4c, 0xcb6c, 0xcf4c, 0xcf6c, 0x00e7,
)

# U+014E/014F (breve O) aren't defined by T.61
_U0140 = (
    0x00f7, 0x00e8, 0x00f8, 0xc24e, 0xc26e, 0xcb4e, 0xcb6e, 0xcf4e,
    0xcf6e, 0x00ef, 0x00ee, 0x00fe, 0xc54f, 0xc56f, 0xc64f, 0xc66f,
    0xcd4f, 0xcd6f, 0x00ea, 0x00fa, 0xc252, 0xc272, 0xcb52, 0xcb72,
    0xcf52, 0xcf72, 0xc253, 0xc273, 0xc353, 0xc373, 0xcb53, 0xcb73,
    0xcf53, 0xcf73, 0xcb54, 0xcb74, 0xcf54, 0xcf74, 0x00ed, 0x00fd,
    0xc455, 0xc475, 0xc555, 0xc575, 0xc655, 0xc675, 0xca55, 0xca75,
    0xcd55, 0xcd75, 0xce55, 0xce75, 0xc357, 0xc377, 0xc359, 0xc379,
    0xc859, 0xc25a, 0xc27a, 0xc75a, 0xc77a, 0xcf5a, 0xcf7a, 0x003f,
)

# Nothing from here on is defined by T.61 itself
_U01C0 = (
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xcf41, 0xcf61, 0xcf49,
    0xcf69, 0xcf4f, 0xcf6f, 0xcf55, 0xcf75, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0xc5e1, 0xc5f1, 0x003f, 0x003f, 0xcf47, 0xcf67,
    0xcf4b, 0xcf6b, 0xce4f, 0xce6f, 0x003f, 0x003f, 0x003f, 0x003f,
    0xcf6a, 0x003f, 0x003f, 0x003f, 0xc247, 0xc267, 0x003f, 0x003f,
    0xc14e, 0xc16e, 0x003f, 0x003f, 0xc2e1, 0xc2f1, 0x003f, 0x003f,
)

_U0200 = (
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xcf48, 0xcf68,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xc741, 0xc761,
    0xcb45, 0xcb65, 0x003f, 0x003f, 0x003f, 0x003f, 0xc74f, 0xc76f,
    0x003f, 0x003f, 0xc559, 0xc579, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
)

# Spacing modifier letters: caron, breve, dot above, ring above, ogonek and
# double acute have no T.61 form other than their accent before a space
_U02C0 = (
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xcf20,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0xc620, 0xc720, 0xca20, 0xce20, 0x003f, 0xcd20, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
)

# Combining marks. Unicode puts them after the base letter, T.61 before it,
# so the transcoder moves these in front of the previously written byte.
_U0300 = (
    0x00c1, 0x00c2, 0x00c3, 0x00c4, 0x00c5, 0x003f, 0x00c6, 0x00c7,
    0x00c8, 0x003f, 0x00ca, 0x00cd, 0x00cf, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x00cb,
    0x00ce, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x00cc, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
)

_U1E00 = (
    0x003f, 0x003f, 0xc742, 0xc762, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0xc744, 0xc764, 0x003f, 0x003f, 0x003f, 0x003f,
    0xcb44, 0xcb64, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xc746, 0xc766,
    0xc547, 0xc567, 0xc748, 0xc768, 0x003f, 0x003f, 0xc848, 0xc868,
    0xcb48, 0xcb68, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0xc24b, 0xc26b, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xc24d, 0xc26d,
)

_U1E40 = (
    0xc74d, 0xc76d, 0x003f, 0x003f, 0xc74e, 0xc76e, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0xc250, 0xc270, 0xc750, 0xc770,
    0xc752, 0xc772, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0xc753, 0xc773, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0xc754, 0xc774, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0xc456, 0xc476, 0x003f, 0x003f,
)

_U1E80 = (
    0xc157, 0xc177, 0xc257, 0xc277, 0xc857, 0xc877, 0xc757, 0xc777,
    0x003f, 0x003f, 0xc758, 0xc778, 0xc858, 0xc878, 0xc759, 0xc779,
    0xc35a, 0xc37a, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0xc874,
    0xca77, 0xca79, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0xc445, 0xc465, 0x003f, 0x003f,
)

_U1EC0 = (
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
    0x003f, 0x003f, 0xc159, 0xc179, 0x003f, 0x003f, 0x003f, 0x003f,
    0xc459, 0xc479, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f, 0x003f,
)

BLOCKS_0000_03FF = (
    _U0000, _U0040, _U0080, _U00C0,
    _U0100, _U0140, None, _U01C0,
    _U0200, None, None, _U02C0,
    _U0300, None, None, None,
)

BLOCKS_1E00_1EFF = (_U1E00, _U1E40, _U1E80, _U1EC0)


def is_combining_lead(byte):
    return byte & COMBINING_LEAD_MASK == COMBINING_LEAD


def accent_class(byte):
    return byte & 0x0F


def composite(accent, following):
    groups = COMPOSITES[accent]
    if groups is None:
        return 0
    group = groups[following >> 5]
    if group is None:
        return 0
    return group[following & 0x1F]


def reverse_entry(code_point):
    """Look up the packed T.61 form of a code point.

    Returns None when the code point isn't covered by any table, otherwise
    an int which is either a single byte or (accent << 8) | base.
    """
    if code_point < 0x400:
        table = BLOCKS_0000_03FF[code_point >> 6]
    elif code_point >> 8 == 0x1E:
        table = BLOCKS_1E00_1EFF[(code_point >> 6) & 3]
    else:
        return None
    if table is None:
        return None
    return table[code_point & 0x3F]
