import pytest

from pyt61 import tables


def test_shapes():
    assert len(tables.T61_TO_UNICODE) == 256
    assert len(tables.SPACING_ACCENTS) == 16
    assert len(tables.ACCENT_NAMES) == 16
    assert len(tables.COMPOSITES) == 16
    assert len(tables.BLOCKS_0000_03FF) == 16
    assert len(tables.BLOCKS_1E00_1EFF) == 4

    for groups in tables.COMPOSITES:
        if groups is not None:
            assert len(groups) == 8
            for group in groups:
                assert group is None or len(group) == 32

    for table in tables.BLOCKS_0000_03FF + tables.BLOCKS_1E00_1EFF:
        assert table is None or len(table) == 64


def test_sentinels():
    assert tables.T61_TO_UNICODE[0] == 0
    assert tables.SPACING_ACCENTS[0] == 0
    assert tables.COMPOSITES[0] is None
    for groups in tables.COMPOSITES:
        if groups is not None:
            for group in groups:
                if group is not None:
                    assert group[0] == 0


def test_undefined_bytes():
    undefined = {byte for byte in range(256) if not tables.T61_TO_UNICODE[byte]}
    assert undefined == {
        0x00, 0x23, 0x24, 0x5c, 0x5e, 0x60, 0x7b, 0x7d, 0x7e,
        0xa9, 0xaa, 0xac, 0xad, 0xae, 0xaf, 0xb9, 0xba,
        0xc0, 0xc9, *range(0xd0, 0xe0), 0xe5, 0xff
    }


def test_combining_leads():
    leads = {byte for byte in range(256) if tables.is_combining_lead(byte) and tables.T61_TO_UNICODE[byte]}
    assert leads == set(range(0xc1, 0xd0)) - {0xc9}
    for byte in leads:
        assert 0x300 <= tables.T61_TO_UNICODE[byte] < 0x340


def test_accent_classes_without_spacing_form():
    assert [accent for accent in range(16) if not tables.SPACING_ACCENTS[accent]] == [0, 9, 12]
    assert tables.ACCENT_NAMES[12] == "low line"


def test_composite_groups():
    # Only upper case, lower case and the Æ/æ group are ever populated
    for groups in tables.COMPOSITES:
        if groups is not None:
            assert [i for i, group in enumerate(groups) if group is not None] in ([2, 3], [2, 3, 7])
    assert tables.COMPOSITES[2][7] is not None
    assert tables.COMPOSITES[5][7] is not None


@pytest.mark.parametrize(
    "accent, following, code_point",
    [
        (1, ord("A"), 0xc0),
        (1, ord("a"), 0xe0),
        (1, ord("B"), 0),
        (2, 0xe1, 0x1fc),
        (2, 0xf1, 0x1fd),
        (5, 0xe1, 0x1e2),
        (7, ord("i"), 0),
        (7, ord("I"), 0x130),
        (8, ord("t"), 0x1e97),
        (10, ord("w"), 0x1e98),
        (12, ord("A"), 0),
        (15, ord("j"), 0x1f0),
        (3, 0x20, 0),
    ]
)
def test_composite(accent, following, code_point):
    assert tables.composite(accent, following) == code_point


@pytest.mark.parametrize(
    "code_point, entry",
    [
        (ord("A"), 0x41),
        (ord("#"), 0xa6),
        (ord("$"), 0xa4),
        (ord("\\"), 0x3f),
        (ord("^"), 0xc320),
        (0xc0, 0xc141),
        (0xc6, 0xe1),
        (0x180, None),
        (0x2c7, 0xcf20),
        (0x301, 0xc2),
        (0x3a9, None),
        (0x1e81, 0xc177),
        (0x1ef2, 0xc159),
        (0x2126, None),
        (0x20ac, None),
    ]
)
def test_reverse_entry(code_point, entry):
    assert tables.reverse_entry(code_point) == entry


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        tables.T61_TO_UNICODE[0x41] = 0x42
