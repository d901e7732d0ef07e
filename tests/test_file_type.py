import pytest

from file_type import FileType, get_file_type, get_set_gid, get_set_uid, get_sticky_bit
from file_type_masks import S_IFMT, S_IFWHT


@pytest.mark.parametrize("raw, expected", [
    (0o040755, FileType.DIRECTORY),
    (0o100644, FileType.FILE),
    (0o060660, FileType.BLOCK_DEVICE),
    (0o020620, FileType.CHARACTER_DEVICE),
    (0o120777, FileType.SYMBOLIC_LINK),
    (0o010644, FileType.NAMED_PIPE),
    (0o140755, FileType.SOCKET),
    (0, FileType.OTHER),
    (0o7777, FileType.OTHER),
    (S_IFWHT, FileType.OTHER),
    (0o030000, FileType.OTHER),
])
def test_get_file_type(raw: int, expected: FileType):
    assert get_file_type(raw) is expected


def test_file_type_ignores_permission_bits():
    for perms in (0, 0o777, 0o7777, 0o4755):
        assert get_file_type(0o040000 | perms) is FileType.DIRECTORY


def test_every_type_pattern_has_one_file_type():
    seen = {}
    for type_bits in range(0, S_IFMT + 1, 0o010000):
        file_type = get_file_type(type_bits)
        assert isinstance(file_type, FileType)
        assert get_file_type(type_bits) is file_type
        seen.setdefault(file_type, []).append(type_bits)
    # Seven known types map to exactly one pattern each, the rest are OTHER.
    for file_type, patterns in seen.items():
        if file_type is not FileType.OTHER:
            assert len(patterns) == 1
    assert len(seen) == len(FileType)


def test_negative_mode_is_other():
    # -1 has every bit set, so the type bits read as whiteout.
    assert get_file_type(-1) is FileType.OTHER


@pytest.mark.parametrize("raw", [0, 1, 0o777, 0o1000, 0o2000, 0o4000, 0o7777, 0o104755, -1, 2 ** 40 + 0o2000])
def test_special_bits(raw: int):
    assert get_set_uid(raw) == ((raw & 2048) != 0)
    assert get_set_gid(raw) == ((raw & 1024) != 0)
    assert get_sticky_bit(raw) == ((raw & 512) != 0)


def test_file_type_chars():
    assert "".join(t.char for t in FileType) == "d-bclps?"
    assert str(FileType.CHARACTER_DEVICE) == "character device"
