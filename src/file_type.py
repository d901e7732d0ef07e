"""Classifies the file type and special bits held in a raw ``st_mode``."""
from enum import Enum
from typing import Final, Tuple

from file_type_masks import (
    S_IFBLK, S_IFCHR, S_IFDIR, S_IFIFO, S_IFLNK, S_IFMT, S_IFREG, S_IFSOCK,
    S_ISGID, S_ISUID, S_ISVTX,
)


class FileType(Enum):
    """What kind of file a mode describes.

    ``OTHER`` covers every pattern that is not a known POSIX file type,
    including the BSD whiteout type (``S_IFWHT``).
    """

    DIRECTORY = "d"
    FILE = "-"
    BLOCK_DEVICE = "b"
    CHARACTER_DEVICE = "c"
    SYMBOLIC_LINK = "l"
    NAMED_PIPE = "p"
    SOCKET = "s"
    OTHER = "?"

    @property
    def char(self) -> str:
        """The character `ls -l` shows in the first column."""
        return self.value

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


_TYPE_MASKS: Final[Tuple[Tuple[FileType, int], ...]] = (
    (FileType.DIRECTORY, S_IFDIR),
    (FileType.FILE, S_IFREG),
    (FileType.BLOCK_DEVICE, S_IFBLK),
    (FileType.CHARACTER_DEVICE, S_IFCHR),
    (FileType.SYMBOLIC_LINK, S_IFLNK),
    (FileType.NAMED_PIPE, S_IFIFO),
    (FileType.SOCKET, S_IFSOCK),
)
"""Checked in this order; the first match wins."""


def get_file_type(mode: int) -> FileType:
    """Returns the ``FileType`` of ``mode``, ``FileType.OTHER`` when unknown."""
    type_bits = mode & S_IFMT
    for file_type, mask in _TYPE_MASKS:
        if type_bits == mask:
            return file_type
    return FileType.OTHER


def get_set_uid(mode: int) -> bool:
    return (mode & S_ISUID) != 0


def get_set_gid(mode: int) -> bool:
    return (mode & S_ISGID) != 0


def get_sticky_bit(mode: int) -> bool:
    return (mode & S_ISVTX) != 0
