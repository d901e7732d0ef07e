"""File constants for `stat`, named after the C macros of the same (similar) name."""

from typing import Final


# File types (compare against ``mode & S_IFMT``)
S_IFIFO  : Final = 0o00010000   # pipe
S_IFCHR  : Final = 0o00020000   # character device
S_IFDIR  : Final = 0o00040000   # directory
S_IFBLK  : Final = 0o00060000   # block device
S_IFREG  : Final = 0o00100000   # regular

S_IFLNK  : Final = 0o00120000   # sym-link
S_IFSOCK : Final = 0o00140000   # Socket
S_IFWHT  : Final = 0o00160000   # BSD whiteout, not classified (see FileType.OTHER)

S_IFMT   : Final = 0o00170000   # file type mask

# Special bits
S_ISUID  : Final = 0o00004000   # set user id on execution
S_ISGID  : Final = 0o00002000   # set group id on execution
S_ISVTX  : Final = 0o00001000   # sticky

# Permission bits
S_IRUSR  : Final = 0o00000400
S_IWUSR  : Final = 0o00000200
S_IXUSR  : Final = 0o00000100

S_IRGRP  : Final = 0o00000040
S_IWGRP  : Final = 0o00000020
S_IXGRP  : Final = 0o00000010

S_IROTH  : Final = 0o00000004
S_IWOTH  : Final = 0o00000002
S_IXOTH  : Final = 0o00000001

S_IMODE_MASK : Final = 0o00007777   # special bits + permission bits, what `chmod` takes
