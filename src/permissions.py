"""Read / write / execute permissions for the user, group and others of a mode.

One table maps every ``(scope, permission)`` pair to its bit, and a single
routine, ``get_permissions``, collects a ``PermissionSet`` for whichever
scope checker it is handed.
"""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Callable, Dict, Final, FrozenSet, Iterator, Tuple

from file_type_masks import (
    S_IRGRP, S_IROTH, S_IRUSR,
    S_IWGRP, S_IWOTH, S_IWUSR,
    S_IXGRP, S_IXOTH, S_IXUSR,
)


@total_ordering
class Permission(Enum):
    """A single permission kind.  Ordered READ < WRITE < EXECUTE."""

    READ = "r"
    WRITE = "w"
    EXECUTE = "x"

    @property
    def char(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]


_ORDER: Final[Dict[Permission, int]] = {p: i for i, p in enumerate(Permission)}

ALL_PERMISSIONS: Final[Tuple[Permission, ...]] = tuple(Permission)

PermissionSet = FrozenSet[Permission]

PermissionChecker = Callable[[Permission, int], bool]
"""Answers "does ``mode`` grant ``permission``?" for one scope."""


SCOPE_LABELS: Final[Tuple[str, ...]] = ("user", "group", "others")

_PERMISSION_MASKS: Final[Dict[Tuple[str, Permission], int]] = {
    ("user", Permission.READ): S_IRUSR,
    ("user", Permission.WRITE): S_IWUSR,
    ("user", Permission.EXECUTE): S_IXUSR,
    ("group", Permission.READ): S_IRGRP,
    ("group", Permission.WRITE): S_IWGRP,
    ("group", Permission.EXECUTE): S_IXGRP,
    ("others", Permission.READ): S_IROTH,
    ("others", Permission.WRITE): S_IWOTH,
    ("others", Permission.EXECUTE): S_IXOTH,
}

def has_user_permission(permission: Permission, mode: int) -> bool:
    return (mode & _PERMISSION_MASKS[("user", permission)]) != 0


def has_group_permission(permission: Permission, mode: int) -> bool:
    return (mode & _PERMISSION_MASKS[("group", permission)]) != 0


def has_others_permission(permission: Permission, mode: int) -> bool:
    return (mode & _PERMISSION_MASKS[("others", permission)]) != 0


def get_permissions(checker: PermissionChecker, mode: int) -> PermissionSet:
    """Collects the permissions ``checker`` finds in ``mode``.

    Args:
        checker: One of ``has_user_permission``, ``has_group_permission`` or
            ``has_others_permission`` (or anything with the same shape).
        mode: Raw ``st_mode`` value.

    Returns:
        A new ``frozenset``; ``sorted()`` of it is in READ, WRITE, EXECUTE order.
    """
    return frozenset(p for p in ALL_PERMISSIONS if checker(p, mode))


@dataclass(frozen=True)
class Scope:
    """Permission sets for the user, group and others of one mode."""

    user: PermissionSet
    group: PermissionSet
    others: PermissionSet

    def items(self) -> Iterator[Tuple[str, PermissionSet]]:
        """Yields ``(label, permission set)`` for user, group then others."""
        for label in SCOPE_LABELS:
            yield label, getattr(self, label)

    def bits(self) -> int:
        """The nine permission bits this scope stands for."""
        result = 0
        for label, permissions in self.items():
            for permission in permissions:
                result |= _PERMISSION_MASKS[(label, permission)]
        return result


def scope(mode: int) -> Scope:
    """Resolves the user, group and others permissions of ``mode``."""
    return Scope(
        user=get_permissions(has_user_permission, mode),
        group=get_permissions(has_group_permission, mode),
        others=get_permissions(has_others_permission, mode),
    )
