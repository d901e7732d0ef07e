"""Assembles a decoded ``Mode`` from a raw ``st_mode`` and renders it back
as octal (``"0754"``) or symbolic (``"-rwxr-xr--"``) text.
"""
from dataclasses import dataclass
import logging
from typing import Callable, Dict, Final, Generator, List, Tuple

from cachetools.func import lru_cache

from file_type import FileType, get_file_type, get_set_gid, get_set_uid, get_sticky_bit
from file_type_masks import S_IMODE_MASK
from permissions import ALL_PERMISSIONS, PermissionSet, Scope, scope


LOGGER: Final = logging.getLogger(__name__)

OCTAL_WIDTH: Final = 4
"""Digits in a `chmod` style octal string (special bits + three scopes)."""

_WORD_MASK: Final = 0xFFFFFFFF


@dataclass(frozen=True)
class Mode:
    """Decoded view of one raw mode value.

    Every field but ``raw`` is derived from ``raw``, so two ``Mode``s with the
    same ``raw`` compare equal.
    """

    file_type: FileType
    set_uid: bool
    set_gid: bool
    sticky_bit: bool
    scope: Scope
    raw: int

    def items_formatted(self) -> Generator[Tuple[str, str], None, None]:
        """Returns key/value pairs, with the value formatted for human
        consumption.
        """
        yield "mode", to_symbolic_string(self.raw)
        yield "octal", to_octal_string(self.raw)
        yield "file_type", str(self.file_type)
        yield "set_uid", _format_flag(self.set_uid)
        yield "set_gid", _format_flag(self.set_gid)
        yield "sticky_bit", _format_flag(self.sticky_bit)
        for label, permissions in self.scope.items():
            yield label, format_permissions(permissions)
        yield "raw", f"{self.raw} ({to_full_octal_string(self.raw)})"

    def __str__(self) -> str:
        """YAML-like rendering, one "key: value" per line.

        Iterate ``items_formatted()`` directly for more control over layout.
        """
        lines: List[str] = []
        for key, value in self.items_formatted():
            lines.append(f"{key}: {value}")
        return "\n".join(lines)


@lru_cache(maxsize=1024, typed=True)
def mode(raw: int) -> Mode:
    """Decodes ``raw`` into a ``Mode``.  Never fails, whatever the integer."""
    LOGGER.debug("decoding mode %#o", raw)
    return Mode(
        file_type=get_file_type(raw),
        set_uid=get_set_uid(raw),
        set_gid=get_set_gid(raw),
        sticky_bit=get_sticky_bit(raw),
        scope=scope(raw),
        raw=raw,
    )


# Octal rendering

def to_octal_string(raw: int) -> str:
    """Renders the `chmod` part of ``raw`` as exactly four octal digits.

    Only the special bits and the nine permission bits are rendered; the file
    type bits above them are left out, so ``0o100754`` gives ``"0754"``.  Use
    ``to_full_octal_string`` to keep them.
    """
    return format(raw & S_IMODE_MASK, f"0{OCTAL_WIDTH}o")


def to_octal_string_from_mode(value: Mode) -> str:
    return to_octal_string(value.raw)


def to_full_octal_string(raw: int) -> str:
    """Renders all of ``raw`` in octal, at least four digits, widening as needed.

    Negative numbers are taken as their 32 bit two's-complement value.
    """
    if raw < 0:
        raw &= _WORD_MASK
    return format(raw, f"0{OCTAL_WIDTH}o")


# Symbolic rendering

_SpecialChars = Tuple[str, str]   # (with execute, without execute)

_SPECIAL_SLOTS: Final[Dict[str, Tuple[Callable[[Mode], bool], _SpecialChars]]] = {
    "user": (lambda m: m.set_uid, ("s", "S")),
    "group": (lambda m: m.set_gid, ("s", "S")),
    "others": (lambda m: m.sticky_bit, ("t", "T")),
}


def format_permissions(permissions: PermissionSet) -> str:
    """Formats a permission set as the usual three characters, e.g. ``"r-x"``."""
    return "".join(p.char if p in permissions else "-" for p in ALL_PERMISSIONS)


def to_symbolic_string(raw: int) -> str:
    """Renders ``raw`` as the ten character mode column of `ls -l`.

    ``s``/``S`` mark setUID and setGID, ``t``/``T`` the sticky bit; the lower
    case letter means the execute bit underneath is set too.
    """
    decoded = mode(raw)
    parts: List[str] = [decoded.file_type.char]
    for label, permissions in decoded.scope.items():
        triad = format_permissions(permissions)
        is_set, (with_x, without_x) = _SPECIAL_SLOTS[label]
        if is_set(decoded):
            triad = triad[:2] + (with_x if triad[2] == "x" else without_x)
        parts.append(triad)
    return "".join(parts)


def _format_flag(value: bool) -> str:
    return "yes" if value else "no"
