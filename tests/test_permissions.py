import pytest

from permissions import (
    ALL_PERMISSIONS, Permission, Scope, get_permissions,
    has_group_permission, has_others_permission, has_user_permission, scope,
)

R, W, X = Permission.READ, Permission.WRITE, Permission.EXECUTE

MASKS = {
    has_user_permission: {R: 256, W: 128, X: 64},
    has_group_permission: {R: 32, W: 16, X: 8},
    has_others_permission: {R: 4, W: 2, X: 1},
}


def test_permission_equality_is_by_tag():
    assert R == R
    assert R != W
    assert W != X
    assert len({R, W, X, R}) == 3


def test_permission_order():
    assert R < W < X
    assert sorted([X, R, W]) == [R, W, X]
    assert list(ALL_PERMISSIONS) == [R, W, X]


@pytest.mark.parametrize("checker", list(MASKS))
def test_checkers_match_bits(checker):
    for raw in range(0, 0o1000):
        for permission, mask in MASKS[checker].items():
            assert checker(permission, raw) == ((raw & mask) != 0)


def test_get_permissions_takes_any_checker():
    calls = []

    def only_write(permission: Permission, mode: int) -> bool:
        calls.append(permission)
        return permission is W

    assert get_permissions(only_write, 0) == frozenset({W})
    assert calls == [R, W, X]


def test_get_permissions_returns_fresh_sets():
    first = get_permissions(has_user_permission, 0o700)
    second = get_permissions(has_user_permission, 0o700)
    assert first == second == frozenset({R, W, X})


@pytest.mark.parametrize("raw, user, group, others", [
    (0o100754, {R, W, X}, {R, X}, {R}),
    (0o040755, {R, W, X}, {R, X}, {R, X}),
    (0o120777, {R, W, X}, {R, W, X}, {R, W, X}),
    (0, set(), set(), set()),
    (0o7000, set(), set(), set()),
    (0o421, {R}, {W}, {X}),
])
def test_scope(raw, user, group, others):
    assert scope(raw) == Scope(frozenset(user), frozenset(group), frozenset(others))


def test_scope_structural_equality():
    assert scope(0o644) == scope(0o100644)
    assert scope(0o644) != scope(0o640)
    assert hash(scope(0o755)) == hash(scope(0o40755))


def test_scope_bits_round_trip():
    for raw in range(0, 0o10000, 7):
        assert scope(raw).bits() == raw & 0o777


def test_scope_items_order():
    assert [label for label, _ in scope(0o777).items()] == ["user", "group", "others"]
