from __future__ import annotations

from pkg_identity.shared.semverlike import parse_semver_like


def test_two_components():
    v = parse_semver_like("1.20", 3)
    assert v.components == (1, 20)
    assert v.build == ""
    assert v.fetch(1) == 20
    assert v.fetch(2) == 0


def test_leading_v_and_build():
    v = parse_semver_like("v1.2.3-rc1")
    assert v.leading_v
    assert v.components == (1, 2, 3)
    assert v.build == "-rc1"
    assert v.original == "v1.2.3-rc1"


def test_components_beyond_cap_fold_into_build():
    v = parse_semver_like("1.2.3.4", 3)
    assert v.components == (1, 2, 3)
    assert v.build == ".4"
    assert parse_semver_like("1.2.3.4").components == (1, 2, 3, 4)


def test_non_numeric_input_has_no_components():
    v = parse_semver_like("devel", 3)
    assert v.components == ()
    assert v.build == "devel"
    assert parse_semver_like("", 3).components == ()


def test_large_components():
    assert parse_semver_like("20240101000000.1").components == (20240101000000, 1)
