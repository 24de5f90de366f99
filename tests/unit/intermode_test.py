import pytest

from osu_mods.acronym import Acronym
from osu_mods.definitions import GameModKind
from osu_mods.intermode import GameModIntermode


@pytest.mark.parametrize(
    "acronym, expected",
    [
        ("HD", GameModIntermode.HIDDEN),
        (Acronym("4K"), GameModIntermode.FOUR_KEYS),
        ("10K", GameModIntermode.TEN_KEYS),
        ("SV2", GameModIntermode.SCORE_V2),
        ("XX", None),
        ("hd", None),
    ],
)
def test_from_acronym(acronym, expected):
    assert GameModIntermode.from_acronym(acronym) is expected


def test_properties():
    hidden = GameModIntermode.HIDDEN

    assert hidden.acronym == Acronym("HD")
    assert hidden.bits == 8
    assert hidden.kind is GameModKind.DIFFICULTY_INCREASE
    assert hidden.name_pretty == "Hidden"
    assert str(hidden) == "HD"


@pytest.mark.parametrize(
    "identity, expected_bits",
    [
        (GameModIntermode.NIGHTCORE, 576),
        (GameModIntermode.PERFECT, 16416),
        (GameModIntermode.DIFFICULTY_ADJUST, None),
        (GameModIntermode.TEN_KEYS, None),
    ],
)
def test_bits(identity, expected_bits):
    assert identity.bits == expected_bits


def test_every_identity_has_a_definition():
    for identity in GameModIntermode:
        assert identity.name_pretty
        assert isinstance(identity.kind, GameModKind)


def test_ordering_by_bits_then_acronym():
    identities = [
        GameModIntermode.WIGGLE,
        GameModIntermode.HIDDEN,
        GameModIntermode.DIFFICULTY_ADJUST,
        GameModIntermode.NIGHTCORE,
        GameModIntermode.NO_FAIL,
        GameModIntermode.FLASHLIGHT,
    ]

    assert sorted(identities) == [
        GameModIntermode.NO_FAIL,
        GameModIntermode.HIDDEN,
        GameModIntermode.NIGHTCORE,
        GameModIntermode.FLASHLIGHT,
        GameModIntermode.DIFFICULTY_ADJUST,
        GameModIntermode.WIGGLE,
    ]


def test_bitless_identities_sort_after_bit_bearing_ones():
    assert GameModIntermode.MIRROR < GameModIntermode.ALTERNATE
    assert not GameModIntermode.ALTERNATE < GameModIntermode.MIRROR
