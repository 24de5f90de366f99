import orjson
import pytest

from osu_mods import definitions
from osu_mods.definitions import GameModKind
from osu_mods.errors import DefinitionsError
from osu_mods.errors import InvalidSetting
from osu_mods.game_modes import GameMode
from osu_mods.intermode import GameModIntermode


def test_every_mode_has_mods():
    for mode in GameMode:
        assert definitions.definitions_for_mode(mode)


@pytest.mark.parametrize(
    "mode, expected_count",
    [
        (GameMode.OSU, 47),
        (GameMode.TAIKO, 26),
        (GameMode.CATCH, 24),
        (GameMode.MANIA, 40),
    ],
)
def test_mod_count_per_mode(mode, expected_count):
    assert len(definitions.definitions_for_mode(mode)) == expected_count


def test_every_definition_is_an_intermode_identity():
    catalogue_acronyms = {definition.acronym for definition in definitions.all_definitions()}

    assert catalogue_acronyms == {identity.value for identity in GameModIntermode}


def test_no_mod_is_incompatible_with_itself():
    for definition in definitions.all_definitions():
        assert definition.acronym not in definition.incompatible_mods


def test_incompatible_mods_exist_in_the_same_mode():
    for definition in definitions.all_definitions():
        for acronym in definition.incompatible_mods:
            assert definitions.get_definition(acronym, definition.mode) is not None


@pytest.mark.parametrize(
    "acronym, mode, expected_bits, expected_index",
    [
        ("NF", GameMode.OSU, 1, 1),
        ("EZ", GameMode.OSU, 2, 2),
        ("HD", GameMode.OSU, 8, 4),
        ("NC", GameMode.OSU, 576, 10),
        ("PF", GameMode.TAIKO, 16416, 15),
        ("TP", GameMode.OSU, 1 << 23, 24),
        ("4K", GameMode.MANIA, 1 << 15, 16),
        ("SV2", GameMode.CATCH, 1 << 29, 30),
        ("MR", GameMode.MANIA, 1 << 30, 31),
        ("10K", GameMode.MANIA, None, None),
        ("DA", GameMode.OSU, None, None),
    ],
)
def test_legacy_bits(acronym, mode, expected_bits, expected_index):
    definition = definitions.get_definition(acronym, mode)

    assert definition is not None
    assert definition.bits == expected_bits
    assert definition.legacy_index == expected_index


@pytest.mark.parametrize(
    "acronym, mode",
    [
        ("4K", GameMode.OSU),
        ("RX", GameMode.MANIA),
        ("AP", GameMode.TAIKO),
        ("XX", GameMode.OSU),
    ],
)
def test_unknown_pairs(acronym, mode):
    assert definitions.get_definition(acronym, mode) is None


def test_kinds():
    assert definitions.get_definition("EZ", GameMode.OSU).kind is GameModKind.DIFFICULTY_REDUCTION
    assert definitions.get_definition("HD", GameMode.OSU).kind is GameModKind.DIFFICULTY_INCREASE
    assert definitions.get_definition("DA", GameMode.OSU).kind is GameModKind.CONVERSION
    assert definitions.get_definition("AT", GameMode.OSU).kind is GameModKind.AUTOMATION
    assert definitions.get_definition("WG", GameMode.OSU).kind is GameModKind.FUN
    assert definitions.get_definition("SV2", GameMode.OSU).kind is GameModKind.SYSTEM
    assert GameModKind.DIFFICULTY_REDUCTION < GameModKind.SYSTEM


def test_setting_defaults_are_typed():
    double_time = definitions.get_definition("DT", GameMode.OSU)

    assert double_time.setting_definition("speed_change").default == 1.5
    assert double_time.setting_definition("adjust_pitch").default is False
    assert double_time.setting_definition("missing") is None

    easy = definitions.get_definition("EZ", GameMode.OSU)
    assert isinstance(easy.setting_definition("retries").default, float)


def test_type_name():
    assert definitions.get_definition("HD", GameMode.OSU).type_name == "HiddenOsu"
    assert definitions.get_definition("4K", GameMode.MANIA).type_name == "FourKeysMania"
    assert definitions.get_definition("SV2", GameMode.CATCH).type_name == "ScoreV2Catch"


def test_intermode_definition():
    definition = definitions.intermode_definition("HD")

    assert definition is not None
    assert definition.name == "Hidden"
    assert definitions.intermode_definition("XX") is None


@pytest.mark.parametrize(
    "setting_type, value, expected",
    [
        ("number", 1, 1.0),
        ("number", 1.25, 1.25),
        ("boolean", True, True),
        ("string", "Down", "Down"),
        ("number", None, None),
    ],
)
def test_coerce_setting(setting_type, value, expected):
    assert definitions.coerce_setting("XX", "name", setting_type, value) == expected


@pytest.mark.parametrize(
    "setting_type, value",
    [
        ("number", True),
        ("number", "1.5"),
        ("boolean", 1),
        ("string", 1.0),
    ],
)
def test_coerce_setting_rejects_mismatched_types(setting_type, value):
    with pytest.raises(InvalidSetting):
        definitions.coerce_setting("XX", "name", setting_type, value)


def _write_catalogue(tmp_path, rulesets) -> str:
    path = tmp_path / "mods.json"
    path.write_bytes(orjson.dumps(rulesets))
    return str(path)


def test_load_rulesets_from_custom_file(tmp_path):
    path = _write_catalogue(
        tmp_path,
        [
            {
                "Name": "osu",
                "RulesetID": 0,
                "Mods": [
                    {
                        "Acronym": "HD",
                        "Name": "Hidden",
                        "Type": "DifficultyIncrease",
                        "IncompatibleMods": ["HD", "TC"],
                    },
                ],
            },
        ],
    )

    rulesets = definitions.load_rulesets(path)

    assert len(rulesets) == 1
    hidden = rulesets[0].mods[0]
    assert hidden.mode is GameMode.OSU
    assert hidden.bits == 8
    assert hidden.incompatible_mods == ("TC",)
    assert hidden.user_playable is True
    assert hidden.requires_configuration is False


def test_load_rulesets_rejects_unexpected_kind(tmp_path):
    path = _write_catalogue(
        tmp_path,
        [
            {
                "Name": "osu",
                "RulesetID": 0,
                "Mods": [{"Acronym": "HD", "Name": "Hidden", "Type": "Nonsense"}],
            },
        ],
    )

    with pytest.raises(DefinitionsError):
        definitions.load_rulesets(path)


def test_load_rulesets_rejects_missing_file(tmp_path):
    with pytest.raises(DefinitionsError):
        definitions.load_rulesets(str(tmp_path / "missing.json"))


def test_catalogue_path_can_be_overridden(tmp_path, mocker):
    path = _write_catalogue(
        tmp_path,
        [
            {
                "Name": "taiko",
                "RulesetID": 1,
                "Mods": [{"Acronym": "HD", "Name": "Hidden", "Type": "DifficultyIncrease"}],
            },
        ],
    )
    mocker.patch("osu_mods.settings.MODS_DEFINITIONS_PATH", path)
    definitions.clear_cache()

    try:
        assert len(definitions.all_definitions()) == 1
        assert definitions.get_definition("HD", GameMode.OSU) is None
        assert definitions.get_definition("HD", GameMode.TAIKO) is not None
    finally:
        mocker.stopall()
        definitions.clear_cache()

    assert len(definitions.all_definitions()) == 137
