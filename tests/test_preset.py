import pytest

from conversion_preset.domain.exceptions import (
    InvalidArgumentException,
    SettingFormatException,
    UnsupportedSettingTypeException,
)
from conversion_preset.domain.formats import EncodingMode, OutputType
from conversion_preset.domain.output_policy import is_relevant_setting
from conversion_preset.domain.preset import ConversionPreset


def test_default_constructor() -> None:
    preset = ConversionPreset()
    assert preset.name == "New Preset"
    assert preset.output_type is None
    assert preset.input_types == []
    assert len(preset.settings) == 0


def test_constructor_seeds_defaults(mp3_preset: ConversionPreset) -> None:
    assert mp3_preset.name == "My MP3"
    assert mp3_preset.output_type is OutputType.Mp3
    assert mp3_preset.input_types == ["wav", "flac"]
    assert mp3_preset.settings.items() == [("Encoding", "VBR-default-name"), ("Bitrate", "190")]


def test_end_to_end_scenario(mp3_preset: ConversionPreset) -> None:
    assert mp3_preset.settings == {"Encoding": "VBR-default-name", "Bitrate": "190"}

    mp3_preset.set_setting_value("Bitrate", "256")
    assert mp3_preset.settings == {"Encoding": "VBR-default-name", "Bitrate": "256"}

    mp3_preset.set_setting_value("Channels", "2")
    assert mp3_preset.settings == {"Encoding": "VBR-default-name", "Bitrate": "256"}

    mp3_preset.output_type = OutputType.Ogg
    assert mp3_preset.settings == {"Encoding": "VBR-default-name", "Bitrate": "256"}


IRRELEVANT_COMBINATIONS = [
    (output_type, key)
    for output_type in [None, *OutputType]
    for key in ["Encoding", "Bitrate", "Channels", "bitrate", "Quality"]
    if not is_relevant_setting(output_type, key)
]


@pytest.mark.parametrize("output_type, key", IRRELEVANT_COMBINATIONS)
def test_irrelevant_writes_change_nothing(output_type: OutputType | None, key: str) -> None:
    preset = ConversionPreset()
    if output_type is not None:
        preset.output_type = output_type

    recorded: list[str] = []
    preset.subscribe(recorded.append)
    before = preset.get_setting_value(key)

    preset.set_setting_value(key, "12345")

    assert preset.get_setting_value(key) == before
    assert recorded == []


def test_setting_same_output_type_twice_keeps_values(mp3_preset: ConversionPreset) -> None:
    mp3_preset.set_setting_value("Encoding", "Mp3CBR")
    mp3_preset.set_setting_value("Bitrate", "320")

    mp3_preset.output_type = OutputType.Mp3

    assert mp3_preset.settings == {"Encoding": "Mp3CBR", "Bitrate": "320"}


def test_format_switch_never_purges(mp3_preset: ConversionPreset) -> None:
    mp3_preset.output_type = OutputType.Ogg
    mp3_preset.output_type = OutputType.Mp3
    assert mp3_preset.get_setting_value("Encoding") == "VBR-default-name"
    assert mp3_preset.get_setting_value("Bitrate") == "190"


def test_switch_from_no_defaults_format_seeds_ogg() -> None:
    preset = ConversionPreset("Lossless", OutputType.Flac, ["wav"])
    assert len(preset.settings) == 0
    preset.output_type = OutputType.Ogg
    assert preset.settings.items() == [("Bitrate", "160")]


def test_stale_keys_survive_but_cannot_be_written(mp3_preset: ConversionPreset) -> None:
    mp3_preset.output_type = OutputType.Ogg
    mp3_preset.set_setting_value("Encoding", "Mp3CBR")
    assert mp3_preset.get_setting_value("Encoding") == "VBR-default-name"


@pytest.mark.parametrize("key, value", [("", "256"), ("Bitrate", ""), (None, "256"), ("Bitrate", None)])
def test_set_setting_value_rejects_empty(mp3_preset: ConversionPreset, changes: list[str], key, value) -> None:
    with pytest.raises(InvalidArgumentException):
        mp3_preset.set_setting_value(key, value)
    assert mp3_preset.get_setting_value("Bitrate") == "190"
    assert changes == []


def test_empty_value_rejected_even_for_irrelevant_key(mp3_preset: ConversionPreset) -> None:
    with pytest.raises(InvalidArgumentException):
        mp3_preset.set_setting_value("Channels", "")


def test_get_setting_value(mp3_preset: ConversionPreset) -> None:
    assert mp3_preset.get_setting_value("Bitrate") == "190"
    assert mp3_preset.get_setting_value("Channels") is None
    with pytest.raises(InvalidArgumentException):
        mp3_preset.get_setting_value("")


def test_typed_getters(mp3_preset: ConversionPreset) -> None:
    mp3_preset.set_setting_value("Encoding", EncodingMode.Mp3CBR.name)
    mp3_preset.set_setting_value("Bitrate", str(256))

    assert mp3_preset.get_setting_enum("Encoding", EncodingMode) is EncodingMode.Mp3CBR
    assert mp3_preset.get_setting_typed("Encoding", EncodingMode) is EncodingMode.Mp3CBR
    assert mp3_preset.get_setting_int("Bitrate") == 256
    assert mp3_preset.get_setting_typed("Bitrate", int) == 256
    assert mp3_preset.get_setting_float("Bitrate") == 256.0
    assert mp3_preset.get_setting_str("Bitrate") == "256"


def test_typed_getters_surface_store_errors(mp3_preset: ConversionPreset) -> None:
    with pytest.raises(SettingFormatException):
        mp3_preset.get_setting_int("Encoding")
    with pytest.raises(UnsupportedSettingTypeException):
        mp3_preset.get_setting_typed("Bitrate", list)


@pytest.mark.parametrize(
    "read",
    [
        lambda preset, key: preset.get_setting_value(key),
        lambda preset, key: preset.get_setting_str(key),
        lambda preset, key: preset.get_setting_int(key),
        lambda preset, key: preset.get_setting_float(key),
        lambda preset, key: preset.get_setting_enum(key, EncodingMode),
        lambda preset, key: preset.get_setting_typed(key, int),
    ],
    ids=["value", "str", "int", "float", "enum", "typed"],
)
@pytest.mark.parametrize("key", ["", None])
def test_setting_reads_reject_empty_key(mp3_preset: ConversionPreset, read, key) -> None:
    with pytest.raises(InvalidArgumentException):
        read(mp3_preset, key)


def test_input_types_are_replaced_wholesale(mp3_preset: ConversionPreset, changes: list[str]) -> None:
    new_types = ["ogg", "ogg"]
    mp3_preset.input_types = new_types
    new_types.append("wav")

    assert mp3_preset.input_types == ["ogg", "ogg"]
    assert changes == ["InputTypes"]


def test_each_preset_owns_its_settings() -> None:
    first = ConversionPreset("A", OutputType.Mp3, [])
    second = ConversionPreset("B", OutputType.Mp3, [])
    first.set_setting_value("Bitrate", "320")
    assert second.get_setting_value("Bitrate") == "190"
    assert first.settings is not second.settings


def test_notifications_per_mutation(mp3_preset: ConversionPreset, changes: list[str]) -> None:
    mp3_preset.name = "Renamed"
    mp3_preset.set_setting_value("Bitrate", "256")
    mp3_preset.set_setting_value("Bitrate", "190")
    mp3_preset.output_type = OutputType.Ogg

    assert changes == ["Name", "Settings", "Settings", "Settings", "OutputType"]


def test_output_type_notifies_settings_even_without_new_keys(mp3_preset: ConversionPreset, changes: list[str]) -> None:
    mp3_preset.output_type = OutputType.Mp3
    assert changes == ["Settings", "OutputType"]


def test_name_is_stored_verbatim(changes: list[str], mp3_preset: ConversionPreset) -> None:
    mp3_preset.name = "a;b"
    assert mp3_preset.name == "a;b"
    mp3_preset.name = ""
    assert mp3_preset.name == ""
    assert changes == ["Name", "Name"]


def test_replace_settings_drops_irrelevant_pairs(mp3_preset: ConversionPreset, changes: list[str]) -> None:
    mp3_preset.replace_settings([("Bitrate", "128"), ("Channels", "2"), ("Encoding", "Mp3CBR")])

    assert mp3_preset.settings.items() == [("Encoding", "Mp3CBR"), ("Bitrate", "128")]
    assert changes == ["Settings", "Settings", "Settings"]


def test_unsubscribe_stops_notifications(mp3_preset: ConversionPreset) -> None:
    recorded: list[str] = []
    handle = mp3_preset.subscribe(recorded.append)
    mp3_preset.name = "One"
    mp3_preset.unsubscribe(handle)
    mp3_preset.name = "Two"
    assert recorded == ["Name"]
