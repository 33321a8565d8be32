"""
This module converts presets to and from their flat serialized shape.

A preset is written as a record with `Name` and `OutputType` attributes, a list of
`InputTypes` and a list of `Settings` entries, each carrying `Key` and `Value`.
Several presets are kept together under a `ConversionPresets` root key, and YAML
(through PyYAML) is used as the text form. Reading and writing files is left to
the caller.

Loading replays the stored settings through `ConversionPreset.set_setting_value`
after the output type has been set. The output type seeds its defaults first and
stored values then overwrite them. Settings that the loaded output type does not
use are dropped, so a preset saved with stale keys from an earlier format loses
them on load.
"""

from typing import Any, Dict, List, Sequence

import yaml
from loguru import logger

from ..config.common import (
    FIELD_NAME,
    FIELD_OUTPUT_TYPE,
    FIELD_INPUT_TYPES,
    FIELD_SETTINGS,
    FIELD_SETTING_KEY,
    FIELD_SETTING_VALUE,
    PRESETS_DOCUMENT_ROOT,
    YAML_DUMP_OPTIONS,
)
from ..domain.exceptions import PresetDocumentException
from ..domain.formats import OutputType
from ..domain.output_policy import is_relevant_setting
from ..domain.preset import ConversionPreset


def preset_to_dict(preset: ConversionPreset) -> Dict[str, Any]:
    """
    Builds the serialized record of a preset.

    `OutputType` is omitted when the preset has none. Settings are listed in the
    store's insertion order.
    """
    record: Dict[str, Any] = {FIELD_NAME: preset.name}
    if preset.output_type is not None:
        record[FIELD_OUTPUT_TYPE] = preset.output_type.name
    record[FIELD_INPUT_TYPES] = list(preset.input_types)
    record[FIELD_SETTINGS] = [
        {FIELD_SETTING_KEY: key, FIELD_SETTING_VALUE: value}
        for key, value in preset.settings.items()
    ]
    return record


def _parse_output_type(value: Any) -> OutputType:
    try:
        return OutputType[str(value)]
    except KeyError as e:
        raise PresetDocumentException(f"Unknown output type '{value}'.") from e


def _parse_setting_entry(entry: Any) -> tuple:
    if not isinstance(entry, dict):
        raise PresetDocumentException(f"Setting entry must be a mapping, got {entry!r}.")
    key = entry.get(FIELD_SETTING_KEY)
    value = entry.get(FIELD_SETTING_VALUE)
    # YAML turns unquoted numbers such as 190 into ints; settings are always strings.
    return (
        "" if key is None else str(key),
        "" if value is None else str(value),
    )


def preset_from_dict(record: Dict[str, Any]) -> ConversionPreset:
    """
    Rebuilds a preset from its serialized record.

    Fields are applied in this order: name, output type (seeding defaults), input
    types, then every stored setting. A missing `Name` keeps the default name.

    Raises:
        PresetDocumentException: If the record is malformed or names an unknown
            output type.
        InvalidArgumentException: If a setting entry has an empty key or value.
    """
    if not isinstance(record, dict):
        raise PresetDocumentException(f"Preset record must be a mapping, got {record!r}.")

    preset = ConversionPreset()

    if FIELD_NAME in record:
        name = record[FIELD_NAME]
        preset.name = "" if name is None else str(name)

    output_type = record.get(FIELD_OUTPUT_TYPE)
    if output_type is not None:
        preset.output_type = _parse_output_type(output_type)

    input_types = record.get(FIELD_INPUT_TYPES) or []
    if not isinstance(input_types, list):
        raise PresetDocumentException(f"'{FIELD_INPUT_TYPES}' must be a list, got {input_types!r}.")
    preset.input_types = [str(input_type) for input_type in input_types]

    settings = record.get(FIELD_SETTINGS) or []
    if not isinstance(settings, list):
        raise PresetDocumentException(f"'{FIELD_SETTINGS}' must be a list, got {settings!r}.")
    pairs = [_parse_setting_entry(entry) for entry in settings]

    dropped = [key for key, _ in pairs if key and not is_relevant_setting(preset.output_type, key)]
    preset.replace_settings(pairs)
    if dropped:
        logger.debug(f"Preset '{preset.name}': dropped settings not used by {preset.output_type}: {dropped}")

    return preset


def presets_to_yaml(presets: Sequence[ConversionPreset]) -> str:
    """Serializes a collection of presets to a YAML document."""
    document = {PRESETS_DOCUMENT_ROOT: [preset_to_dict(preset) for preset in presets]}
    return yaml.dump(document, **YAML_DUMP_OPTIONS)


def presets_from_yaml(text: str) -> List[ConversionPreset]:
    """
    Loads every preset of a YAML document produced by `presets_to_yaml`.

    An empty document yields an empty list.

    Raises:
        PresetDocumentException: If the text is not valid YAML or does not have the
            expected layout.
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PresetDocumentException(f"Invalid preset document: {e}") from e

    if document is None:
        return []
    if not isinstance(document, dict):
        raise PresetDocumentException("Preset document must be a mapping.")

    records = document.get(PRESETS_DOCUMENT_ROOT) or []
    if not isinstance(records, list):
        raise PresetDocumentException(f"'{PRESETS_DOCUMENT_ROOT}' must be a list.")

    presets = [preset_from_dict(record) for record in records]
    logger.debug(f"Loaded {len(presets)} preset(s) from document.")
    return presets
