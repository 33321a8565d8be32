"""
The Conversion Preset engine.

A conversion preset describes how input files of certain types are converted to
an output format, together with the format-specific settings (bitrate, encoding
mode) used for the conversion. The most commonly used names are re-exported here:

    from conversion_preset import ConversionPreset, OutputType

    preset = ConversionPreset("My MP3", OutputType.Mp3, ["wav", "flac"])
    preset.set_setting_value("Bitrate", "256")
"""

from .domain.exceptions import (
    ConversionPresetException,
    InvalidArgumentException,
    PresetDocumentException,
    SettingFormatException,
    SettingReadException,
    UnsupportedSettingTypeException,
)
from .domain.formats import EncodingMode, OutputType
from .domain.notifier import ChangeNotifier
from .domain.preset import ConversionPreset
from .domain.settings_store import SettingsStore
from .domain.validation import sibling_name_counter

__all__ = [
    "ChangeNotifier",
    "ConversionPreset",
    "ConversionPresetException",
    "EncodingMode",
    "InvalidArgumentException",
    "OutputType",
    "PresetDocumentException",
    "SettingFormatException",
    "SettingReadException",
    "SettingsStore",
    "UnsupportedSettingTypeException",
    "sibling_name_counter",
]
