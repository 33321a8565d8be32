"""
Per-format lookup tables deciding which settings a preset may hold.

`FORMAT_SETTINGS` is the single table both relevancy and defaulting are derived
from: a key is relevant for a format exactly when the format's entry lists it.
Formats without an entry accept no settings at all.
"""

from typing import Dict, List, Optional, Tuple

from .formats import OutputType
from ..config.audio import (
    SETTING_ENCODING,
    SETTING_BITRATE,
    DEFAULT_MP3_ENCODING,
    DEFAULT_MP3_BITRATE,
    DEFAULT_OGG_BITRATE,
)

# Ordered (key, default value) pairs per output format. Order matters: it is the
# order in which defaults are seeded and therefore the order of serialization.
FORMAT_SETTINGS: Dict[OutputType, Tuple[Tuple[str, str], ...]] = {
    OutputType.Mp3: (
        (SETTING_ENCODING, DEFAULT_MP3_ENCODING),
        (SETTING_BITRATE, DEFAULT_MP3_BITRATE),
    ),
    OutputType.Ogg: (
        (SETTING_BITRATE, DEFAULT_OGG_BITRATE),
    ),
}


def relevant_settings(output_type: Optional[OutputType]) -> Tuple[str, ...]:
    """Returns the setting keys meaningful for `output_type`, in table order."""
    return tuple(key for key, _ in FORMAT_SETTINGS.get(output_type, ()))


def is_relevant_setting(output_type: Optional[OutputType], key: str) -> bool:
    """
    Checks whether `key` may be stored in a preset converting to `output_type`.

    Keys are matched exactly and case-sensitively. A preset without an output type
    has no relevant settings.
    """
    return key in relevant_settings(output_type)


def default_settings(output_type: Optional[OutputType]) -> List[Tuple[str, str]]:
    """
    Returns the (key, value) pairs to seed into a preset converting to `output_type`.

    The list is a fresh copy; callers may modify it freely.
    """
    return list(FORMAT_SETTINGS.get(output_type, ()))
