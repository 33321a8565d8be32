"""
This module contains helper functions for formatting presets into human-readable strings.
These functions are used by the command-line tool and in log messages to present
settings and input types in a clear and consistent way.
"""

from typing import Iterable, List, Tuple

from ..config.audio import KNOWN_INPUT_EXTENSIONS


def format_settings(pairs: Iterable[Tuple[str, str]]) -> str:
    """
    Formats (key, value) pairs as a single "Key=Value, Key=Value" line.

    Args:
        pairs: The pairs to format, typically `SettingsStore.items()`.

    Returns:
        The formatted line, or "(none)" when there are no pairs.
        For example, [("Encoding", "Mp3VBR"), ("Bitrate", "190")] becomes
        "Encoding=Mp3VBR, Bitrate=190".
    """
    formatted = ", ".join(f"{key}={value}" for key, value in pairs)
    return formatted or "(none)"


def normalize_extension(extension: str) -> str:
    """
    Normalizes an input type for comparison: lowercase, without a leading dot.

    Args:
        extension: An extension as written by the user, e.g. ".FLAC" or "wav".

    Returns:
        The normalized extension, e.g. "flac".
    """
    return extension.strip().lstrip(".").lower()


def unknown_input_types(input_types: Iterable[str]) -> List[str]:
    """
    Returns the input types that are not in the list of recognised extensions.

    The comparison is case-insensitive and ignores a leading dot. Duplicates in the
    input are reported once, in order of first appearance.
    """
    known = set(KNOWN_INPUT_EXTENSIONS)
    unknown: List[str] = []
    for input_type in input_types:
        if normalize_extension(input_type) not in known and input_type not in unknown:
            unknown.append(input_type)
    return unknown
