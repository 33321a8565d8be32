"""
Defines custom exception types for the Conversion Preset engine.

These exceptions allow for more specific and expressive error handling by the
hosts embedding the engine. Instead of catching a generic `Exception`, a host can
catch `InvalidArgumentException` when it passed an empty setting key, or
`SettingFormatException` when a stored value could not be read back as the
requested type.

All custom exceptions inherit from the base `ConversionPresetException`. Where an
exception corresponds to a builtin category it also inherits from that builtin
(`ValueError`, `TypeError`), so generic handlers keep working.

Name validation problems are deliberately not exceptions: they are returned as
messages by `ConversionPreset.validate`.
"""


class ConversionPresetException(Exception):
    """Base class for all custom exceptions in the Conversion Preset engine."""

    pass


class InvalidArgumentException(ConversionPresetException, ValueError):
    """
    Raised when a setting key or value passed by the caller is empty.

    The check happens before any state is touched, so a failed call never leaves
    a partially updated preset behind. This is always a programming error on the
    caller's side and is never recovered from internally.
    """

    pass


# --- Typed Read-Back Exceptions ---
class SettingReadException(ConversionPresetException):
    """Base class for exceptions raised while reading a setting back as a typed value."""

    pass


class SettingFormatException(SettingReadException, ValueError):
    """
    Raised when a stored setting cannot be coerced to the requested type.

    This covers a malformed number, an enum member name that does not exist, and
    a key that is not present at all. The store never substitutes a default value.
    """

    pass


class UnsupportedSettingTypeException(SettingReadException, TypeError):
    """
    Raised when a setting is requested as a type the store cannot produce.

    Only `str`, `int`, `float` and `Enum` subclasses are supported.
    """

    pass


# --- Serialization Exceptions ---
class PresetDocumentException(ConversionPresetException):
    """
    Raised when a serialized preset document cannot be turned back into presets.

    Typical causes are a record that is not a mapping, an unknown output type name,
    or a YAML syntax error.
    """

    pass
