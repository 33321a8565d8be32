"""
Ordered string storage for the format-specific settings of a preset.

Values are always kept as strings, exactly as they are serialized. Reading them
back as typed values goes through one explicit accessor per supported type, each
raising `SettingFormatException` when the stored text does not fit.
"""

import re
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Type, TypeVar

from .exceptions import (
    InvalidArgumentException,
    SettingFormatException,
    UnsupportedSettingTypeException,
)

E = TypeVar("E", bound=Enum)

# Optional sign followed by decimal digits only. `int()` on its own would also
# accept underscores ("1_000") and non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Plain decimal or exponent notation. Rejects what `float()` also accepts:
# "nan", "inf", underscores and non-ASCII digits.
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _check_not_empty(key: str, value: str):
    if not isinstance(key, str) or not key:
        raise InvalidArgumentException("The setting key can't be empty.")
    if not isinstance(value, str) or not value:
        raise InvalidArgumentException(f"The value of setting '{key}' can't be empty.")


class SettingsStore:
    """
    An ordered key/value map of non-empty strings.

    Overwriting a key keeps its original position, so the order of `items()` is
    always the order in which keys were first added. The store itself knows
    nothing about output formats; relevancy is enforced by the owning preset.
    """

    def __init__(self):
        self._values: Dict[str, str] = {}

    # --- Mutation ---

    def set(self, key: str, value: str):
        """
        Stores `value` under `key`, replacing any previous value.

        Raises:
            InvalidArgumentException: If `key` or `value` is empty.
        """
        _check_not_empty(key, value)
        self._values[key] = value

    def setdefault(self, key: str, value: str) -> bool:
        """
        Stores `value` under `key` only if the key is not present yet.

        Returns:
            True if the value was added, False if the key already had a value.

        Raises:
            InvalidArgumentException: If `key` or `value` is empty.
        """
        _check_not_empty(key, value)
        if key in self._values:
            return False
        self._values[key] = value
        return True

    # --- Untyped access ---

    def get(self, key: str) -> Optional[str]:
        """Returns the stored string, or None if `key` is not present."""
        return self._values.get(key)

    def items(self) -> List[Tuple[str, str]]:
        """Returns all (key, value) pairs in insertion order."""
        return list(self._values.items())

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    # --- Typed access ---

    def _require(self, key: str) -> str:
        value = self._values.get(key)
        if value is None:
            raise SettingFormatException(f"Setting '{key}' is not set.")
        return value

    def get_str(self, key: str) -> str:
        """
        Returns the stored string.

        Raises:
            SettingFormatException: If `key` is not present.
        """
        return self._require(key)

    def get_int(self, key: str) -> int:
        """
        Parses the stored value as a decimal integer, e.g. "190" or "-3".

        Surrounding whitespace is ignored.

        Raises:
            SettingFormatException: If `key` is not present or its value is not an integer.
        """
        value = self._require(key)
        text = value.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            raise SettingFormatException(f"Setting '{key}' value '{value}' is not an integer.")
        return int(text)

    def get_float(self, key: str) -> float:
        """
        Parses the stored value as a decimal number, e.g. "44.1" or "1e3".

        Surrounding whitespace is ignored.

        Raises:
            SettingFormatException: If `key` is not present or its value is not a number.
        """
        value = self._require(key)
        text = value.strip()
        if not _DECIMAL_PATTERN.fullmatch(text):
            raise SettingFormatException(f"Setting '{key}' value '{value}' is not a number.")
        return float(text)

    def get_enum(self, key: str, enum_type: Type[E]) -> E:
        """
        Looks up the stored value as a member name of `enum_type`.

        The match is exact and case-sensitive: "Mp3VBR" resolves, "mp3vbr" does not.

        Raises:
            SettingFormatException: If `key` is not present or names no member.
            UnsupportedSettingTypeException: If `enum_type` is not an Enum subclass.
        """
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise UnsupportedSettingTypeException(f"{enum_type!r} is not an Enum type.")
        value = self._require(key)
        try:
            return enum_type[value]
        except KeyError as e:
            raise SettingFormatException(
                f"Setting '{key}' value '{value}' is not a member of {enum_type.__name__}."
            ) from e

    def get_typed(self, key: str, value_type: type):
        """
        Reads `key` as `value_type`, which must be str, int, float or an Enum subclass.

        Raises:
            SettingFormatException: If the stored value cannot be converted.
            UnsupportedSettingTypeException: For any other requested type.
        """
        # Identity checks: bool subclasses int but is not a supported type.
        if value_type is str:
            return self.get_str(key)
        if value_type is int:
            return self.get_int(key)
        if value_type is float:
            return self.get_float(key)
        if isinstance(value_type, type) and issubclass(value_type, Enum):
            return self.get_enum(key, value_type)
        raise UnsupportedSettingTypeException(
            f"Settings can't be read as {getattr(value_type, '__name__', value_type)!s}."
        )

    # --- Container protocol ---

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SettingsStore):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"SettingsStore({self._values!r})"
