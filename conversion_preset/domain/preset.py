"""
The conversion preset: a named, reusable description of how files are converted.

A `ConversionPreset` ties together an identity (name, output type, accepted input
extensions) and the format-specific settings stored in its own `SettingsStore`.
Choosing an output type seeds that format's default settings without touching
values already present, and writes of settings the current format does not use
are ignored. Every completed change is reported to subscribed handlers.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple, Type, TypeVar

from loguru import logger

from .formats import OutputType
from .notifier import ChangeHandler, ChangeNotifier
from .output_policy import default_settings, is_relevant_setting
from .settings_store import SettingsStore
from .exceptions import InvalidArgumentException
from .validation import NameCounter, validate_preset_field
from ..config.common import (
    DEFAULT_PRESET_NAME,
    FIELD_NAME,
    FIELD_OUTPUT_TYPE,
    FIELD_INPUT_TYPES,
    FIELD_SETTINGS,
)

E = TypeVar("E", bound=Enum)


def _check_key(key: str):
    if not key:
        raise InvalidArgumentException("The setting key can't be empty.")


class ConversionPreset:
    """
    A named conversion configuration with format-specific settings.

    Lifecycle:
    1. `ConversionPreset()` creates a preset named "New Preset" with no output type,
       no input types and no settings.
    2. `ConversionPreset(name, output_type, input_types)` applies the three values
       through the regular setters, so the defaults of `output_type` are seeded.
    3. Hosts then adjust settings with `set_setting_value` and read them back with
       `get_setting_value` or one of the typed accessors.

    The object is not thread-safe; hosts using it from several threads must
    serialize access themselves.

    Attributes:
        name (str): Display name. Stored verbatim; see `validate` for the rules.
        output_type (OutputType | None): The format files are converted to.
        input_types (list[str]): Extensions of the files this preset accepts.
        settings (SettingsStore): The preset's own settings, for reading.
    """

    def __init__(
        self,
        name: str = DEFAULT_PRESET_NAME,
        output_type: Optional[OutputType] = None,
        input_types: Optional[Iterable[str]] = None,
    ):
        self._notifier = ChangeNotifier()
        self._settings = SettingsStore()
        self._name: str = ""
        self._output_type: Optional[OutputType] = None
        self._input_types: List[str] = []

        self.name = name
        if output_type is not None:
            self.output_type = output_type
        if input_types is not None:
            self.input_types = input_types

    # --- Change notification ---

    def subscribe(self, handler: ChangeHandler) -> ChangeHandler:
        """Registers `handler(field_name)` to be called after every change."""
        return self._notifier.subscribe(handler)

    def unsubscribe(self, handler: ChangeHandler):
        self._notifier.unsubscribe(handler)

    def _on_changed(self, field_name: str):
        logger.debug(f"Preset '{self._name}' changed: {field_name}")
        self._notifier.notify(field_name)

    # --- Identity ---

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value
        self._on_changed(FIELD_NAME)

    @property
    def output_type(self) -> Optional[OutputType]:
        return self._output_type

    @output_type.setter
    def output_type(self, value: Optional[OutputType]):
        """
        Switches the output format and seeds its default settings.

        Defaults are only added for keys that are absent. Existing values, including
        those left over from a previous format, are never overwritten or removed.
        """
        self._output_type = value
        self._initialize_default_settings(value)
        self._on_changed(FIELD_OUTPUT_TYPE)

    @property
    def input_types(self) -> List[str]:
        return self._input_types

    @input_types.setter
    def input_types(self, values: Iterable[str]):
        self._input_types = list(values)
        self._on_changed(FIELD_INPUT_TYPES)

    # --- Settings ---

    @property
    def settings(self) -> SettingsStore:
        return self._settings

    def _initialize_default_settings(self, output_type: Optional[OutputType]):
        for key, value in default_settings(output_type):
            if self._settings.setdefault(key, value):
                logger.debug(f"Seeded default setting {key}={value} for {output_type}")

        self._on_changed(FIELD_SETTINGS)

    def set_setting_value(self, key: str, value: str):
        """
        Stores a setting if it is relevant for the current output type.

        Writing a key the current format does not use is silently ignored: nothing is
        stored and no change is reported. This lets callers apply the same set of
        values whatever format is selected.

        Raises:
            InvalidArgumentException: If `key` or `value` is empty.
        """
        _check_key(key)
        if not value:
            raise InvalidArgumentException(f"The value of setting '{key}' can't be empty.")

        if not is_relevant_setting(self._output_type, key):
            logger.debug(f"Ignoring setting '{key}': not relevant for {self._output_type}")
            return

        self._settings.set(key, value)
        self._on_changed(FIELD_SETTINGS)

    def replace_settings(self, pairs: Iterable[Tuple[str, str]]):
        """
        Replays (key, value) pairs through `set_setting_value`.

        Used when loading a serialized preset. Pairs irrelevant to the current output
        type are dropped. One extra "Settings" change is reported at the end, even
        when `pairs` is empty.
        """
        for key, value in pairs:
            self.set_setting_value(key, value)

        self._on_changed(FIELD_SETTINGS)

    def get_setting_value(self, key: str) -> Optional[str]:
        """
        Returns the stored string for `key`, or None if it is not set.

        Raises:
            InvalidArgumentException: If `key` is empty.
        """
        _check_key(key)
        return self._settings.get(key)

    def get_setting_str(self, key: str) -> str:
        _check_key(key)
        return self._settings.get_str(key)

    def get_setting_int(self, key: str) -> int:
        _check_key(key)
        return self._settings.get_int(key)

    def get_setting_float(self, key: str) -> float:
        _check_key(key)
        return self._settings.get_float(key)

    def get_setting_enum(self, key: str, enum_type: Type[E]) -> E:
        _check_key(key)
        return self._settings.get_enum(key, enum_type)

    def get_setting_typed(self, key: str, value_type: type):
        """
        See `SettingsStore.get_typed`.

        Raises:
            InvalidArgumentException: If `key` is empty.
        """
        _check_key(key)
        return self._settings.get_typed(key, value_type)

    # --- Validation ---

    def validate(self, field_name: str, name_counter: Optional[NameCounter] = None) -> str:
        """
        Returns a message describing what is wrong with `field_name`, or "" if nothing is.

        Only "Name" has rules. `name_counter` is the host's view of how many presets
        share a name; without it duplicate names are not detected.
        """
        return validate_preset_field(self, field_name, name_counter)

    def error(self, name_counter: Optional[NameCounter] = None) -> str:
        """The overall validation message of the preset (currently that of its name)."""
        return self.validate(FIELD_NAME, name_counter)

    def is_valid(self, name_counter: Optional[NameCounter] = None) -> bool:
        return not self.error(name_counter)

    def __repr__(self) -> str:
        output_type = self._output_type.name if self._output_type else None
        return (
            f"ConversionPreset(name={self._name!r}, output_type={output_type}, "
            f"input_types={self._input_types!r}, settings={self._settings.to_dict()!r})"
        )
