"""
Display validation for preset fields.

Validation here never raises. It returns a human-readable message (or an empty
string when the field is fine) so a view can re-evaluate it on every keystroke.
Uniqueness of the name is checked through a `NameCounter` supplied by the host,
which knows the collection the preset lives in.
"""

from typing import Callable, Collection, Optional

from ..config.common import FIELD_NAME, NAME_FORBIDDEN_CHARACTER

# Given a candidate name, returns how many presets in the host's registry use it.
NameCounter = Callable[[str], int]

NAME_REQUIRED_MESSAGE = "The preset name can't be empty."
NAME_ILLEGAL_CHARACTER_MESSAGE = (
    f"The preset name can't contain the character '{NAME_FORBIDDEN_CHARACTER}'."
)
NAME_DUPLICATE_MESSAGE = "The preset name is already used."


def validate_name(name: Optional[str], name_counter: Optional[NameCounter] = None) -> str:
    """
    Checks a preset name and returns the first problem found, or "".

    The registry the counter looks at normally contains the preset being
    validated, so a count of one is the preset itself and only a count above one
    means another preset shares the name. Without a counter the uniqueness rule
    is skipped.
    """
    if not name:
        return NAME_REQUIRED_MESSAGE

    # Hosts may assign any value to `ConversionPreset.name`.
    name = str(name)

    if NAME_FORBIDDEN_CHARACTER in name:
        return NAME_ILLEGAL_CHARACTER_MESSAGE

    if name_counter is not None and name_counter(name) > 1:
        return NAME_DUPLICATE_MESSAGE

    return ""


def validate_preset_field(preset, field_name: str, name_counter: Optional[NameCounter] = None) -> str:
    """Returns the validation message for one field of `preset`, or "" if it is valid."""
    if field_name == FIELD_NAME:
        return validate_name(preset.name, name_counter)
    return ""


def sibling_name_counter(presets: Collection) -> NameCounter:
    """
    Builds a `NameCounter` over a host's collection of presets.

    The collection is iterated on every call, so presets added or renamed later
    are taken into account. It must be re-iterable (a list, set or dict view);
    a generator would be exhausted after the first count.
    """

    def count(name: str) -> int:
        return sum(1 for preset in presets if preset.name == name)

    return count
