"""
Main entry point for the Conversion Preset document checker.

This script loads a YAML document of conversion presets, validates every preset
the way a preset editor would (name rules, uniqueness among its siblings) and
reports the results. It exits with status 1 when the document cannot be loaded
or any preset is invalid.
"""

import sys
from typing import List, Optional

from loguru import logger

from conversion_preset.cli import get_args
from conversion_preset.config.common import DEFAULT_LOG_LEVEL, LOGGER_FORMAT
from conversion_preset.domain.exceptions import ConversionPresetException
from conversion_preset.domain.validation import sibling_name_counter
from conversion_preset.services.serialization_service import presets_from_yaml
from conversion_preset.utils.format_utils import format_settings, unknown_input_types


# Configure the logger for initial setup.
# The level is overridden later by command-line arguments.
logger.remove()
logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL, format=LOGGER_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Validates a presets document and returns the process exit status.

    This function performs the following steps:
    1. Parses command-line arguments and configures the logger.
    2. Reads and parses the presets document.
    3. Validates each preset against its siblings, logging every problem.
    4. Optionally prints each preset's settings.
    """
    args = get_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level, format=LOGGER_FORMAT)

    logger.debug(f"Parsed arguments: {args}")

    try:
        text = args.document.read_text(encoding="utf-8")
        presets = presets_from_yaml(text)
    except (OSError, ConversionPresetException) as e:
        logger.error(f"Could not load presets from '{args.document}': {e}")
        return 1

    logger.info(f"Loaded {len(presets)} preset(s) from {args.document}")

    name_counter = sibling_name_counter(presets)
    invalid_count = 0
    for preset in presets:
        error = preset.error(name_counter)
        if error:
            invalid_count += 1
            logger.warning(f"Preset '{preset.name}': {error}")

        unknown = unknown_input_types(preset.input_types)
        if unknown:
            logger.warning(f"Preset '{preset.name}': unrecognised input types {unknown}")

        if args.show_settings:
            output_type = preset.output_type.name if preset.output_type else "-"
            print(f"{preset.name} [{output_type}] <- {', '.join(preset.input_types) or '-'}")
            print(f"    {format_settings(preset.settings.items())}")

    if invalid_count:
        logger.warning(f"{invalid_count} of {len(presets)} preset(s) are invalid.")
        return 1

    logger.success("All presets are valid.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
