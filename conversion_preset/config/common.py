"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the whole preset engine. It centralizes parameters for logging, preset
naming rules and the layout of serialized preset documents. It also handles the
loading of user-specific overrides from an external YAML file, allowing for easy
customization without modifying the source code.
"""
from pathlib import Path
import yaml
from loguru import logger

# --- User-Defined Configuration ---
# This block loads user-specific overrides from a 'config.user.yaml' file located
# at the project root. Only the logging level can currently be overridden.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The default log level used by the command-line entry point when no
# `--log-level` argument is given.
DEFAULT_LOG_LEVEL = "INFO"

if USER_CONFIG_PATH.is_file():
    try:
        with USER_CONFIG_PATH.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
        if user_config and "logging" in user_config:
            logging_config = user_config.get("logging") or {}
            level_str = logging_config.get("level")

            if level_str:
                DEFAULT_LOG_LEVEL = str(level_str).upper()
    except Exception as e:
        logger.warning(f"Could not load or parse '{USER_CONFIG_PATH}': {e}")
else:
    logger.debug(f"User config '{USER_CONFIG_PATH}' not found. Using built-in defaults.")


# --- Logging Configuration ---
# Settings related to application-wide logging.

# The format string for the Loguru logger. It defines the structure and appearance
# of log messages, including timestamp, level, module name, and the message itself.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# The log levels accepted by the command-line interface.
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# --- Preset Identity ---

# The name given to a preset created without an explicit name.
DEFAULT_PRESET_NAME = "New Preset"

# Preset names are stored in ';'-separated lists by hosts, so the separator
# itself can never appear inside a name.
NAME_FORBIDDEN_CHARACTER = ";"


# --- Serialized Document Layout ---
# Field names of the flat record a preset is serialized to. They match the
# attribute names used by existing preset documents and must not be renamed.

FIELD_NAME = "Name"
FIELD_OUTPUT_TYPE = "OutputType"
FIELD_INPUT_TYPES = "InputTypes"
FIELD_SETTINGS = "Settings"
FIELD_SETTING_KEY = "Key"
FIELD_SETTING_VALUE = "Value"

# The top-level key of a document holding several presets.
PRESETS_DOCUMENT_ROOT = "ConversionPresets"

# Options passed to `yaml.dump` whenever presets are written out.
YAML_DUMP_OPTIONS = {
    "default_flow_style": False,
    "sort_keys": False,
    "allow_unicode": True,
    "indent": 4,
    "width": 220,
}
