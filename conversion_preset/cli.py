"""
Command-Line Interface (CLI) setup for the Conversion Preset engine.

This module uses Python's `argparse` to define and parse the command-line
arguments of the preset document checker.
"""
import argparse
from pathlib import Path
from typing import List, Optional

from .config.common import DEFAULT_LOG_LEVEL, LOG_LEVELS


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the preset document checker.

    Args:
        argv: The arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: An object containing the parsed command-line
                            arguments as attributes.
    """
    parser = argparse.ArgumentParser(
        description="Validate a YAML document of conversion presets."
    )
    parser.add_argument(
        "document", type=Path, help="Path to the YAML document holding the presets."
    )
    parser.add_argument(
        "--show-settings", action="store_true",
        help="Print the output type, input types and settings of every preset."
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS,
        help="Set the logging level."
    )

    return parser.parse_args(argv)
