"""
Utilities Package for the Conversion Preset engine.

Modules:
    - format_utils.py: Helpers turning presets and their settings into
      human-readable strings for logging and command-line output.
"""
