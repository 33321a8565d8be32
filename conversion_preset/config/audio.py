"""
Configuration settings related to audio conversion presets.

This module defines the setting keys understood by audio output formats, the
default values seeded into a preset when its output format is chosen, and the
input file extensions the application knows how to convert from.
"""

# ======================================================================================
# Input File Identification
# ======================================================================================

# Extensions (without the leading dot) of the audio files a preset can accept as input.
# Presets may list other extensions; the command-line tool only warns about them.
_BASE_AUDIO_EXTENSIONS = ("flac", "wav", "mp3", "ogg", "opus", "m4a", "m4b", "aac", "wma")

# Video containers whose audio track can be extracted and converted.
_VIDEO_AUDIO_SOURCE_EXTENSIONS = ("mp4", "mkv", "avi", "mov", "webm")

# The final, combined tuple of all recognised input extensions.
KNOWN_INPUT_EXTENSIONS = _BASE_AUDIO_EXTENSIONS + _VIDEO_AUDIO_SOURCE_EXTENSIONS


# ======================================================================================
# Setting Keys
# ======================================================================================

# Selects the encoding mode of an MP3 output (see `EncodingMode`).
SETTING_ENCODING = "Encoding"

# Target bitrate in kbps, stored as a decimal string.
SETTING_BITRATE = "Bitrate"


# ======================================================================================
# Default Setting Values
# ======================================================================================

# The encoding seeded into new MP3 presets. It is a placeholder name that hosts
# resolve to their own variable bitrate profile.
DEFAULT_MP3_ENCODING = "VBR-default-name"

# 190 kbps is the average bitrate of a LAME V2 variable bitrate encode.
DEFAULT_MP3_BITRATE = "190"

# 160 kbps is roughly Vorbis quality 5.
DEFAULT_OGG_BITRATE = "160"
