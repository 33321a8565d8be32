"""
Enumerations describing conversion targets.

Member names are the symbolic names written to serialized presets and stored as
setting values, so renaming a member breaks existing documents.
"""

from enum import Enum


class OutputType(Enum):
    """The output formats a preset can convert to."""

    Mp3 = "mp3"
    Ogg = "ogg"
    Flac = "flac"
    Wav = "wav"
    Aac = "aac"
    Mkv = "mkv"
    Mp4 = "mp4"

    @property
    def extension(self) -> str:
        """The file extension of converted files, without the leading dot."""
        return self.value


class EncodingMode(Enum):
    """Encoding modes selectable through the `Encoding` setting of an MP3 preset."""

    Mp3VBR = "vbr"
    Mp3CBR = "cbr"
