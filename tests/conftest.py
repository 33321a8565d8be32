import pytest

from conversion_preset.domain.formats import OutputType
from conversion_preset.domain.preset import ConversionPreset


@pytest.fixture
def mp3_preset() -> ConversionPreset:
    return ConversionPreset("My MP3", OutputType.Mp3, ["wav", "flac"])


@pytest.fixture
def changes(mp3_preset: ConversionPreset) -> list[str]:
    """Field names reported by `mp3_preset` after construction."""
    recorded: list[str] = []
    mp3_preset.subscribe(recorded.append)
    return recorded
