from pathlib import Path

import pytest

from conversion_preset.cli import get_args
from main import main

VALID_DOCUMENT = """\
ConversionPresets:
  - Name: My MP3
    OutputType: Mp3
    InputTypes: [wav, flac]
    Settings:
      - {Key: Bitrate, Value: "256"}
  - Name: Small OGG
    OutputType: Ogg
    InputTypes: [mp3]
"""

DUPLICATE_DOCUMENT = """\
ConversionPresets:
  - Name: Same
    OutputType: Mp3
  - Name: Same
    OutputType: Ogg
"""


@pytest.fixture
def write_document(tmp_path: Path):
    def _write(text: str) -> Path:
        path = tmp_path / "presets.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def test_get_args_defaults() -> None:
    args = get_args(["presets.yaml"])
    assert args.document == Path("presets.yaml")
    assert args.show_settings is False


def test_get_args_log_level_is_case_insensitive() -> None:
    assert get_args(["presets.yaml", "--log-level", "debug"]).log_level == "DEBUG"


def test_valid_document_exits_zero(write_document, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_document(VALID_DOCUMENT)
    assert main([str(path), "--show-settings"]) == 0

    out = capsys.readouterr().out
    assert "My MP3 [Mp3] <- wav, flac" in out
    assert "Encoding=VBR-default-name, Bitrate=256" in out
    assert "Bitrate=160" in out


def test_duplicate_names_exit_one(write_document) -> None:
    path = write_document(DUPLICATE_DOCUMENT)
    assert main([str(path)]) == 1


def test_unreadable_document_exits_one(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.yaml")]) == 1


def test_malformed_document_exits_one(write_document) -> None:
    path = write_document("ConversionPresets:\n  - Name: x\n    OutputType: Opus\n")
    assert main([str(path)]) == 1
