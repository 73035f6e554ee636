import pytest

from app.errors import TextFileError
from app.state import GameStatus
from services.config_resolver import ResetRequest
from utils.file_handler import load_text_file, single_line


def test_line_breaks_become_single_spaces(tmp_path):
    p = tmp_path / "custom.txt"
    p.write_bytes(b"first line\r\nsecond line\r\n\r\n")

    assert load_text_file(str(p)) == "first line second line"


def test_single_line_collapses_whitespace():
    assert single_line("  ab\n\ncd\tef  ") == "ab cd ef"
    assert single_line("") == ""


def test_rejects_other_extensions(tmp_path):
    p = tmp_path / "custom.md"
    p.write_text("text")

    with pytest.raises(TextFileError):
        load_text_file(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(TextFileError):
        load_text_file(str(tmp_path / "nope.txt"))


def test_blank_file(tmp_path):
    p = tmp_path / "blank.txt"
    p.write_text("  \n\n")

    with pytest.raises(TextFileError):
        load_text_file(str(p))


def test_multi_line_file_can_be_typed_to_completion(tmp_path, ready_engine):
    p = tmp_path / "two_lines.txt"
    p.write_text("ab\ncd\n")
    ready_engine.reset(ResetRequest(custom_text=load_text_file(str(p))))

    ready_engine.handle_input("ab cd")

    assert ready_engine.text == "ab cd"
    assert ready_engine.stats.accuracy == 100
    assert ready_engine.stats.incorrect_chars == 0
    assert ready_engine.status is GameStatus.FINISHED
