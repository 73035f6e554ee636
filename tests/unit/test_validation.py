import logging

from app.state import Difficulty
from app.validation import enum_member, non_blank, positive_int


def test_positive_int():
    assert positive_int(None, "x") is None
    assert positive_int(5, "x") == 5
    assert positive_int(0, "x") is None
    assert positive_int(False, "x") is None


def test_rejections_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="app.validation"):
        positive_int(-1, "word count")

    assert "word count" in caplog.text


def test_enum_member():
    assert enum_member("advanced", Difficulty, "difficulty") is Difficulty.ADVANCED
    assert enum_member(Difficulty.SIMPLE, Difficulty, "difficulty") is Difficulty.SIMPLE
    assert enum_member("nope", Difficulty, "difficulty") is None


def test_non_blank_keeps_text_verbatim():
    assert non_blank(" a b ") == " a b "
    assert non_blank("") is None
    assert non_blank(None) is None
