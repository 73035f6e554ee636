# app/calculation.py
import math

from app.state import Stats

CHARS_PER_WORD = 5


def _round(value: float) -> int:
    # half away from zero for the non-negative metrics below
    return int(math.floor(value + 0.5))


def count_chars(target_text: str, current_input: str):
    """Positional comparison of the typed input against the target."""
    correct = 0
    incorrect = 0
    for i, ch in enumerate(current_input):
        if i < len(target_text) and ch == target_text[i]:
            correct += 1
        else:
            incorrect += 1  # includes anything typed past the end of the target
    return correct, incorrect


def compute_stats(target_text: str, current_input: str, elapsed_seconds: float) -> Stats:
    """
    WPM = (correct chars / 5) / minutes
    Raw WPM uses every typed char. Accuracy is 100 for an empty input.
    """
    correct, incorrect = count_chars(target_text, current_input)
    typed = len(current_input)

    minutes = elapsed_seconds / 60.0
    if minutes > 0:
        wpm = _round((correct / CHARS_PER_WORD) / minutes)
        raw_wpm = _round((typed / CHARS_PER_WORD) / minutes)
    else:
        wpm = 0
        raw_wpm = 0

    accuracy = _round(correct / typed * 100.0) if typed > 0 else 100

    return Stats(
        wpm=wpm,
        raw_wpm=raw_wpm,
        accuracy=accuracy,
        correct_chars=correct,
        incorrect_chars=incorrect,
        time_elapsed=elapsed_seconds,
        total_chars=typed,
    )
