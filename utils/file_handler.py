from pathlib import Path

from app.errors import TextFileError


def single_line(text: str) -> str:
    """Collapse line breaks, tabs and repeated spaces into single spaces; the input box is one line."""
    return " ".join((text or "").split())


def load_text_file(file_path: str) -> str:
    """Read a .txt file for custom text as one typeable line."""
    path = Path(file_path)
    if path.suffix.lower() != ".txt":
        raise TextFileError(f"Not a .txt file: {path.name}")
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise TextFileError(str(e)) from e
    text = single_line(text)
    if not text:
        raise TextFileError(f"{path.name} is empty")
    return text
