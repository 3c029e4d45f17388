"""Filesystem utilities for htmlbuild."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class SaveError(OSError):
    """Raised when rendered HTML cannot be written to its destination."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to save HTML to {path}: {reason}")
        self.path = path


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def save_html(path: PathLike, content: str) -> Path:
    """Write a rendered document once, wrapping any I/O failure in SaveError."""

    file_path = Path(path)
    try:
        return write_text(file_path, content)
    except OSError as exc:
        raise SaveError(file_path, exc.strerror or str(exc)) from exc


__all__ = ["PathLike", "SaveError", "save_html", "write_text"]
