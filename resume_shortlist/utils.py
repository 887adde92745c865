# utils.py
import mimetypes
from pathlib import PurePath
from typing import Tuple

_EXTENSION_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


# ---------- File Helpers ----------
def guess_mime_type(file_name: str) -> str:
    suffix = PurePath(file_name).suffix.lower()
    if suffix in _EXTENSION_MIME_TYPES:
        return _EXTENSION_MIME_TYPES[suffix]

    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or "application/octet-stream"


def format_file_size(size: int) -> str:
    """Human readable size, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"

    exponent = 0
    scaled = float(size)
    while scaled >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        scaled /= 1024
        exponent += 1
    value = round(scaled, 2)
    # drop trailing zeros the same way "1.50" -> "1.5"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"


def parse_fake_file(spec: str) -> Tuple[str, int]:
    """Parse a ``NAME:SIZE`` descriptor used to simulate uploads."""
    name, sep, size = spec.rpartition(":")
    if not sep or not name:
        raise ValueError(f"Expected NAME:SIZE, got {spec!r}")
    try:
        size_bytes = int(size.replace("_", ""))
    except ValueError as exc:
        raise ValueError(f"Invalid size in {spec!r}") from exc
    if size_bytes < 0:
        raise ValueError(f"Size must be non-negative in {spec!r}")
    return name, size_bytes
