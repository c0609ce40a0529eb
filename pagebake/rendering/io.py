"""File I/O operations for rendered output."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(
    path: Path, text: str, mode: int = 0o644, encoding: str = "utf-8"
) -> None:
    """Write text to a file atomically using a temporary file.

    The parent directory must already exist.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
        encoding: Text encoding
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
