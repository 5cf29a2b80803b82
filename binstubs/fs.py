"""binstubs.fs

Atomic writer for generated stubs.

A stub is rendered into a temp file next to its target and moved into place
with :func:`os.replace`, so an interrupted run never leaves a half-written
script on disk and an unchanged input always yields byte-identical output.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, TextIO

EXECUTABLE_MODE = 0o755


def write_executable_atomic(
    path: Path,
    write_fn: Callable[[TextIO], None],
    *,
    mode: int = EXECUTABLE_MODE,
    encoding: str = "utf-8",
) -> None:
    """Write *path* through *write_fn* and mark it executable.

    Any existing file is replaced. The parent directory must already exist.
    """

    p = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        # newline="\n" keeps the shebang line free of "\r" on every platform.
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.chmod(tmp_path, mode)
        os.replace(tmp_path, p)
    finally:
        # Only left behind when the write or the replace failed.
        if tmp_path.exists():
            tmp_path.unlink()


def write_text_executable(path: Path, text: str, *, mode: int = EXECUTABLE_MODE) -> None:
    """Write *text* to *path* atomically with permission bits *mode*."""

    def _write(f: TextIO) -> None:
        f.write(text)

    write_executable_atomic(Path(path), _write, mode=mode)
