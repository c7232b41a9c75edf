"""File helpers shared by the JSON repositories.

Every repository instance for the same file shares one re-entrant lock,
so a read-check-write sequence spanning several repository calls can be
made atomic with ``with repo.locked():``. Writes go to a temporary file
that replaces the target in one step, so readers never see a truncated
file.
"""

from __future__ import annotations

import os
import tempfile
import threading
from pathlib import Path

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def lock_for(file_path: Path) -> threading.RLock:
    """Return the process-wide lock for ``file_path``."""
    key = file_path.resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.RLock()
        return lock


def write_atomic(file_path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
        os.replace(tmp_name, file_path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def ensure_file(file_path: Path) -> None:
    with lock_for(file_path):
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            write_atomic(file_path, "[]")
