"""IFileAdapter interface and LocalFileAdapter with atomic writes."""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod


class IFileAdapter(ABC):
    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the whole file; raises FileNotFoundError / OSError."""

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Replace the file; all-or-nothing, raises OSError."""

    @abstractmethod
    def exists(self, path: str) -> bool: ...


class LocalFileAdapter(IFileAdapter):
    """Reads and atomically rewrites files on the local filesystem."""

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        dir_path = os.path.dirname(os.path.abspath(path))
        fd, tmp_path = tempfile.mkstemp(dir=dir_path, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if os.path.exists(path):
                os.chmod(tmp_path, os.stat(path).st_mode & 0o7777)
            os.replace(tmp_path, path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)
