"""ScreensaverAdapter — base class for per-backend implementations.

Every uniform operation is a method here. The default implementation raises
``UnsupportedOperation`` straight away, before touching any process or file,
so a backend only overrides what it actually supports.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import NoReturn, Sequence

from screensaver_any.platform.file_adapter import IFileAdapter
from screensaver_any.platform.system_adapter import CommandResult, ISystemAdapter
from screensaver_any.result import ExecutionFailure, ParseFailure, UnsupportedOperation
from screensaver_any.types import Backend, Operation

logger = logging.getLogger(__name__)


def timeout_minutes(seconds: int) -> int:
    """Whole minutes stored for a requested timeout: truncated, at least 1."""
    return max(1, int(seconds) // 60)


class ScreensaverAdapter(ABC):
    backend: Backend

    def __init__(self, system: ISystemAdapter, files: IFileAdapter,
                 home: str | None = None) -> None:
        self.system = system
        self.files = files
        self.home = home or os.path.expanduser("~")

    # -- uniform operations ---------------------------------------------

    def get_timeout(self) -> int:
        """Idle timeout in seconds."""
        self._unsupported(Operation.GET_TIMEOUT)

    def set_timeout(self, seconds: int) -> int:
        """Store a new idle timeout; returns the value now in effect."""
        self._unsupported(Operation.SET_TIMEOUT)

    def enable(self) -> bool:
        self._unsupported(Operation.ENABLE)

    def disable(self) -> bool:
        self._unsupported(Operation.DISABLE)

    def is_enabled(self) -> bool:
        self._unsupported(Operation.IS_ENABLED)

    @abstractmethod
    def activate(self) -> bool:
        """Blank and lock the screen now."""

    def deactivate(self) -> bool:
        self._unsupported(Operation.DEACTIVATE)

    def is_active(self) -> bool:
        self._unsupported(Operation.IS_ACTIVE)

    def prevent_activation(self) -> bool:
        """Reset the idle timer so the screensaver does not kick in."""
        self._unsupported(Operation.PREVENT_ACTIVATION)

    # -- helpers ----------------------------------------------------------

    def _unsupported(self, operation: Operation) -> NoReturn:
        raise UnsupportedOperation(self.backend, operation)

    def _path(self, *parts: str) -> str:
        return os.path.join(self.home, *parts)

    def _run(self, argv: Sequence[str], capture_stdout: bool = True) -> CommandResult:
        """Run a command, raising ExecutionFailure on a non-zero exit."""
        logger.debug("[%s] %s", self.backend.value, " ".join(argv))
        result = self.system.run(argv, capture_stdout=capture_stdout, capture_stderr=True)
        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            message = f"{argv[0]} failed (exit {result.returncode})"
            if detail:
                message += f": {detail}"
            raise ExecutionFailure(message, backend=self.backend, raw=detail or None)
        return result

    def _read(self, path: str) -> str:
        try:
            return self.files.read_text(path)
        except OSError as e:
            raise ExecutionFailure(f"Can't read {path}: {e}", backend=self.backend) from e

    def _write(self, path: str, content: str) -> None:
        try:
            self.files.write_text(path, content)
        except OSError as e:
            raise ExecutionFailure(f"Can't write {path}: {e}", backend=self.backend) from e

    def _parse_bool(self, text: str | None, true_marker: str, false_marker: str,
                    source: str) -> bool:
        """Map command output to a boolean; ParseFailure if neither marker is present."""
        text = text or ""
        if true_marker in text:
            return True
        if false_marker in text:
            return False
        raise ParseFailure(
            f"Can't check, {source} gave unrecognized response '{text.strip()}'",
            backend=self.backend, raw=text,
        )


class CommandToolAdapter(ScreensaverAdapter):
    """Backends driven by a ``*-screensaver-command`` tool (-l, -d, -q)."""

    COMMAND: str

    def activate(self) -> bool:
        self._run([self.COMMAND, "-l"])
        return True

    def deactivate(self) -> bool:
        self._run([self.COMMAND, "-d"])
        return True

    def is_active(self) -> bool:
        out = self._run([self.COMMAND, "-q"]).stdout
        return self._parse_bool(out, "is active", "is inactive", f"{self.COMMAND} -q")
