"""ISystemAdapter interface — abstraction for subprocess/process-table calls."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass
class CommandResult:
    stdout: str | None
    stderr: str | None
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ISystemAdapter(ABC):
    @abstractmethod
    def run(self, argv: Sequence[str], capture_stdout: bool = True,
            capture_stderr: bool = True) -> CommandResult:
        """Run *argv* to completion.

        Output streams that are not captured are inherited from the caller
        and reported as ``None``. A command that cannot be started at all is
        reported with ``returncode == -1`` and the error text in ``stderr``.
        """

    @abstractmethod
    def resolve_on_path(self, name: str) -> bool: ...

    @abstractmethod
    def process_exists(self, name: str) -> bool: ...
