"""SubprocessSystemAdapter — real implementation of ISystemAdapter."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

import psutil

from screensaver_any.platform.system_adapter import CommandResult, ISystemAdapter

logger = logging.getLogger(__name__)


class SubprocessSystemAdapter(ISystemAdapter):
    """Executes real subprocess calls and reads the real process table."""

    def run(self, argv: Sequence[str], capture_stdout: bool = True,
            capture_stderr: bool = True) -> CommandResult:
        logger.debug("Running %s", " ".join(argv))
        try:
            r = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE if capture_stdout else None,
                stderr=subprocess.PIPE if capture_stderr else None,
                text=True,
            )
        except OSError as e:
            return CommandResult(stdout="" if capture_stdout else None,
                                 stderr=str(e), returncode=-1)
        return CommandResult(stdout=r.stdout, stderr=r.stderr, returncode=r.returncode)

    def resolve_on_path(self, name: str) -> bool:
        return shutil.which(name) is not None

    def process_exists(self, name: str) -> bool:
        for proc in psutil.process_iter(["name"]):
            if proc.info["name"] == name:
                return True
        return False
