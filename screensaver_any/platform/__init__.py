"""Platform layer: process execution and config file access."""

from screensaver_any.platform.file_adapter import IFileAdapter, LocalFileAdapter
from screensaver_any.platform.subprocess_impl import SubprocessSystemAdapter
from screensaver_any.platform.system_adapter import CommandResult, ISystemAdapter

__all__ = [
    "CommandResult",
    "IFileAdapter",
    "ISystemAdapter",
    "LocalFileAdapter",
    "SubprocessSystemAdapter",
]
