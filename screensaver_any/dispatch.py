"""Screensaver — the uniform, backend-agnostic operation surface.

Each operation resolves the backend (explicit argument, configured default,
or a fresh detection), calls the matching adapter method and folds the
outcome into an ``OperationResult``. Nothing is cached between calls.

Module-level functions delegate to the ``DEFAULT`` instance, which tests can
replace for dependency injection.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from screensaver_any.backends import get_adapter, parse_backend
from screensaver_any.detect import detect_backend
from screensaver_any.platform.file_adapter import IFileAdapter, LocalFileAdapter
from screensaver_any.platform.subprocess_impl import SubprocessSystemAdapter
from screensaver_any.platform.system_adapter import ISystemAdapter
from screensaver_any.result import (
    InvalidTimeout,
    NoBackendDetected,
    OperationResult,
    ScreensaverError,
)
from screensaver_any.types import Backend, Operation

logger = logging.getLogger(__name__)

BackendArg = Optional[Union[Backend, str]]


def check_timeout(seconds: Any) -> int:
    """Return *seconds* if it is an int >= 0 (bools excluded); InvalidTimeout otherwise."""
    if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 0:
        raise InvalidTimeout(seconds)
    return seconds


class Screensaver:

    def __init__(self, system: ISystemAdapter | None = None,
                 files: IFileAdapter | None = None,
                 home: str | None = None,
                 default_backend: BackendArg = None) -> None:
        self.system = system or SubprocessSystemAdapter()
        self.files = files or LocalFileAdapter()
        self.home = home
        self.default_backend = default_backend

    def detect(self) -> Backend | None:
        return detect_backend(self.system)

    def resolve(self, backend: BackendArg = None) -> Backend:
        """Explicit backend, else the configured default, else detection."""
        if backend is None:
            backend = self.default_backend
        if backend is not None:
            return parse_backend(backend)
        detected = self.detect()
        if detected is None:
            raise NoBackendDetected()
        return detected

    def run(self, operation: Operation | str, *args: Any,
            backend: BackendArg = None) -> OperationResult:
        operation = Operation(operation)
        resolved = None
        try:
            if operation is Operation.SET_TIMEOUT:
                check_timeout(args[0] if args else None)
            resolved = self.resolve(backend)
            adapter = get_adapter(resolved, self.system, self.files, self.home)
            payload = getattr(adapter, operation.value)(*args)
        except ScreensaverError as exc:
            logger.debug("%s failed on %s [%s]: %s", operation.label,
                         resolved.value if resolved else "-", exc.status.value, exc.message)
            return OperationResult.from_error(exc, resolved)
        logger.debug("%s on %s -> %r", operation.label, resolved.value, payload)
        return OperationResult.success(payload, resolved)

    # -- uniform operations ---------------------------------------------

    def get_timeout(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.GET_TIMEOUT, backend=backend)

    def set_timeout(self, seconds: int, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.SET_TIMEOUT, seconds, backend=backend)

    def enable(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.ENABLE, backend=backend)

    def disable(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.DISABLE, backend=backend)

    def is_enabled(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.IS_ENABLED, backend=backend)

    def activate(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.ACTIVATE, backend=backend)

    def deactivate(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.DEACTIVATE, backend=backend)

    def is_active(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.IS_ACTIVE, backend=backend)

    def prevent_activation(self, backend: BackendArg = None) -> OperationResult:
        return self.run(Operation.PREVENT_ACTIVATION, backend=backend)


# Module-level default instance (can be replaced in tests for DI)
DEFAULT: Screensaver = Screensaver()


def detect_screensaver() -> Backend | None:
    return DEFAULT.detect()


def get_screensaver_timeout(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.get_timeout(screensaver)


def set_screensaver_timeout(timeout: int | None = None,
                            screensaver: BackendArg = None) -> OperationResult:
    """Set the idle timeout in seconds; without a timeout, report the current one."""
    if not timeout:
        return DEFAULT.get_timeout(screensaver)
    return DEFAULT.set_timeout(timeout, screensaver)


def enable_screensaver(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.enable(screensaver)


def disable_screensaver(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.disable(screensaver)


def screensaver_is_enabled(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.is_enabled(screensaver)


def activate_screensaver(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.activate(screensaver)


def deactivate_screensaver(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.deactivate(screensaver)


def screensaver_is_active(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.is_active(screensaver)


def prevent_screensaver_activated(screensaver: BackendArg = None) -> OperationResult:
    return DEFAULT.prevent_activation(screensaver)
