"""OperationResult and the error taxonomy raised by backend adapters.

Adapters signal failures by raising a ``ScreensaverError`` subclass; the
dispatcher turns every such exception into an ``OperationResult`` so callers
always get a value back, never a traceback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from screensaver_any.types import Backend, Operation, Status


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------

class ScreensaverError(Exception):
    """Base class; ``status`` names the taxonomy class of the failure."""

    status: Status = Status.EXECUTION_FAILURE

    def __init__(self, message: str, *, backend: Backend | None = None,
                 raw: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.backend = backend
        self.raw = raw


class NoBackendDetected(ScreensaverError):
    status = Status.NO_BACKEND

    def __init__(self, message: str = "Can't detect any known screensaver running") -> None:
        super().__init__(message)


class UnsupportedOperation(ScreensaverError):
    status = Status.UNSUPPORTED

    def __init__(self, backend: Backend, operation: Operation) -> None:
        super().__init__(
            f"{operation.label} is not supported on {backend.value}",
            backend=backend,
        )
        self.operation = operation


class ExecutionFailure(ScreensaverError):
    status = Status.EXECUTION_FAILURE


class ParseFailure(ScreensaverError):
    status = Status.PARSE_FAILURE


class UnknownBackend(ScreensaverError):
    status = Status.UNKNOWN_BACKEND

    def __init__(self, value: object) -> None:
        known = ", ".join(b.value for b in Backend)
        super().__init__(f"Unknown screensaver '{value}' (known: {known})")
        self.value = value


class InvalidTimeout(ScreensaverError):
    status = Status.INVALID_ARGUMENT

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid timeout {value!r}: must be a whole number of seconds >= 0")
        self.value = value


# ------------------------------------------------------------------
# Result
# ------------------------------------------------------------------

@dataclass(frozen=True)
class OperationResult:
    status: Status
    message: str = "OK"
    payload: Any = None
    backend: Backend | None = None
    raw: str | None = None

    def __post_init__(self) -> None:
        if (self.status is Status.SUCCESS) != (self.payload is not None):
            raise ValueError(
                f"payload must be present iff status is success "
                f"(status={self.status.value}, payload={self.payload!r})"
            )

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS

    @classmethod
    def success(cls, payload: Any, backend: Backend | None = None,
                raw: str | None = None) -> OperationResult:
        return cls(Status.SUCCESS, "OK", payload, backend, raw)

    @classmethod
    def from_error(cls, exc: ScreensaverError,
                   backend: Backend | None = None) -> OperationResult:
        return cls(exc.status, exc.message, None, exc.backend or backend, exc.raw)

    def to_dict(self) -> dict:
        payload = self.payload
        if isinstance(payload, Backend):
            payload = payload.value
        return {
            "status": self.status.value,
            "code": self.status.code,
            "message": self.message,
            "payload": payload,
            "backend": self.backend.value if self.backend else None,
            "raw": self.raw,
        }
