"""Identifier enums shared by the detector, adapters and dispatcher."""

from __future__ import annotations

from enum import Enum


class Backend(Enum):
    KDE = "kde"
    GNOME = "gnome"
    CINNAMON = "cinnamon"
    XSCREENSAVER = "xscreensaver"

    def __str__(self) -> str:
        return self.value


class Operation(Enum):
    """Uniform operations; each value is the adapter method name."""

    GET_TIMEOUT = "get_timeout"
    SET_TIMEOUT = "set_timeout"
    ENABLE = "enable"
    DISABLE = "disable"
    IS_ENABLED = "is_enabled"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    IS_ACTIVE = "is_active"
    PREVENT_ACTIVATION = "prevent_activation"

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")


class Status(Enum):
    SUCCESS = "success"
    UNSUPPORTED = "unsupported"
    NO_BACKEND = "no_backend"
    EXECUTION_FAILURE = "execution_failure"
    PARSE_FAILURE = "parse_failure"
    UNKNOWN_BACKEND = "unknown_backend"
    INVALID_ARGUMENT = "invalid_argument"

    @property
    def code(self) -> int:
        """HTTP-like status code, as used by the result envelopes."""
        return _STATUS_CODES[self]

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_STATUS_CODES: dict[Status, int] = {
    Status.SUCCESS: 200,
    Status.UNSUPPORTED: 501,
    Status.NO_BACKEND: 412,
    Status.EXECUTION_FAILURE: 500,
    Status.PARSE_FAILURE: 500,
    Status.UNKNOWN_BACKEND: 400,
    Status.INVALID_ARGUMENT: 400,
}

_EXIT_CODES: dict[Status, int] = {
    Status.SUCCESS: 0,
    Status.EXECUTION_FAILURE: 1,
    Status.PARSE_FAILURE: 1,
    Status.NO_BACKEND: 2,
    Status.UNKNOWN_BACKEND: 2,
    Status.INVALID_ARGUMENT: 2,
    Status.UNSUPPORTED: 3,
}
