"""screensaver-any: common interface to screensaver/screenlocker functions.

Supported screensavers: KDE Plasma's kscreenlocker (``kde``), GNOME
screensaver (``gnome``), Cinnamon screensaver (``cinnamon``) and
``xscreensaver``.
"""

import screensaver_any.log  # noqa: F401  registers TRACE level and logger.trace()
from screensaver_any.__version__ import __version__
from screensaver_any.dispatch import (
    Screensaver,
    activate_screensaver,
    deactivate_screensaver,
    detect_screensaver,
    disable_screensaver,
    enable_screensaver,
    get_screensaver_timeout,
    prevent_screensaver_activated,
    screensaver_is_active,
    screensaver_is_enabled,
    set_screensaver_timeout,
)
from screensaver_any.result import (
    ExecutionFailure,
    InvalidTimeout,
    NoBackendDetected,
    OperationResult,
    ParseFailure,
    ScreensaverError,
    UnknownBackend,
    UnsupportedOperation,
)
from screensaver_any.types import Backend, Operation, Status

__all__ = [
    "Backend",
    "ExecutionFailure",
    "InvalidTimeout",
    "NoBackendDetected",
    "Operation",
    "OperationResult",
    "ParseFailure",
    "Screensaver",
    "ScreensaverError",
    "Status",
    "UnknownBackend",
    "UnsupportedOperation",
    "__version__",
    "activate_screensaver",
    "deactivate_screensaver",
    "detect_screensaver",
    "disable_screensaver",
    "enable_screensaver",
    "get_screensaver_timeout",
    "prevent_screensaver_activated",
    "screensaver_is_active",
    "screensaver_is_enabled",
    "set_screensaver_timeout",
]
