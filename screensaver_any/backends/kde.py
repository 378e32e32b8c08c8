"""KDE Plasma screen locker (kscreenlocker).

Lock state goes through the ``org.kde.screensaver`` D-Bus service via
``qdbus``. The idle timeout lives in one of two KConfig files:

* legacy ``~/.kde/share/config/kscreensaverrc`` — ``Timeout`` in seconds
* modern ``~/.config/kscreenlockerrc`` — ``[Daemon] Timeout`` in minutes,
  5 when the key is missing

The legacy file wins when both exist.
"""

from __future__ import annotations

import logging
import re

from screensaver_any.backends.base import ScreensaverAdapter, timeout_minutes
from screensaver_any.confdoc import IniDocument
from screensaver_any.result import ExecutionFailure, ParseFailure
from screensaver_any.types import Backend

logger = logging.getLogger(__name__)

QDBUS = "qdbus"
DBUS_SERVICE = "org.kde.screensaver"
DBUS_OBJECT = "/ScreenSaver"

LEGACY_CONFIG = (".kde", "share", "config", "kscreensaverrc")
MODERN_CONFIG = (".config", "kscreenlockerrc")
MODERN_SECTION = "Daemon"
DEFAULT_TIMEOUT_MINUTES = 5

_DIGITS = re.compile(r"\d+")


class KDEAdapter(ScreensaverAdapter):
    backend = Backend.KDE

    def _qdbus(self, method: str):
        return self._run([QDBUS, DBUS_SERVICE, DBUS_OBJECT, method])

    def activate(self) -> bool:
        self._qdbus("Lock")
        return True

    def is_active(self) -> bool:
        out = self._qdbus("GetActive").stdout
        return self._parse_bool(out, "true", "false", "GetActive")

    def prevent_activation(self) -> bool:
        self._qdbus("SimulateUserActivity")
        return True

    # -- timeout ----------------------------------------------------------

    def get_timeout(self) -> int:
        return self._timeout()

    def set_timeout(self, seconds: int) -> int:
        return self._timeout(timeout_minutes(seconds))

    def _timeout(self, minutes: int | None = None) -> int:
        """Read the timeout, first writing *minutes* when given."""
        legacy = self._path(*LEGACY_CONFIG)
        logger.trace("Checking %s ...", legacy)  # type: ignore[attr-defined]
        if self.files.exists(legacy):
            logger.trace("%s exists", legacy)  # type: ignore[attr-defined]
            return self._legacy_timeout(legacy, minutes)
        logger.trace("%s doesn't exist", legacy)  # type: ignore[attr-defined]

        modern = self._path(*MODERN_CONFIG)
        logger.trace("Checking %s ...", modern)  # type: ignore[attr-defined]
        if self.files.exists(modern):
            logger.trace("%s exists", modern)  # type: ignore[attr-defined]
            return self._modern_timeout(modern, minutes)
        logger.trace("%s doesn't exist", modern)  # type: ignore[attr-defined]

        raise ExecutionFailure(
            f"Cannot get/set screensaver timeout: neither {legacy} nor {modern} exists",
            backend=self.backend,
        )

    def _legacy_timeout(self, path: str, minutes: int | None) -> int:
        doc = IniDocument(self._read(path))
        if minutes is not None:
            try:
                doc.replace("Timeout", str(minutes * 60))
            except KeyError:
                raise ParseFailure(f"Can't substitute Timeout setting in {path}",
                                   backend=self.backend) from None
            self._write(path, doc.text)
            logger.info("Set Timeout=%d in %s", minutes * 60, path)

        value = doc.get("Timeout")
        if value is None or not _DIGITS.fullmatch(value):
            raise ParseFailure(f"Can't get Timeout setting in {path}",
                               backend=self.backend, raw=value)
        return int(value)

    def _modern_timeout(self, path: str, minutes: int | None) -> int:
        doc = IniDocument(self._read(path))
        if minutes is not None:
            if doc.find("Timeout", MODERN_SECTION) is not None:
                logger.trace("Replacing Timeout setting in %s ...", path)  # type: ignore[attr-defined]
            else:
                logger.trace("Adding Timeout setting in %s ...", path)  # type: ignore[attr-defined]
            doc.set("Timeout", str(minutes), MODERN_SECTION)
            self._write(path, doc.text)
            logger.info("Set [%s] Timeout=%d in %s", MODERN_SECTION, minutes, path)

        value = doc.get("Timeout", MODERN_SECTION)
        if value is None:
            logger.trace("Assuming default of %d minutes in %s",  # type: ignore[attr-defined]
                         DEFAULT_TIMEOUT_MINUTES, path)
            return DEFAULT_TIMEOUT_MINUTES * 60
        if not _DIGITS.fullmatch(value):
            raise ParseFailure(f"Can't get Timeout setting in {path}",
                               backend=self.backend, raw=value)
        logger.trace("Got Timeout setting from %s", path)  # type: ignore[attr-defined]
        return int(value) * 60
