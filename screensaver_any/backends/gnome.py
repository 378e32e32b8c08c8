"""GNOME screensaver: gsettings keys plus gnome-screensaver-command."""

from __future__ import annotations

import logging
import re

from screensaver_any.backends.base import CommandToolAdapter, timeout_minutes
from screensaver_any.result import ParseFailure
from screensaver_any.types import Backend

logger = logging.getLogger(__name__)

GSETTINGS = "gsettings"
IDLE_DELAY = ("org.gnome.desktop.session", "idle-delay")
DISABLE_LOCK_SCREEN = ("org.gnome.desktop.lockdown", "disable-lock-screen")

_UINT32 = re.compile(r"^uint32\s+(\d+)$")


class GnomeAdapter(CommandToolAdapter):
    backend = Backend.GNOME
    COMMAND = "gnome-screensaver-command"

    def get_timeout(self) -> int:
        out = self._run([GSETTINGS, "get", *IDLE_DELAY]).stdout or ""
        m = _UINT32.match(out.strip())
        if not m:
            raise ParseFailure("Can't parse gsettings get output",
                               backend=self.backend, raw=out)
        return int(m.group(1))

    def set_timeout(self, seconds: int) -> int:
        secs = timeout_minutes(seconds) * 60
        self._run([GSETTINGS, "set", *IDLE_DELAY, str(secs)])
        logger.info("Set GNOME idle-delay to %d seconds", secs)
        return self.get_timeout()

    def enable(self) -> bool:
        self._run([GSETTINGS, "set", *DISABLE_LOCK_SCREEN, "false"])
        return True

    def disable(self) -> bool:
        self._run([GSETTINGS, "set", *DISABLE_LOCK_SCREEN, "true"])
        return True

    def is_enabled(self) -> bool:
        out = self._run([GSETTINGS, "get", *DISABLE_LOCK_SCREEN]).stdout
        locked_out = self._parse_bool(out, "true", "false", "gsettings get disable-lock-screen")
        return not locked_out
