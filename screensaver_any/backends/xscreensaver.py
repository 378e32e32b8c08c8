"""xscreensaver: ``xscreensaver-command`` plus the ``~/.xscreensaver`` dotfile."""

from __future__ import annotations

import logging
import re

from screensaver_any.backends.base import ScreensaverAdapter, timeout_minutes
from screensaver_any.confdoc import XResourcesDocument
from screensaver_any.result import ExecutionFailure, ParseFailure
from screensaver_any.types import Backend

logger = logging.getLogger(__name__)

COMMAND = "xscreensaver-command"
CONFIG = ".xscreensaver"
RELOAD = ["killall", "-HUP", "xscreensaver"]

_HMS = re.compile(r"(\d+):(\d+):(\d+)")


class XScreensaverAdapter(ScreensaverAdapter):
    backend = Backend.XSCREENSAVER

    def activate(self) -> bool:
        self._run([COMMAND, "-activate"])
        return True

    def deactivate(self) -> bool:
        # stdout is captured so the "not active" chatter never reaches the user
        self._run([COMMAND, "-deactivate"])
        return True

    def prevent_activation(self) -> bool:
        # -deactivate on an unblanked screen just resets the idle timer
        self._run([COMMAND, "-deactivate"])
        return True

    def get_timeout(self) -> int:
        path = self._path(CONFIG)
        return self._parse_timeout(XResourcesDocument(self._read(path)), path)

    def set_timeout(self, seconds: int) -> int:
        path = self._path(CONFIG)
        hours, minutes = divmod(timeout_minutes(seconds), 60)
        doc = XResourcesDocument(self._read(path))
        try:
            doc.replace("timeout", f"{hours}:{minutes:02d}:00")
        except KeyError:
            raise ParseFailure(f"Can't substitute timeout setting in {path}",
                               backend=self.backend) from None
        self._write(path, doc.text)
        logger.info("Set timeout %d:%02d:00 in %s", hours, minutes, path)

        try:
            self._run(RELOAD)
        except ExecutionFailure as e:
            raise ExecutionFailure(
                f"Wrote {path} but can't kill -HUP xscreensaver: {e.message}",
                backend=self.backend, raw=e.raw,
            ) from e
        return self._parse_timeout(doc, path)

    def _parse_timeout(self, doc: XResourcesDocument, path: str) -> int:
        value = doc.get("timeout")
        m = _HMS.fullmatch(value) if value is not None else None
        if not m:
            raise ParseFailure(f"Can't get timeout setting in {path}",
                               backend=self.backend, raw=value)
        hours, minutes, seconds = (int(g) for g in m.groups())
        return hours * 3600 + minutes * 60 + seconds
