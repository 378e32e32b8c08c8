"""Cinnamon screensaver: lock, unlock and query only."""

from __future__ import annotations

from screensaver_any.backends.base import CommandToolAdapter
from screensaver_any.types import Backend


class CinnamonAdapter(CommandToolAdapter):
    backend = Backend.CINNAMON
    COMMAND = "cinnamon-screensaver-command"
