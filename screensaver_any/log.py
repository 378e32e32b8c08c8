"""Custom logging levels for screensaver-any.

Levels (ascending):
    TRACE =  5  — decisions made while working out what to talk to
    DEBUG = 10  — commands run, resolved backend, failed operations
    INFO  = 20  — timeout changes written, CLI start (default)

What goes out at TRACE:
    * ``detect``: each probe in order ("Checking whether xscreensaver process
      exists ...", "qdbus exists", "org.kde.screensaver dbus service exists")
      and the conclusion ("Concluding screensaver is kde")
    * ``backends.kde``: which of kscreensaverrc / kscreenlockerrc exists, and
      whether ``[Daemon] Timeout`` was replaced, added or defaulted to 5 minutes

``screensaver-any --trace`` sets the ``screensaver_any`` logger to TRACE and
shows it on stderr; ``--debug`` stops at DEBUG, so probe chatter stays out of
ordinary debugging output.

Usage:
    import screensaver_any.log  # imported by the package __init__
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")
"""

import logging

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Another library may already have added Logger.trace; keep theirs
if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _trace  # type: ignore[attr-defined]
