#!/usr/bin/env python3
"""
screensaver-any command-line entry point
"""

from __future__ import annotations

import argparse
import json
import logging
import logging.handlers
import re
import sys
import time
from pathlib import Path

from screensaver_any.__version__ import __version__
from screensaver_any.config import load_config
from screensaver_any.dispatch import BackendArg, Screensaver
from screensaver_any.log import TRACE
from screensaver_any.result import NoBackendDetected, OperationResult
from screensaver_any.types import Backend, Operation

logger = logging.getLogger(__name__)

COMMANDS: dict[str, Operation] = {
    'get-timeout': Operation.GET_TIMEOUT,
    'set-timeout': Operation.SET_TIMEOUT,
    'enable': Operation.ENABLE,
    'disable': Operation.DISABLE,
    'is-enabled': Operation.IS_ENABLED,
    'activate': Operation.ACTIVATE,
    'deactivate': Operation.DEACTIVATE,
    'is-active': Operation.IS_ACTIVE,
    'prevent': Operation.PREVENT_ACTIVATION,
}

# Commands whose payload is worth printing
QUERY_COMMANDS = {'detect', 'get-timeout', 'set-timeout', 'is-enabled', 'is-active'}

_UNITS = {
    's': 1, 'sec': 1, 'secs': 1, 'second': 1, 'seconds': 1,
    'm': 60, 'min': 60, 'mins': 60, 'minute': 60, 'minutes': 60,
    'h': 3600, 'hr': 3600, 'hrs': 3600, 'hour': 3600, 'hours': 3600,
}
_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_DURATION_PART = re.compile(r"\s*(\d+(?:\.\d+)?)\s*([a-z]+)")


def parse_duration(text: str) -> int:
    """Parse '300', '90s', '3min', '1h30m' ... into whole seconds."""
    s = text.strip().lower()
    if _NUMBER.fullmatch(s):
        return int(float(s))
    total = 0.0
    pos = 0
    while pos < len(s):
        m = _DURATION_PART.match(s, pos)
        if not m or m.group(2) not in _UNITS:
            raise argparse.ArgumentTypeError(f"invalid duration: {text!r}")
        total += float(m.group(1)) * _UNITS[m.group(2)]
        pos = m.end()
    if pos == 0:
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}")
    return int(total)


def setup_logging(debug: bool = False, trace: bool = False,
                  log_file: str | None = None) -> logging.Logger:
    """Setup logging to stderr and, optionally, a rotating log file

    Args:
        debug: Enable debug level logging
        trace: Enable trace level logging (every detection probe)
        log_file: Path to log file (no file logging when None)
    """
    log = logging.getLogger('screensaver_any')

    # Drop handlers from an earlier call (main() may run more than once)
    for handler in [h for h in log.handlers if getattr(h, '_cli_handler', False)]:
        log.removeHandler(handler)
        handler.close()

    level = TRACE if trace else logging.DEBUG if debug else logging.INFO
    log.setLevel(level)

    fmt = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handlers: list[logging.Handler] = []

    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=1024*1024,  # 1 MB
                backupCount=3
            )
            file_handler.setLevel(level)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    # Console handler (only warnings unless debugging)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level if (debug or trace) else logging.WARNING)
    handlers.append(console_handler)

    for handler in handlers:
        handler.setFormatter(fmt)
        handler._cli_handler = True  # type: ignore[attr-defined]
        log.addHandler(handler)
    return log


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='screensaver-any',
        description='Common interface to screensaver/screenlocker functions',
    )
    parser.add_argument(
        '-s', '--screensaver',
        type=str.lower,
        choices=[b.value for b in Backend],
        default=None,
        help='Explicitly set screensaver program to use (default: detect)'
    )
    parser.add_argument('--config', type=str, default=None, help='Path to config file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--trace', action='store_true', help='Log every detection probe')
    parser.add_argument('--logfile', type=str, default=None, help='Also log to this file')
    parser.add_argument('--json', action='store_true', help='Print the full result as JSON')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True
    sub.add_parser('detect', help='Detect which screensaver program is currently running')
    sub.add_parser('get-timeout', help='Get screensaver idle timeout, in seconds')
    p = sub.add_parser('set-timeout', help='Set screensaver idle timeout (whole minutes, at least 1)')
    p.add_argument('timeout', type=parse_duration,
                   help='Seconds, or a duration such as 90s, 3min, 1h30m')
    sub.add_parser('enable', help='Enable screensaver that has been previously disabled')
    sub.add_parser('disable', help='Disable screensaver so screen will not lock after being idle')
    sub.add_parser('is-enabled', help='Check whether screensaver is enabled')
    sub.add_parser('activate', help='Activate screensaver immediately and lock screen')
    sub.add_parser('deactivate', help='Deactivate screensaver and unblank the screen')
    sub.add_parser('is-active', help='Check if screensaver is being activated')
    p = sub.add_parser('prevent', help='Prevent screensaver from being activated by resetting idle timer')
    p.add_argument('--loop', action='store_true', help='Keep resetting the idle timer until interrupted')
    p.add_argument('--interval', type=float, default=None,
                   help='Seconds between resets with --loop (default: from config, 30)')

    return parser.parse_args(argv)


def _report(result: OperationResult, as_json: bool = False, show_payload: bool = True) -> int:
    if as_json:
        print(json.dumps(result.to_dict()))
    elif not result.ok:
        print(f"screensaver-any: {result.message}", file=sys.stderr)
    elif show_payload:
        payload = result.payload
        if isinstance(payload, bool):
            print('true' if payload else 'false')
        else:
            print(payload)
    return result.status.exit_code


def _prevent_loop(screensaver: Screensaver, backend: BackendArg, interval: float,
                  as_json: bool) -> int:
    logger.info("Resetting idle timer every %.0f seconds (Ctrl+C to stop)", interval)
    try:
        while True:
            result = screensaver.prevent_activation(backend)
            if not result.ok:
                return _report(result, as_json)
            time.sleep(interval)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return 0


def main(argv: list[str] | None = None, screensaver: Screensaver | None = None) -> int:
    """Main entry point for screensaver-any"""
    args = parse_args(argv)
    config = load_config(args.config, args.debug)

    log = setup_logging(debug=args.debug or config['debug'], trace=args.trace,
                        log_file=args.logfile)
    log.debug("screensaver-any %s: %s", __version__, args.command)

    screensaver = screensaver or Screensaver()
    backend = args.screensaver or config['screensaver']

    if args.command == 'detect':
        if backend is not None:
            log.debug("Screensaver given explicitly, not detecting")
            detected = Backend(backend)
        else:
            detected = screensaver.detect()
        if detected is None:
            return _report(OperationResult.from_error(NoBackendDetected()), args.json)
        return _report(OperationResult.success(detected, detected), args.json)

    if args.command == 'prevent' and args.loop:
        interval = args.interval if args.interval is not None else config['prevent_interval']
        return _prevent_loop(screensaver, backend, interval, args.json)

    operation = COMMANDS[args.command]
    extra = ()
    if operation is Operation.SET_TIMEOUT:
        # a zero timeout reports the current one, like set_screensaver_timeout()
        if args.timeout:
            extra = (args.timeout,)
        else:
            operation = Operation.GET_TIMEOUT
    result = screensaver.run(operation, *extra, backend=backend)
    return _report(result, args.json, show_payload=args.command in QUERY_COMMANDS)


if __name__ == '__main__':
    sys.exit(main())
