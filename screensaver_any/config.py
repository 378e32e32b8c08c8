"""Configuration loader and validator for screensaver-any.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/screensaver-any/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

from screensaver_any.types import Backend

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = os.path.join('~', '.config', 'screensaver-any', 'config.json')

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'screensaver': None,
    'debug': False,
    'prevent_interval': 30.0,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"^[ \t]*//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    out = dict(DEFAULT_CONFIG)

    # screensaver — null or one of the known backend names
    ss = conf.get('screensaver', DEFAULT_CONFIG['screensaver'])
    if ss is not None:
        known = [b.value for b in Backend]
        if not isinstance(ss, str) or ss.strip().lower() not in known:
            raise ValueError(f"Invalid 'screensaver': {ss!r} (must be one of {', '.join(known)})")
        ss = ss.strip().lower()
    out['screensaver'] = ss

    # debug — boolean
    dbg = conf.get('debug', DEFAULT_CONFIG['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    # prevent_interval — positive number of seconds
    pi = conf.get('prevent_interval', DEFAULT_CONFIG['prevent_interval'])
    if isinstance(pi, bool):
        raise ValueError(f"Invalid 'prevent_interval': {pi}")
    try:
        pi_val = float(pi)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid 'prevent_interval': {pi}")
    if pi_val <= 0:
        raise ValueError(f"Invalid 'prevent_interval': {pi} (must be > 0)")
    out['prevent_interval'] = pi_val

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        logger.warning("Can't read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        logger.warning("Config %s must contain a JSON object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    if debug:
        logger.debug("Loaded config from %s", path)
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/screensaver-any/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)
    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, config, debug=debug)
    return config
