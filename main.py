#!/usr/bin/env python3
"""
main.py
=======
Entry point: reads environment overrides, configures logging and opens
the Pygame window.

Environment overrides
---------------------
``BRAKING_MODE``       cautious | risky | timid
``BRAKING_FPS``        target frame rate
``BRAKING_SEED``       seed for cone placement and needle jitter
``BRAKING_WIDTH``      window width in pixels
``BRAKING_HEIGHT``     window height in pixels
``BRAKING_DARK``       1 / 0 (true/false, yes/no, on/off) for the dark theme
``BRAKING_SCALE``      initial plot zoom in pixels per unit (clamped 20..300)
``BRAKING_LOG_LEVEL``  DEBUG | INFO | WARNING | ...
"""

import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional

import config
from logging_setup import setup_logging
from sim.policy_catalog import PolicyMode, UnknownPolicyError


def _env(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(config.ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse(env: Mapping[str, str], name: str, cast: Callable[[str], Any], default: Any) -> Any:
    raw = _env(env, name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise SystemExit(f"invalid {config.ENV_PREFIX}{name}={raw!r}: {exc}") from exc


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise ValueError("must be a positive integer")
    return value


def _positive_float(raw: str) -> float:
    value = float(raw)
    if not value > 0:
        raise ValueError("must be a positive number")
    return value


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _flag(raw: str) -> bool:
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"expected one of {', '.join(_TRUE + _FALSE)}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Merge :mod:`config` defaults with ``BRAKING_*`` environment variables.

    Raises
    ------
    SystemExit
        On any malformed value, including an unknown policy mode.
    """
    env = os.environ if env is None else env
    try:
        mode = PolicyMode.parse(_env(env, "MODE") or config.DEFAULT_MODE)
    except UnknownPolicyError as exc:
        raise SystemExit(str(exc)) from exc

    level_name = (_env(env, "LOG_LEVEL") or config.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise SystemExit(f"invalid {config.ENV_PREFIX}LOG_LEVEL={level_name!r}")

    return {
        "mode": mode,
        "fps": _parse(env, "FPS", _positive_int, config.TARGET_FPS),
        "seed": _parse(env, "SEED", int, config.DEFAULT_RANDOM_SEED),
        "width": _parse(env, "WIDTH", _positive_int, config.WINDOW_WIDTH),
        "height": _parse(env, "HEIGHT", _positive_int, config.WINDOW_HEIGHT),
        "dark": _parse(env, "DARK", _flag, config.DARK_THEME),
        "scale": _parse(env, "SCALE", _positive_float, config.INITIAL_SCALE),
        "log_level": level,
    }


def main() -> None:
    settings = load_settings()
    setup_logging(settings.pop("log_level"))
    log = logging.getLogger("main")
    log.info("Starting braking policy sim: %s", settings)

    # pygame is only needed once the settings are valid.
    from ui.pygame_view import run_pygame_view

    try:
        run_pygame_view(**settings)
    except KeyboardInterrupt:
        log.info("Shutting down...")


if __name__ == "__main__":
    main()
