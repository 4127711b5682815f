"""
Routing configuration package.

Topic modules are star-imported into one namespace, then the profile named
by ROUTING_ENV overrides them:

    ROUTING_ENV=dev python ui.py midi_inputs      # dev | development | safe | production

    import config as cfg
    cfg.PLACEHOLDER_LABEL   # '-'
"""

import importlib
import os
import sys
from typing import List, Tuple

# (level, message) logged before showlog finished importing
_startup_log: List[Tuple[str, str]] = []


def _emit(level: str, message: str) -> None:
    showlog = sys.modules.get("showlog")
    write = getattr(showlog, level, None)
    if callable(write):
        write(f"[CONFIG] {message}")
    else:
        _startup_log.append((level, message))


def _notify_showlog_ready() -> None:
    """Called by showlog at the end of its import; replays the startup lines."""
    pending = list(_startup_log)
    _startup_log.clear()
    for level, message in pending:
        _emit(level, message)


from .logging import *
from .display import *
from .styling import *
from .routing import *

PROFILES = {
    "dev": "dev",
    "development": "dev",
    "safe": "safe",
    "production": "prod",
    "prod": "prod",
}

_env = os.getenv("ROUTING_ENV", "production").strip().lower()
_profile_module = PROFILES.get(_env, "prod")
_overrides = importlib.import_module(f"{__name__}.profiles.{_profile_module}")
globals().update({k: v for k, v in vars(_overrides).items() if k.isupper()})

ACTIVE_PROFILE = {"dev": "development", "safe": "safe"}.get(_profile_module, "production")

if _env not in PROFILES:
    _emit("warn", f"Unknown ROUTING_ENV '{_env}', using production")
_emit("info", f"Active profile: {ACTIVE_PROFILE}")
_emit("debug", f"FPS={FPS}, LOG_LEVEL={LOG_LEVEL}, LOG_FILE_ENABLED={LOG_FILE_ENABLED}")
