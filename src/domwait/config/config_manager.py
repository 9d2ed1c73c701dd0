"""Config manager: load JSON, apply env overrides, validate into DomWaitConfig."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from domwait.core.models.config import DomWaitConfig

_log = logging.getLogger(__name__)

# Environment variable → config field mapping.
# Keys are env-var names; values are ``(section, field, type)`` tuples.
_ENV_OVERRIDES: dict[str, tuple[str, str, type]] = {
    "DOMWAIT_TIMEOUT_MS": ("waits", "timeout_ms", float),
    "DOMWAIT_INTERVAL_MS": ("waits", "interval_ms", float),
    "DOMWAIT_TEST_ID_ATTRIBUTE": ("queries", "test_id_attribute", str),
    "DOMWAIT_LOG_LEVEL": ("system", "log_level", str),
}


def load_config(config_path: Path | str | None = None) -> DomWaitConfig:
    """Load, override, and validate the configuration.

    Args:
        config_path: Path to a JSON config file.  When *None*, falls back
            to the ``DOMWAIT_CONFIG_FILE`` env-var and then to the built-in
            defaults (no file needed).

    Returns:
        A fully-validated :class:`DomWaitConfig` instance.

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist.
    """
    path = _resolve_config_path(config_path)
    raw: dict[str, Any] = {}
    if path is not None:
        _log.info("Loading config from %s", path)
        raw = json.loads(path.read_text(encoding="utf-8"))

    # Apply env overrides ------------------------------------------------
    for env_key, (section, field, typ) in _ENV_OVERRIDES.items():
        env_val = os.environ.get(env_key)
        if env_val is not None:
            raw.setdefault(section, {})[field] = typ(env_val)
            _log.debug("Env override: %s → %s.%s = %r", env_key, section, field, env_val)

    return DomWaitConfig(**raw)


def _resolve_config_path(config_path: Path | str | None) -> Path | None:
    if config_path is not None:
        p = Path(config_path)
    else:
        env = os.environ.get("DOMWAIT_CONFIG_FILE")
        if not env:
            return None
        p = Path(env)
    if not p.is_file():
        raise FileNotFoundError(
            f"Config file not found: {p}\n"
            "Pass a valid path or unset DOMWAIT_CONFIG_FILE to use the defaults."
        )
    return p
