"""Process-wide configuration used as the default for every wait and query.

Loaded lazily from :func:`~domwait.config.config_manager.load_config` on
first use.  Tests adjust it with :func:`configure` and restore it with
:func:`reset_config`.
"""

from __future__ import annotations

from typing import Any

from domwait.config.config_manager import load_config
from domwait.core.models.config import DomWaitConfig
from domwait.log_config.logger import setup_logging

_current: DomWaitConfig | None = None


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def get_config() -> DomWaitConfig:
    """Return the active configuration, loading it on first access."""
    global _current
    if _current is None:
        _current = load_config()
    return _current


def configure(config: DomWaitConfig | None = None, **sections: dict[str, Any]) -> DomWaitConfig:
    """Replace or patch the active configuration.

    Either pass a complete :class:`DomWaitConfig`, or section overrides
    that are deep-merged into the current one and re-validated::

        configure(waits={"timeout_ms": 2000}, queries={"test_id_attribute": "data-qa"})

    Returns the new active configuration.
    """
    global _current
    if config is not None and sections:
        raise TypeError("Pass either a DomWaitConfig or section overrides, not both")
    if config is None:
        merged = _deep_merge(get_config().model_dump(), sections)
        config = DomWaitConfig(**merged)
    _current = config
    return _current


def reset_config() -> None:
    """Forget the active configuration; the next access reloads it."""
    global _current
    _current = None


def configure_logging(config: DomWaitConfig | None = None) -> None:
    """Install logging handlers from the ``system`` section of *config*
    (the active configuration when omitted).
    """
    system = (config or get_config()).system
    setup_logging(log_level=system.log_level, log_dir=system.log_dir)
