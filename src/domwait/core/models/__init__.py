"""Pydantic models for configuration and wait options, plus wait targets."""

from domwait.core.models.config import DomWaitConfig, QueryConfig, SystemConfig, WaitDefaults
from domwait.core.models.options import MutationObserverOptions, WaitConfig
from domwait.core.models.target import (
    ElementList,
    Resolver,
    SingleElement,
    WaitTarget,
    as_wait_target,
    normalize_elements,
)

__all__ = [
    "DomWaitConfig",
    "QueryConfig",
    "SystemConfig",
    "WaitDefaults",
    "MutationObserverOptions",
    "WaitConfig",
    "ElementList",
    "Resolver",
    "SingleElement",
    "WaitTarget",
    "as_wait_target",
    "normalize_elements",
]
