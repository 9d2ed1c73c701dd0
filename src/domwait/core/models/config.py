"""Configuration Pydantic models: DomWaitConfig, WaitDefaults, QueryConfig, SystemConfig."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from domwait.core.models.options import MutationObserverOptions


class WaitDefaults(BaseModel):
    """Defaults applied to every wait call that doesn't override them."""

    model_config = ConfigDict(extra="forbid")

    timeout_ms: float = Field(default=1000, ge=0, description="Default wait deadline in ms")
    interval_ms: float = Field(
        default=50, gt=0, description="Polling cadence in ms when no native observer exists"
    )
    mutation_observer_options: MutationObserverOptions = Field(
        default_factory=MutationObserverOptions,
    )


class QueryConfig(BaseModel):
    """Settings for the attribute lookup helpers."""

    model_config = ConfigDict(extra="forbid")

    test_id_attribute: str = Field(
        default="data-testid",
        min_length=1,
        description="Attribute matched by the *_by_test_id queries",
    )


class SystemConfig(BaseModel):
    """Runtime settings not tied to a single wait."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="WARNING", description="Root log level")
    log_dir: str | None = Field(
        default=None, description="Directory for rotating log files (console only when unset)"
    )


class DomWaitConfig(BaseModel):
    """Top-level configuration, optionally loaded from a JSON file."""

    model_config = ConfigDict(extra="forbid")

    waits: WaitDefaults = Field(default_factory=WaitDefaults)
    queries: QueryConfig = Field(default_factory=QueryConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
