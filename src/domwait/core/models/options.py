"""Per-call option models: mutation observation flags and :class:`WaitConfig`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from domwait.core.models.config import WaitDefaults


def _identity(error: BaseException) -> BaseException:
    return error


class MutationObserverOptions(BaseModel):
    """Which structural changes a :class:`~domwait.dom.MutationObserver`
    reports.

    The defaults observe everything below the root, so attribute-only
    changes also trigger a re-check (which then reports "still present").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    subtree: bool = Field(default=True, description="Also observe descendants of the root")
    child_list: bool = Field(default=True, description="Report child additions / removals")
    attributes: bool = Field(default=True, description="Report attribute changes")
    character_data: bool = Field(default=True, description="Report text node changes")
    attribute_filter: tuple[str, ...] | None = Field(
        default=None,
        description="Only report changes to these attribute names",
    )

    @model_validator(mode="after")
    def _check_something_observed(self) -> MutationObserverOptions:
        if not (self.child_list or self.attributes or self.character_data):
            raise ValueError(
                "At least one of child_list, attributes or character_data must be true"
            )
        return self


class WaitConfig(BaseModel):
    """Immutable configuration for a single wait call.

    Times are milliseconds.  ``interval_ms`` only matters when the observed
    tree has no native change notification and the polling fallback is used.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout_ms: float = Field(default=1000, ge=0, description="Deadline for the wait")
    interval_ms: float = Field(default=50, gt=0, description="Polling fallback cadence")
    mutation_observer_options: MutationObserverOptions = Field(
        default_factory=MutationObserverOptions,
    )
    on_timeout: Callable[[BaseException], Any] = Field(
        default=_identity,
        description="Receives the timeout error, returns the error to reject with",
    )

    @classmethod
    def from_overrides(
        cls,
        defaults: WaitDefaults,
        *,
        timeout: float | None = None,
        interval: float | None = None,
        mutation_observer_options: MutationObserverOptions | dict[str, Any] | None = None,
        on_timeout: Callable[[BaseException], Any] | None = None,
    ) -> WaitConfig:
        """Build a config from keyword overrides, falling back to *defaults*
        for anything left as ``None``.
        """
        values: dict[str, Any] = {
            "timeout_ms": defaults.timeout_ms if timeout is None else timeout,
            "interval_ms": defaults.interval_ms if interval is None else interval,
            "mutation_observer_options": (
                defaults.mutation_observer_options
                if mutation_observer_options is None
                else mutation_observer_options
            ),
        }
        if on_timeout is not None:
            values["on_timeout"] = on_timeout
        return cls(**values)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
