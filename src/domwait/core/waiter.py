"""Waiter: change subscriptions raced against a deadline, settled once.

A waiter owns three resources for the lifetime of one wait call: one
notifier subscription per observed root, one ``loop.call_later`` deadline,
and the future handed back to the caller.

Key behaviours:
* Subscriptions and the deadline are acquired together in :meth:`start`,
  followed by one immediate check.
* Settlement is latched.  The first of (check settles, deadline fires)
  wins; later batches and timer firings are no-ops.
* The deadline runs one last check before timing out, so a removal in
  the same loop turn as the deadline still resolves.
* The release path (cancel the deadline, tear down every subscription)
  always runs **before** the future is resolved or rejected.
* Cancelling the returned future also runs the release path.
"""

from __future__ import annotations

import asyncio
import uuid
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from domwait.core.interfaces.notifier import ChangeNotifier, Unsubscribe
from domwait.core.models.options import WaitConfig
from domwait.log_config.logger import ContextualLogger, get_logger
from domwait.notifiers.factory import create_notifier


def rejected_future(error: BaseException) -> asyncio.Future[Any]:
    """Return a future on the running loop that already failed with *error*."""
    future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
    future.set_exception(error)
    return future


def distinct_roots(roots: Iterable[Any]) -> list[Any]:
    """De-duplicate *roots* by identity, keeping first-seen order."""
    seen: set[int] = set()
    out: list[Any] = []
    for root in roots:
        if id(root) not in seen:
            seen.add(id(root))
            out.append(root)
    return out


class Waiter(ABC):
    """Base class for the waits.

    Subclasses implement :meth:`check` (call :meth:`resolve` or
    :meth:`reject` once the outcome is known) and :meth:`timeout_error`.

    Args:
        roots: Nodes to observe; duplicates are collapsed.
        config: Immutable per-call configuration.
        notifier: Injected notifier used for every root.  When *None*, one
            is picked per root by :func:`create_notifier`.
        kind: Short label used in log context.
    """

    def __init__(
        self,
        roots: Iterable[Any],
        config: WaitConfig,
        notifier: ChangeNotifier | None = None,
        kind: str = "wait",
    ) -> None:
        self._loop = asyncio.get_running_loop()
        self._future: asyncio.Future[Any] = self._loop.create_future()
        self._roots = distinct_roots(roots)
        self._config = config
        self._notifier = notifier
        self._unsubscribes: list[Unsubscribe] = []
        self._timer: asyncio.TimerHandle | None = None
        self._settled = False
        self._log = ContextualLogger(get_logger(__name__), wait=uuid.uuid4().hex[:8], kind=kind)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def settled(self) -> bool:
        return self._settled

    def start(self) -> asyncio.Future[Any]:
        """Subscribe, arm the deadline, run the first check, return the future."""
        options = self._config.mutation_observer_options
        for root in self._roots:
            notifier = self._notifier or create_notifier(root, self._config.interval_ms)
            self._unsubscribes.append(notifier.subscribe(root, options, self._on_batch))
        self._timer = self._loop.call_later(self._config.timeout_seconds, self._on_deadline)
        self._future.add_done_callback(self._on_future_done)
        self._log.debug(
            "Observing %d root(s), timeout=%sms", len(self._roots), self._config.timeout_ms
        )
        self.check()
        return self._future

    @abstractmethod
    def check(self) -> None:
        """Re-evaluate the condition; settle if the outcome is known."""

    @abstractmethod
    def timeout_error(self) -> BaseException:
        """Build the error handed to ``on_timeout`` when the deadline fires."""

    # ------------------------------------------------------------------
    # Settlement
    # ------------------------------------------------------------------

    def resolve(self, value: Any = None) -> None:
        self._settle(value, None)

    def reject(self, error: BaseException) -> None:
        self._settle(None, error)

    def _settle(self, value: Any, error: BaseException | None) -> None:
        if self._settled:
            return
        self._settled = True
        self._release()
        if self._future.done():
            return
        if error is None:
            self._log.debug("Resolved")
            self._future.set_result(value)
        else:
            self._log.debug("Rejected with %s", type(error).__name__)
            self._future.set_exception(error)

    def _release(self) -> None:
        """Cancel the deadline and tear down every subscription."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        unsubscribes, self._unsubscribes = self._unsubscribes, []
        for unsubscribe in unsubscribes:
            unsubscribe()

    # ------------------------------------------------------------------
    # Event sources
    # ------------------------------------------------------------------

    def _on_batch(self, records: Sequence[Any]) -> None:
        if self._settled:
            return
        self.check()

    def _on_deadline(self) -> None:
        if self._settled:
            return
        # A change made in this loop turn has not been delivered yet.
        self.check()
        if self._settled:
            return
        self._log.debug("Deadline of %sms reached", self._config.timeout_ms)
        try:
            reason = self._config.on_timeout(self.timeout_error())
        except Exception as hook_error:
            reason = hook_error
        if not isinstance(reason, BaseException):
            reason = TypeError(
                f"on_timeout must return an exception, got {type(reason).__name__}"
            )
        self.reject(reason)

    def _on_future_done(self, future: asyncio.Future[Any]) -> None:
        if future.cancelled() and not self._settled:
            self._log.debug("Future cancelled by caller, releasing")
            self._settled = True
            self._release()
