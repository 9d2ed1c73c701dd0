"""wait_for_element_to_be_removed: resolve once element(s) leave the document."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from domwait.config.runtime_config import get_config
from domwait.core.errors import (
    REMOVAL_TIMEOUT_MESSAGE,
    RecheckVerdict,
    WaitTimeoutError,
    WaitValidationError,
    classify_recheck_error,
)
from domwait.core.interfaces.notifier import ChangeNotifier, is_attached, top_most_ancestor
from domwait.core.models.options import MutationObserverOptions, WaitConfig
from domwait.core.models.target import Resolver, WaitTarget, as_wait_target
from domwait.core.waiter import Waiter, rejected_future


class RemovalWaiter(Waiter):
    """Waits until the target is gone.

    For direct targets, *tracked* pairs each original element with the
    root it was attached under at entry; re-checks test containment only.
    For a :class:`Resolver` target, *tracked* is ``None`` and every re-check
    re-invokes the resolver.
    """

    def __init__(
        self,
        target: WaitTarget,
        tracked: list[tuple[Any, Any]] | None,
        roots: list[Any],
        config: WaitConfig,
        notifier: ChangeNotifier | None = None,
    ) -> None:
        super().__init__(roots, config, notifier, kind="removal")
        self._target = target
        self._tracked = tracked

    def check(self) -> None:
        if self._tracked is not None:
            if not any(root.contains(element) for element, root in self._tracked):
                self.resolve()
            return

        try:
            remaining = self._target.resolve()
        except Exception as error:
            if classify_recheck_error(error) is RecheckVerdict.REMOVED:
                self._log.debug("Lookup found no match, treating as removed")
                self.resolve()
            else:
                self.reject(error)
            return

        if not remaining:
            self.resolve()

    def timeout_error(self) -> BaseException:
        return WaitTimeoutError(REMOVAL_TIMEOUT_MESSAGE)


def wait_for_element_to_be_removed(
    target: Any,
    *,
    timeout: float | None = None,
    interval: float | None = None,
    mutation_observer_options: MutationObserverOptions | dict[str, Any] | None = None,
    on_timeout: Callable[[BaseException], Any] | None = None,
    notifier: ChangeNotifier | None = None,
) -> asyncio.Future[None]:
    """Wait for element(s) to be removed from the document.

    Must be called with a running event loop.  The returned future
    resolves with ``None`` once everything the target represents is gone,
    and rejects with:

    * :class:`WaitValidationError` when the target is already absent or
      empty (before anything is subscribed);
    * the resolver's own exception, unchanged, when its first call raises
      or when a re-check raises anything but a not-found lookup error;
    * :class:`WaitTimeoutError` (after ``on_timeout``) when the deadline
      passes first.

    Args:
        target: An element, a list of elements, or a zero-argument callable
            returning either (or ``None`` / an empty list once removed).
        timeout: Deadline in milliseconds (default from config, 1000).
        interval: Polling cadence in milliseconds, used only for trees
            without native change notification (default 50).
        mutation_observer_options: Which changes trigger a re-check.
        on_timeout: Receives the timeout error, returns the error to reject with.
        notifier: Change notifier to use instead of the automatic choice.
    """
    # Fail before touching the resolver when there is no loop to wait on.
    asyncio.get_running_loop()
    config = WaitConfig.from_overrides(
        get_config().waits,
        timeout=timeout,
        interval=interval,
        mutation_observer_options=mutation_observer_options,
        on_timeout=on_timeout,
    )
    wait_target = as_wait_target(target)

    try:
        snapshot = wait_target.resolve()
    except Exception as error:
        return rejected_future(error)

    tracked: list[tuple[Any, Any]] | None = None
    if isinstance(wait_target, Resolver):
        roots = [top_most_ancestor(element) for element in snapshot]
    else:
        # A direct element that already lost its parent counts as removed.
        tracked = [(el, top_most_ancestor(el)) for el in snapshot if is_attached(el)]
        snapshot = [el for el, _ in tracked]
        roots = [root for _, root in tracked]

    if not snapshot:
        return rejected_future(WaitValidationError())

    return RemovalWaiter(wait_target, tracked, roots, config, notifier).start()
