"""wait_for: retry a callback on every change until it stops raising."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, TypeVar

from domwait.config.runtime_config import get_config
from domwait.core.errors import WAIT_FOR_TIMEOUT_MESSAGE, WaitTimeoutError
from domwait.core.interfaces.notifier import ChangeNotifier
from domwait.core.models.options import MutationObserverOptions, WaitConfig
from domwait.core.waiter import Waiter

T = TypeVar("T")


class CallbackWaiter(Waiter):
    """Resolves with the first value *callback* returns without raising.

    On timeout the last error the callback raised is rejected instead of a
    generic timeout, so the caller sees why the condition never held.
    """

    def __init__(
        self,
        callback: Callable[[], Any],
        container: Any,
        config: WaitConfig,
        notifier: ChangeNotifier | None = None,
    ) -> None:
        super().__init__([container], config, notifier, kind="wait_for")
        self._callback = callback
        self._last_error: BaseException | None = None

    def check(self) -> None:
        try:
            value = self._callback()
        except Exception as error:
            self._last_error = error
            return
        if inspect.isawaitable(value):
            if inspect.iscoroutine(value):
                value.close()
            self.reject(TypeError("wait_for callbacks must be synchronous"))
            return
        self.resolve(value)

    def timeout_error(self) -> BaseException:
        if self._last_error is None:
            return WaitTimeoutError(WAIT_FOR_TIMEOUT_MESSAGE)
        return self._last_error


def wait_for(
    callback: Callable[[], T],
    *,
    container: Any,
    timeout: float | None = None,
    interval: float | None = None,
    mutation_observer_options: MutationObserverOptions | dict[str, Any] | None = None,
    on_timeout: Callable[[BaseException], Any] | None = None,
    notifier: ChangeNotifier | None = None,
) -> asyncio.Future[T]:
    """Call *callback* now and on every change under *container* until it
    returns without raising; the future resolves with that return value.

    Times are milliseconds.  See :func:`wait_for_element_to_be_removed`
    for the option semantics.
    """
    config = WaitConfig.from_overrides(
        get_config().waits,
        timeout=timeout,
        interval=interval,
        mutation_observer_options=mutation_observer_options,
        on_timeout=on_timeout,
    )
    return CallbackWaiter(callback, container, config, notifier).start()
