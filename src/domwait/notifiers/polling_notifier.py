"""Polling fallback for trees without native change notification.

Each subscription re-arms a ``loop.call_later`` timer every interval and
reports an empty batch, so the waiter re-checks on a fixed cadence instead
of on mutations.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import Any

from domwait.core.interfaces.notifier import BatchCallback, ChangeNotifier, Unsubscribe
from domwait.core.models.options import MutationObserverOptions


class PollingNotifier(ChangeNotifier):
    """Calls ``on_batch([])`` every *interval_ms* milliseconds.

    Args:
        interval_ms: Polling cadence.
    """

    def __init__(self, interval_ms: float = 50) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._interval = interval_ms / 1000
        self._handles: dict[str, asyncio.TimerHandle] = {}

    def subscribe(
        self,
        root: Any,
        options: MutationObserverOptions,
        on_batch: BatchCallback,
    ) -> Unsubscribe:
        loop = asyncio.get_running_loop()
        sub_id = uuid.uuid4().hex

        def tick() -> None:
            if sub_id not in self._handles:
                return
            # Re-arm first: on_batch may unsubscribe, which cancels this handle.
            self._handles[sub_id] = loop.call_later(self._interval, tick)
            on_batch([])

        self._handles[sub_id] = loop.call_later(self._interval, tick)

        def unsubscribe() -> None:
            handle = self._handles.pop(sub_id, None)
            if handle is not None:
                handle.cancel()

        return unsubscribe

    @property
    def active_subscriptions(self) -> int:
        return len(self._handles)
