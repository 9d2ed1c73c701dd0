"""Native change notifier backed by :class:`~domwait.dom.MutationObserver`."""

from __future__ import annotations

import uuid
from typing import Any

from domwait.core.interfaces.notifier import BatchCallback, ChangeNotifier, Unsubscribe
from domwait.core.models.options import MutationObserverOptions
from domwait.dom.mutation import MutationObserver


class MutationNotifier(ChangeNotifier):
    """One :class:`MutationObserver` per subscription."""

    def __init__(self) -> None:
        self._observers: dict[str, MutationObserver] = {}

    def subscribe(
        self,
        root: Any,
        options: MutationObserverOptions,
        on_batch: BatchCallback,
    ) -> Unsubscribe:
        sub_id = uuid.uuid4().hex
        observer = MutationObserver(lambda records, _observer: on_batch(records))
        observer.observe(root, options)
        self._observers[sub_id] = observer

        def unsubscribe() -> None:
            observer = self._observers.pop(sub_id, None)
            if observer is not None:
                observer.disconnect()

        return unsubscribe

    @property
    def active_subscriptions(self) -> int:
        return len(self._observers)
