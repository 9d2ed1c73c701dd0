"""Mutation observation for the in-memory document.

Mutations are recorded synchronously as they happen and delivered to each
observer's callback in one batch per event-loop turn (``loop.call_soon``).

Key behaviours:
* A record is queued at most once per observer, even when the observer is
  registered on several ancestors of the mutated node.
* Registrations on an ancestor only see descendant mutations when the
  options include ``subtree``.
* A callback that raises is **auto-disconnected** (logged + removed).
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from domwait.core.models.options import MutationObserverOptions

if TYPE_CHECKING:
    from domwait.dom.node import Node

_log = logging.getLogger(__name__)

CHILD_LIST = "childList"
ATTRIBUTES = "attributes"
CHARACTER_DATA = "characterData"


@dataclass
class MutationRecord:
    """One structural change."""

    type: str
    target: Node
    added_nodes: list[Node] = field(default_factory=list)
    removed_nodes: list[Node] = field(default_factory=list)
    attribute_name: str | None = None
    old_value: str | None = None


@dataclass
class _Registration:
    reg_id: str
    observer: MutationObserver
    options: MutationObserverOptions


def _wants(options: MutationObserverOptions, record: MutationRecord, on_target: bool) -> bool:
    if not on_target and not options.subtree:
        return False
    if record.type == CHILD_LIST:
        return options.child_list
    if record.type == ATTRIBUTES:
        if not options.attributes:
            return False
        return options.attribute_filter is None or record.attribute_name in options.attribute_filter
    if record.type == CHARACTER_DATA:
        return options.character_data
    return False


def queue_mutation_record(record: MutationRecord) -> None:
    """Hand *record* to every observer interested in its target."""
    notified: set[int] = set()
    node: Node | None = record.target
    while node is not None:
        for reg in list(node._registrations):
            if id(reg.observer) in notified:
                continue
            if _wants(reg.options, record, on_target=node is record.target):
                notified.add(id(reg.observer))
                reg.observer._enqueue(record)
        node = node.parent


class MutationObserver:
    """Batched change observer for :class:`~domwait.dom.Node` trees.

    Args:
        callback: Called as ``callback(records, observer)`` once per loop
            turn in which at least one observed mutation happened.
    """

    def __init__(self, callback: Callable[[list[MutationRecord], MutationObserver], Any]) -> None:
        self._callback = callback
        self._records: list[MutationRecord] = []
        self._targets: list[Node] = []
        self._handle: asyncio.Handle | None = None

    # ------------------------------------------------------------------
    # Observe / disconnect
    # ------------------------------------------------------------------

    def observe(self, target: Node, options: MutationObserverOptions | None = None) -> None:
        """Start observing *target*.  Observing the same target again
        replaces the previous options.
        """
        options = options or MutationObserverOptions()
        for reg in target._registrations:
            if reg.observer is self:
                reg.options = options
                return
        target._registrations.append(
            _Registration(reg_id=uuid.uuid4().hex, observer=self, options=options)
        )
        self._targets.append(target)

    def disconnect(self) -> None:
        """Stop observing every target and drop undelivered records."""
        for target in self._targets:
            target._registrations = [r for r in target._registrations if r.observer is not self]
        self._targets.clear()
        self._records.clear()
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def take_records(self) -> list[MutationRecord]:
        """Return and clear the records not yet delivered."""
        records, self._records = self._records, []
        return records

    @property
    def is_observing(self) -> bool:
        return bool(self._targets)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def _enqueue(self, record: MutationRecord) -> None:
        self._records.append(record)
        if self._handle is None:
            self._schedule()

    def _schedule(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Outside a loop; the records ride along with the next batch.
            _log.debug("No running loop, holding %d mutation record(s)", len(self._records))
            return
        self._handle = loop.call_soon(self._deliver)

    def _deliver(self) -> None:
        self._handle = None
        records = self.take_records()
        if not records:
            return
        try:
            self._callback(records, self)
        except Exception:
            _log.exception("Mutation callback %s raised, disconnecting", self._callback)
            self.disconnect()
