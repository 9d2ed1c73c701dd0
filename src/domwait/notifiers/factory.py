"""Notifier factory: native mutation observation when the tree supports it.

Selects :class:`MutationNotifier` for :class:`~domwait.dom.Node` roots and
:class:`PollingNotifier` for any other tree that only exposes parent links.
"""

from __future__ import annotations

import logging
from typing import Any

from domwait.core.interfaces.notifier import ChangeNotifier
from domwait.dom.node import Node
from domwait.notifiers.mutation_notifier import MutationNotifier
from domwait.notifiers.polling_notifier import PollingNotifier

_log = logging.getLogger(__name__)


def create_notifier(root: Any, interval_ms: float) -> ChangeNotifier:
    """Return the appropriate :class:`ChangeNotifier` for *root*."""
    if isinstance(root, Node):
        return MutationNotifier()
    _log.debug("No native change notification for %r, polling every %sms", root, interval_ms)
    return PollingNotifier(interval_ms)
