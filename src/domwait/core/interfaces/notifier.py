"""Change notification and tree structure interfaces.

The waits never talk to a concrete document.  They need two capabilities:

* :class:`TreeNode`: walk parent links and test containment, used to pick
  the roots to observe and to re-test connectivity of direct elements.
* :class:`ChangeNotifier`: subscribe to batches of structural changes
  under a root.  The native implementation rides on
  :class:`~domwait.dom.MutationObserver`; trees without one get a polling
  notifier instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from domwait.core.models.options import MutationObserverOptions

BatchCallback = Callable[[Sequence[Any]], None]
Unsubscribe = Callable[[], None]


# ---------------------------------------------------------------------------
# Tree structure
# ---------------------------------------------------------------------------

@runtime_checkable
class TreeNode(Protocol):
    """Minimal structural view of an element."""

    @property
    def parent(self) -> Any: ...

    def contains(self, other: Any) -> bool: ...


def top_most_ancestor(node: TreeNode) -> TreeNode:
    """Follow parent links from *node* and return the last one reached.

    A node without a parent is its own top-most ancestor.
    """
    current = node
    while isinstance(current, TreeNode) and current.parent is not None:
        current = current.parent
    return current


def is_attached(node: Any) -> bool:
    """Return ``True`` if *node* is a :class:`TreeNode` that has a parent."""
    return isinstance(node, TreeNode) and node.parent is not None


# ---------------------------------------------------------------------------
# Change notification
# ---------------------------------------------------------------------------

class ChangeNotifier(ABC):
    """Delivers batches of changes under an observed root."""

    @abstractmethod
    def subscribe(
        self,
        root: Any,
        options: MutationObserverOptions,
        on_batch: BatchCallback,
    ) -> Unsubscribe:
        """Start observing *root*; call *on_batch(records)* per batch.

        Returns a callable that tears the subscription down.  Calling it
        more than once is harmless.
        """

    @property
    @abstractmethod
    def active_subscriptions(self) -> int:
        """Number of subscriptions not yet torn down."""
