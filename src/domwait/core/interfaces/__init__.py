"""Abstract interfaces the waits are written against."""

from domwait.core.interfaces.notifier import (
    BatchCallback,
    ChangeNotifier,
    TreeNode,
    Unsubscribe,
    is_attached,
    top_most_ancestor,
)

__all__ = [
    "BatchCallback",
    "ChangeNotifier",
    "TreeNode",
    "Unsubscribe",
    "is_attached",
    "top_most_ancestor",
]
