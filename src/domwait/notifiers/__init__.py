"""Change notifier implementations: native mutation observer and polling."""

from domwait.notifiers.factory import create_notifier
from domwait.notifiers.mutation_notifier import MutationNotifier
from domwait.notifiers.polling_notifier import PollingNotifier

__all__ = ["create_notifier", "MutationNotifier", "PollingNotifier"]
