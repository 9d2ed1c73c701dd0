"""Tests for the MutationObserver-backed notifier and the notifier factory."""

import asyncio

from domwait.core.models.options import MutationObserverOptions
from domwait.dom.node import Document, Element
from domwait.notifiers.factory import create_notifier
from domwait.notifiers.mutation_notifier import MutationNotifier
from domwait.notifiers.polling_notifier import PollingNotifier


class TestMutationNotifier:
    async def test_forwards_batches(self, document: Document):
        notifier = MutationNotifier()
        batches: list[list] = []
        unsubscribe = notifier.subscribe(document, MutationObserverOptions(), batches.append)

        document.body.append_child(Element("p"))
        await asyncio.sleep(0)

        assert len(batches) == 1
        assert batches[0][0].added_nodes[0].tag_name == "p"
        unsubscribe()

    async def test_unsubscribe_disconnects_the_observer(self, document: Document):
        notifier = MutationNotifier()
        batches: list[list] = []
        unsubscribe = notifier.subscribe(document, MutationObserverOptions(), batches.append)
        assert document.mutation_observer_count == 1
        assert notifier.active_subscriptions == 1

        unsubscribe()
        unsubscribe()
        document.body.append_child(Element("p"))
        await asyncio.sleep(0)

        assert batches == []
        assert document.mutation_observer_count == 0
        assert notifier.active_subscriptions == 0

    async def test_options_are_applied(self, document: Document):
        notifier = MutationNotifier()
        batches: list[list] = []
        unsubscribe = notifier.subscribe(
            document, MutationObserverOptions(subtree=False), batches.append
        )

        document.body.append_child(Element("p"))
        await asyncio.sleep(0)

        assert batches == []
        unsubscribe()


class TestCreateNotifier:
    def test_document_nodes_get_native_notification(self, document: Document):
        assert isinstance(create_notifier(document, 50), MutationNotifier)
        assert isinstance(create_notifier(Element("div"), 50), MutationNotifier)

    def test_other_trees_are_polled(self):
        notifier = create_notifier(object(), 20)
        assert isinstance(notifier, PollingNotifier)
