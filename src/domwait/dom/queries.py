"""Attribute lookups over a container's descendants.

Three flavours, mirroring how tests usually look elements up:

* ``query_*``: return ``None`` / ``[]`` when nothing matches.
* ``get_*``: raise :class:`ElementNotFoundError` when nothing matches.
* ``find_*``: ``await`` a :func:`~domwait.core.wait_for.wait_for` around ``get_*``.

Single-element variants raise :class:`MultipleElementsFoundError` on more
than one match.  The ``*_by_test_id`` helpers match the attribute named by
``queries.test_id_attribute`` in the active config.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Union

from domwait.config.runtime_config import get_config
from domwait.core.errors import ElementNotFoundError, MultipleElementsFoundError
from domwait.dom.node import Element, Node

Matcher = Union[str, "re.Pattern[str]", Callable[[str], bool]]


def _matches(actual: str | None, matcher: Matcher) -> bool:
    if actual is None:
        return False
    if isinstance(matcher, re.Pattern):
        return matcher.search(actual) is not None
    if callable(matcher):
        return bool(matcher(actual))
    return actual == matcher


def _describe(attribute: str, matcher: Matcher) -> str:
    shown = matcher.pattern if isinstance(matcher, re.Pattern) else matcher
    return f'[{attribute}="{shown}"]'


def _not_found(attribute: str, matcher: Matcher, container: Node) -> ElementNotFoundError:
    return ElementNotFoundError(
        f"Unable to find an element by: {_describe(attribute, matcher)}\n\n{container.to_html()}"
    )


def _multiple(attribute: str, matcher: Matcher, matches: list[Element]) -> MultipleElementsFoundError:
    rendered = "\n\n".join(el.to_html() for el in matches)
    return MultipleElementsFoundError(
        f"Found multiple elements by: {_describe(attribute, matcher)}\n\n"
        f"Here are the matching elements:\n\n{rendered}\n\n"
        "(If this is intentional, then use the `*_all_by_*` variant of the query "
        "(like `query_all_by_test_id`, `get_all_by_test_id`, or `find_all_by_test_id`))."
    )


# ---------------------------------------------------------------------------
# By attribute
# ---------------------------------------------------------------------------

def query_all_by_attribute(attribute: str, container: Node, matcher: Matcher) -> list[Element]:
    """Every descendant element of *container* whose *attribute* matches."""
    return [
        node
        for node in container.iter_descendants()
        if isinstance(node, Element) and _matches(node.get_attribute(attribute), matcher)
    ]


def query_by_attribute(attribute: str, container: Node, matcher: Matcher) -> Element | None:
    matches = query_all_by_attribute(attribute, container, matcher)
    if len(matches) > 1:
        raise _multiple(attribute, matcher, matches)
    return matches[0] if matches else None


def get_all_by_attribute(attribute: str, container: Node, matcher: Matcher) -> list[Element]:
    matches = query_all_by_attribute(attribute, container, matcher)
    if not matches:
        raise _not_found(attribute, matcher, container)
    return matches


def get_by_attribute(attribute: str, container: Node, matcher: Matcher) -> Element:
    matches = get_all_by_attribute(attribute, container, matcher)
    if len(matches) > 1:
        raise _multiple(attribute, matcher, matches)
    return matches[0]


async def find_all_by_attribute(
    attribute: str, container: Node, matcher: Matcher, **wait_options: Any
) -> list[Element]:
    # Imported here to avoid a dom → core → notifiers → dom import cycle.
    from domwait.core.wait_for import wait_for

    return await wait_for(
        lambda: get_all_by_attribute(attribute, container, matcher),
        container=container,
        **wait_options,
    )


async def find_by_attribute(
    attribute: str, container: Node, matcher: Matcher, **wait_options: Any
) -> Element:
    from domwait.core.wait_for import wait_for

    return await wait_for(
        lambda: get_by_attribute(attribute, container, matcher),
        container=container,
        **wait_options,
    )


# ---------------------------------------------------------------------------
# By test id
# ---------------------------------------------------------------------------

def _test_id_attribute() -> str:
    return get_config().queries.test_id_attribute


def query_all_by_test_id(container: Node, matcher: Matcher) -> list[Element]:
    return query_all_by_attribute(_test_id_attribute(), container, matcher)


def query_by_test_id(container: Node, matcher: Matcher) -> Element | None:
    return query_by_attribute(_test_id_attribute(), container, matcher)


def get_all_by_test_id(container: Node, matcher: Matcher) -> list[Element]:
    return get_all_by_attribute(_test_id_attribute(), container, matcher)


def get_by_test_id(container: Node, matcher: Matcher) -> Element:
    return get_by_attribute(_test_id_attribute(), container, matcher)


async def find_all_by_test_id(container: Node, matcher: Matcher, **wait_options: Any) -> list[Element]:
    return await find_all_by_attribute(_test_id_attribute(), container, matcher, **wait_options)


async def find_by_test_id(container: Node, matcher: Matcher, **wait_options: Any) -> Element:
    return await find_by_attribute(_test_id_attribute(), container, matcher, **wait_options)


# ---------------------------------------------------------------------------
# Bound to a container
# ---------------------------------------------------------------------------

class BoundQueries:
    """The test-id and attribute queries with *container* filled in."""

    def __init__(self, container: Node) -> None:
        self.container = container

    def query_all_by_test_id(self, matcher: Matcher) -> list[Element]:
        return query_all_by_test_id(self.container, matcher)

    def query_by_test_id(self, matcher: Matcher) -> Element | None:
        return query_by_test_id(self.container, matcher)

    def get_all_by_test_id(self, matcher: Matcher) -> list[Element]:
        return get_all_by_test_id(self.container, matcher)

    def get_by_test_id(self, matcher: Matcher) -> Element:
        return get_by_test_id(self.container, matcher)

    async def find_all_by_test_id(self, matcher: Matcher, **wait_options: Any) -> list[Element]:
        return await find_all_by_test_id(self.container, matcher, **wait_options)

    async def find_by_test_id(self, matcher: Matcher, **wait_options: Any) -> Element:
        return await find_by_test_id(self.container, matcher, **wait_options)

    def query_all_by_attribute(self, attribute: str, matcher: Matcher) -> list[Element]:
        return query_all_by_attribute(attribute, self.container, matcher)

    def query_by_attribute(self, attribute: str, matcher: Matcher) -> Element | None:
        return query_by_attribute(attribute, self.container, matcher)

    def get_all_by_attribute(self, attribute: str, matcher: Matcher) -> list[Element]:
        return get_all_by_attribute(attribute, self.container, matcher)

    def get_by_attribute(self, attribute: str, matcher: Matcher) -> Element:
        return get_by_attribute(attribute, self.container, matcher)


def within(container: Node) -> BoundQueries:
    """Return queries scoped to *container*."""
    return BoundQueries(container)
