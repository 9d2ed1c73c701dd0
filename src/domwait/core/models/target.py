"""Wait targets: the tagged variant accepted by the removal wait.

A caller may pass an element, a list of elements, or a zero-argument
callable returning either.  :func:`as_wait_target` turns the raw value into
one of the three variants once, at call entry, and the wait holds on to it
for its whole lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


def normalize_elements(value: Any) -> list[Any]:
    """Flatten a lookup result into a list of elements.

    ``None`` and empty sequences become ``[]``; ``None`` entries inside a
    sequence are dropped.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [el for el in value if el is not None]
    return [value]


@dataclass(frozen=True)
class SingleElement:
    """A single element reference given directly."""

    element: Any

    def resolve(self) -> list[Any]:
        return normalize_elements(self.element)


@dataclass(frozen=True)
class ElementList:
    """Several element references given directly."""

    elements: tuple[Any, ...]

    def resolve(self) -> list[Any]:
        return normalize_elements(self.elements)


@dataclass(frozen=True)
class Resolver:
    """A callable re-invoked on every change notification."""

    callback: Callable[[], Any]

    def resolve(self) -> list[Any]:
        """Invoke the callback.  Exceptions propagate to the caller."""
        return normalize_elements(self.callback())


WaitTarget = SingleElement | ElementList | Resolver


def as_wait_target(value: Any) -> WaitTarget:
    """Classify *value* into one of the :data:`WaitTarget` variants."""
    if isinstance(value, (SingleElement, ElementList, Resolver)):
        return value
    if callable(value):
        return Resolver(value)
    if isinstance(value, (list, tuple)):
        return ElementList(tuple(value))
    return SingleElement(value)
