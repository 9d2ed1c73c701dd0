"""In-memory document tree: Node, Element, Text, Document.

Every structural change (child insert/remove, attribute write, text
write) produces a :class:`~domwait.dom.mutation.MutationRecord` that is
queued to interested observers.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Iterator

from domwait.dom.mutation import (
    ATTRIBUTES,
    CHARACTER_DATA,
    CHILD_LIST,
    MutationRecord,
    queue_mutation_record,
)

if TYPE_CHECKING:
    from domwait.dom.mutation import _Registration

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input",
     "link", "meta", "source", "track", "wbr"}
)


class Node:
    """Base tree node with parent / child links."""

    def __init__(self) -> None:
        self._parent: Node | None = None
        self._children: list[Node] = []
        self._registrations: list[_Registration] = []

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def root_node(self) -> Node:
        """Top-most ancestor (``self`` when detached)."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def is_connected(self) -> bool:
        return isinstance(self.root_node, Document)

    @property
    def mutation_observer_count(self) -> int:
        """Number of observers registered directly on this node."""
        return len(self._registrations)

    def contains(self, other: object) -> bool:
        """``True`` if *other* is this node or one of its descendants."""
        node = other if isinstance(other, Node) else None
        while node is not None:
            if node is self:
                return True
            node = node._parent
        return False

    def iter_descendants(self) -> Iterator[Node]:
        """Pre-order walk of every descendant (not including ``self``)."""
        for child in self._children:
            yield child
            yield from child.iter_descendants()

    @property
    def text_content(self) -> str:
        return "".join(n.data for n in self.iter_descendants() if isinstance(n, Text))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append_child(self, child: Node) -> Node:
        return self._insert(child, len(self._children))

    def prepend(self, child: Node) -> Node:
        return self._insert(child, 0)

    def insert_before(self, child: Node, reference: Node | None) -> Node:
        """Insert *child* before *reference* (append when *reference* is None)."""
        if reference is None:
            return self.append_child(child)
        if reference._parent is not self:
            raise ValueError("The reference node is not a child of this node.")
        if reference is child:
            return child
        self._detach(child)
        return self._insert(child, self._children.index(reference))

    def remove_child(self, child: Node) -> Node:
        if child._parent is not self:
            raise ValueError("The node to be removed is not a child of this node.")
        self._children.remove(child)
        child._parent = None
        queue_mutation_record(MutationRecord(type=CHILD_LIST, target=self, removed_nodes=[child]))
        return child

    def remove(self) -> None:
        """Detach this node from its parent, if any."""
        if self._parent is not None:
            self._parent.remove_child(self)

    def _insert(self, child: Node, index: int) -> Node:
        if child.contains(self):
            raise ValueError("The new child contains the parent.")
        if child._parent is not None:
            moved_from_here = child._parent is self
            old_index = child._parent._children.index(child)
            child._parent.remove_child(child)
            if moved_from_here and old_index < index:
                index -= 1
        self._children.insert(index, child)
        child._parent = self
        queue_mutation_record(MutationRecord(type=CHILD_LIST, target=self, added_nodes=[child]))
        return child

    def _detach(self, child: Node) -> None:
        if child._parent is not None:
            child._parent.remove_child(child)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_html(self) -> str:
        return "".join(child.to_html() for child in self._children)


class Element(Node):
    """Tagged node with string attributes."""

    def __init__(self, tag_name: str, attributes: dict[str, str] | None = None) -> None:
        super().__init__()
        self.tag_name = tag_name.lower()
        self._attributes: dict[str, str] = dict(attributes or {})

    def __repr__(self) -> str:
        attrs = "".join(f' {k}="{v}"' for k, v in self._attributes.items())
        return f"<Element {self.tag_name}{attrs}>"

    @property
    def attributes(self) -> dict[str, str]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def set_attribute(self, name: str, value: str) -> None:
        old = self._attributes.get(name)
        self._attributes[name] = str(value)
        queue_mutation_record(
            MutationRecord(type=ATTRIBUTES, target=self, attribute_name=name, old_value=old)
        )

    def remove_attribute(self, name: str) -> None:
        if name not in self._attributes:
            return
        old = self._attributes.pop(name)
        queue_mutation_record(
            MutationRecord(type=ATTRIBUTES, target=self, attribute_name=name, old_value=old)
        )

    def to_html(self) -> str:
        attrs = "".join(f' {k}="{escape(v)}"' for k, v in self._attributes.items())
        if self.tag_name in VOID_ELEMENTS:
            return f"<{self.tag_name}{attrs}>"
        return f"<{self.tag_name}{attrs}>{super().to_html()}</{self.tag_name}>"


class Text(Node):
    """Character data leaf."""

    def __init__(self, data: str = "") -> None:
        super().__init__()
        self._data = data

    def __repr__(self) -> str:
        return f"<Text {self._data!r}>"

    @property
    def data(self) -> str:
        return self._data

    @data.setter
    def data(self, value: str) -> None:
        old = self._data
        self._data = value
        queue_mutation_record(MutationRecord(type=CHARACTER_DATA, target=self, old_value=old))

    @property
    def text_content(self) -> str:
        return self._data

    def _insert(self, child: Node, index: int) -> Node:
        raise ValueError("Text nodes cannot have children.")

    def to_html(self) -> str:
        return escape(self._data, quote=False)


class Document(Node):
    """Root of a connected tree.  Starts with an empty ``<body>``."""

    def __init__(self) -> None:
        super().__init__()
        self.body = Element("body")
        self.append_child(self.body)

    def __repr__(self) -> str:
        return "<Document>"

    def create_element(self, tag_name: str, **attributes: str) -> Element:
        """Create a detached element.  Underscores in keyword names become
        dashes, so ``data_testid="x"`` sets ``data-testid``.
        """
        return Element(tag_name, {k.replace("_", "-"): v for k, v in attributes.items()})
