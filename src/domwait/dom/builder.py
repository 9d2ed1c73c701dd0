"""Build :mod:`domwait.dom` trees from HTML markup (stdlib ``html.parser``)."""

from __future__ import annotations

from html.parser import HTMLParser

from domwait.dom.node import VOID_ELEMENTS, Element, Node, Text


class _TreeBuilder(HTMLParser):
    """Collects parsed markup into detached top-level nodes.

    Whitespace-only text is dropped; unmatched end tags are ignored.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.roots: list[Node] = []
        self._stack: list[Element] = []

    def _add(self, node: Node) -> None:
        if self._stack:
            self._stack[-1].append_child(node)
        else:
            self.roots.append(node)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._add(element)
        if element.tag_name not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._add(Element(tag, {name: value or "" for name, value in attrs}))

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].tag_name == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        if data.strip():
            self._add(Text(data))


def parse_html(markup: str) -> list[Node]:
    """Parse *markup* into a list of detached top-level nodes."""
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.roots


def render_html(markup: str, container: Node) -> list[Node]:
    """Parse *markup* and append the resulting nodes to *container*."""
    nodes = parse_html(markup)
    for node in nodes:
        container.append_child(node)
    return nodes
