"""In-memory document: nodes, mutation observer, HTML builder, queries."""

from domwait.dom.builder import parse_html, render_html
from domwait.dom.mutation import MutationObserver, MutationRecord
from domwait.dom.node import Document, Element, Node, Text
from domwait.dom.queries import BoundQueries, within

__all__ = [
    "parse_html",
    "render_html",
    "MutationObserver",
    "MutationRecord",
    "Document",
    "Element",
    "Node",
    "Text",
    "BoundQueries",
    "within",
]
