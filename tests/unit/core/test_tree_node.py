"""Tests for the structural helpers used to pick observation roots."""

from domwait.core.interfaces.notifier import TreeNode, is_attached, top_most_ancestor
from domwait.dom.node import Document, Element


class _ParentOnly:
    def __init__(self, parent=None) -> None:
        self.parent = parent

    def contains(self, other) -> bool:
        return other is self


class TestTreeNode:
    def test_document_nodes_and_duck_typed_nodes_qualify(self, document: Document):
        assert isinstance(document, TreeNode)
        assert isinstance(Element("div"), TreeNode)
        assert isinstance(_ParentOnly(), TreeNode)

    def test_plain_values_do_not(self):
        assert not isinstance("div", TreeNode)
        assert not isinstance(object(), TreeNode)


class TestTopMostAncestor:
    def test_attached_element_reaches_the_document(self, document: Document):
        div = Element("div")
        document.body.append_child(div)
        assert top_most_ancestor(div) is document

    def test_detached_subtree_reaches_its_local_root(self):
        root, leaf = Element("div"), Element("span")
        root.append_child(leaf)
        assert top_most_ancestor(leaf) is root

    def test_parentless_node_is_its_own_root(self):
        node = _ParentOnly()
        assert top_most_ancestor(node) is node


class TestIsAttached:
    def test_reports_parent_links(self, document: Document):
        div = Element("div")
        assert not is_attached(div)
        document.body.append_child(div)
        assert is_attached(div)

    def test_non_nodes_are_never_attached(self):
        assert not is_attached("div")
        assert not is_attached(None)
