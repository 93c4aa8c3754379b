"""
Unified text and link extraction for markdown syntax trees.

Works on markdown_it.tree.SyntaxTreeNode trees. Inline wrappers
(emphasis, strong emphasis, links) are traversed transparently, so the
same helpers apply to headings, table cells and any other node.
"""

from collections.abc import Iterator

from markdown_it.tree import SyntaxTreeNode

# Leaf node types whose content is visible text
TEXT_NODE_TYPES = {"text", "code_inline"}

LINK_NODE_TYPE = "link"


def walk(node: SyntaxTreeNode | None) -> Iterator[SyntaxTreeNode]:
    """
    Yield a node and all of its descendants in pre-order.

    Args:
        node: Root of the subtree (None yields nothing)

    Yields:
        Nodes in document order, parents before children
    """
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def extract_text(node: SyntaxTreeNode | None) -> str:
    """
    Extract all visible text from a node and its children.

    Text spans and code spans are appended verbatim in document order;
    markup characters never appear because they are not part of any
    text node. Line breaks, inline HTML and other leaves contribute nothing.

    Args:
        node: The node to extract text from

    Returns:
        The extracted text ("" for None)
    """
    return "".join(n.content for n in walk(node) if n.type in TEXT_NODE_TYPES)


def extract_first_link_url(node: SyntaxTreeNode | None) -> str | None:
    """
    Extract the destination URL of the first link found within a node.

    Searches depth-first, so a link wrapped in emphasis or strong emphasis
    is found just like a top-level one.

    Args:
        node: The node potentially containing a link

    Returns:
        The URL string if a link is found, otherwise None
    """
    for n in walk(node):
        if n.type == LINK_NODE_TYPE:
            href = n.attrs.get("href")
            return str(href) if href is not None else None
    return None
