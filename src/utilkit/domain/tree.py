"""Tree nodes and pre-order traversal.

INVARIANT: the child relation must be acyclic. Nothing here checks it;
a cycle recurses until the interpreter raises ``RecursionError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

NodeId = str | int


class TreeNode(BaseModel):
    """A node with an identifier and ordered children."""

    id: NodeId
    children: list[TreeNode] = Field(default_factory=list)


def _log_visit(node_id: NodeId) -> None:
    logger.info("visit node %s", node_id)


def traverse_tree(node: TreeNode, visit: Callable[[NodeId], object] | None = None) -> None:
    """Walk *node* depth-first, calling *visit* on each id before its children.

    Without a visitor each id is logged at INFO on ``utilkit.domain.tree``.
    """
    if visit is None:
        visit = _log_visit
    visit(node.id)
    for child in node.children:
        traverse_tree(child, visit)


def iter_tree(node: TreeNode) -> Iterator[TreeNode]:
    """Yield *node* and its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from iter_tree(child)
