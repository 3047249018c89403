# compgraph/core/graph.py
from __future__ import annotations
import logging
from collections import deque
from typing import Iterator, List

from .errors import CyclicGraphError
from .node import Node

logger = logging.getLogger(__name__)


def topological_sort(root: Node) -> List[Node]:
    """
    Order every node reachable from `root` so that operands come first.

    Depth-first post-order over `operands` (in order), with an explicit stack
    instead of recursion so deep chains do not hit the interpreter's recursion
    limit. Nodes are tracked by identity (`id`), never by value, so each
    reachable node is emitted exactly once however many consumers it has.

    Raises
    ------
    CyclicGraphError
        If an operand chain leads back to a node that is still being visited.
    """
    order: List[Node] = []
    done = set()       # ids of nodes already appended to `order`
    on_path = set()    # ids of nodes on the current DFS path

    # (node, index of the next operand to visit)
    stack = [(root, 0)]
    on_path.add(id(root))

    while stack:
        node, i = stack[-1]
        operands = node.operands
        if i < len(operands):
            stack[-1] = (node, i + 1)
            child = operands[i]
            cid = id(child)
            if cid in done:
                continue
            if cid in on_path:
                raise CyclicGraphError(child)
            on_path.add(cid)
            stack.append((child, 0))
        else:
            stack.pop()
            on_path.discard(id(node))
            done.add(id(node))
            order.append(node)

    logger.debug("topological_sort: %d node(s) reachable from %r", len(order), root)
    return order


def iter_reachable(root: Node) -> Iterator[Node]:
    """Yield every node reachable from `root` exactly once, breadth-first."""
    seen = {id(root)}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        for operand in node.operands:
            if id(operand) not in seen:
                seen.add(id(operand))
                queue.append(operand)
