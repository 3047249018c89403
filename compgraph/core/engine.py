# compgraph/core/engine.py
from __future__ import annotations
import logging

from .graph import topological_sort
from .node import Node
from ..ops.rules import local_partials

logger = logging.getLogger(__name__)


def backward(root: Node, seed: float = 1.0) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: output node; every node reachable from it receives d root / d node.
        seed: value written (not added) into root.gradient before the sweep.

    Notes:
        - For each non-leaf node, in reverse topological order, we propagate:
              operand.gradient += node.gradient * (d node / d operand)
        - Reverse topological order visits every consumer before its operands,
          so a shared operand has collected all its contributions before it
          propagates further.
        - Gradients are accumulated, not overwritten. Call `zero_gradients`
          between independent passes over the same graph.
    """
    order = topological_sort(root)
    root.gradient = float(seed)
    logger.debug("backward: seeding %r with %r over %d node(s)", root, seed, len(order))

    for node in reversed(order):
        if node.is_leaf:
            continue
        g = node.gradient
        for operand, partial in local_partials(node):
            operand.gradient += partial * g


def zero_gradients(root: Node) -> None:
    """
    Set the gradient of every node reachable from `root` to zero.

    Each node is visited once regardless of fan-in; calling this repeatedly, or
    on overlapping subgraphs, always leaves the reachable gradients at 0.0.

    Raises
    ------
    CyclicGraphError
        If the operands loop back on themselves; no gradient is touched then.
    """
    order = topological_sort(root)
    for node in order:
        node.gradient = 0.0
    logger.debug("zero_gradients: reset %d node(s)", len(order))
