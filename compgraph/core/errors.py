# compgraph/core/errors.py


class GraphError(Exception):
    """Base class for every error raised by the computation-graph core."""


class NodeAllocationError(GraphError, MemoryError):
    """A new node could not be created (out of memory, or the active tape is full)."""


class CyclicGraphError(GraphError):
    """
    An operand chain loops back onto itself.

    Attributes
    ----------
    node : Node
        The node that was reached again while it was still being visited.
    """

    def __init__(self, node):
        self.node = node
        super().__init__(f"cycle detected in computation graph at {node!r}")


class ArityError(GraphError, ValueError):
    """The number of operands does not match what the operator takes."""
