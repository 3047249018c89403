# compgraph/core/__init__.py

"""
Core public API of the computation-graph engine.

Exports:
    Node, OpKind      : graph vertex and the closed set of operators.
    Tape, use_tape    : optional recorder for every node built in a block.
    topological_sort  : operands-first order of a graph.
    iter_reachable    : every node reachable from a root, once.
    backward          : reverse pass from a root, accumulating gradients.
    zero_gradients    : reset every reachable gradient to 0.0.
    value, gradient   : read accessors.
    grad, grads       : one-shot derivatives of a Python function.
"""

from .errors import GraphError, NodeAllocationError, CyclicGraphError, ArityError
from .node import Node, OpKind, arity
from .tape import Tape, use_tape
from .graph import topological_sort, iter_reachable
from .engine import backward, zero_gradients
from .seeds import value, gradient, grad, grads

__all__ = [
    "GraphError", "NodeAllocationError", "CyclicGraphError", "ArityError",
    "Node", "OpKind", "arity",
    "Tape", "use_tape",
    "topological_sort", "iter_reachable",
    "backward", "zero_gradients",
    "value", "gradient", "grad", "grads",
]
