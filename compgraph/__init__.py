# compgraph/__init__.py
# Reverse-mode automatic differentiation over scalar computation graphs

from .core import (
    GraphError,
    NodeAllocationError,
    CyclicGraphError,
    ArityError,
    Node,
    OpKind,
    Tape,
    use_tape,
    topological_sort,
    iter_reachable,
    backward,
    zero_gradients,
    value,
    gradient,
    grad,
    grads,
)
from .ops import make_leaf, add, multiply, power, exponential, rectify

__version__ = "0.1.0"

__all__ = [
    # Errors
    'GraphError',
    'NodeAllocationError',
    'CyclicGraphError',
    'ArityError',
    # Graph
    'Node',
    'OpKind',
    'Tape',
    'use_tape',
    'topological_sort',
    'iter_reachable',
    # Builders
    'make_leaf',
    'add',
    'multiply',
    'power',
    'exponential',
    'rectify',
    # Engine
    'backward',
    'zero_gradients',
    'value',
    'gradient',
    'grad',
    'grads',
]
