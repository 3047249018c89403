# compgraph/ops/__init__.py

# Convenience re-exports so users can do: from compgraph.ops import multiply, exponential, ...
from .arithmetic import make_leaf, add, multiply, power
from .transcendental import exponential
from .activation import rectify

__all__ = [
    "make_leaf",
    "add", "multiply", "power",
    "exponential",
    "rectify",
]
