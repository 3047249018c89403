# compgraph/core/seeds.py

# Read accessors and one-shot derivatives of plain Python functions. Each helper
# wraps its inputs as leaves, clears any gradient already on the resulting graph
# and runs exactly one backward pass from the function result.
from __future__ import annotations
from typing import Any, Callable, Dict

from .node import Node
from .tape import use_tape
from .engine import backward, zero_gradients


def value(x: Any) -> Any:
    """Return the forward value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def gradient(x: Any) -> float:
    """Return the accumulated gradient of a Node; plain numbers have none (0.0)."""
    return x.gradient if isinstance(x, Node) else 0.0


def _ensure_node(v: Any, *, name: str) -> Node:
    from ..ops.arithmetic import make_leaf
    if isinstance(v, Node):
        # inputs the function ignores are not reached by zero_gradients(y)
        v.gradient = 0.0
        return v
    return make_leaf(v, name=name)


def _run(y: Any, fname: str) -> None:
    if not isinstance(y, Node):
        raise TypeError(f"{fname} expects the function to return a Node, got {type(y)}")
    zero_gradients(y)
    backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds the graph inside a fresh tape and runs one backward pass.
    """
    with use_tape():
        x = _ensure_node(x0, name="x")
        _run(f(x), "grad(f, x0)")
        return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), in ONE backward pass.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`

    Example
    -------
    grads(lambda v: v["x"] * v["x"] + 3 * v["y"], {"x": 2.0, "y": 4.0})
        -> {"x": 4.0, "y": 3.0}
    """
    with use_tape():
        nodes = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
        _run(f(nodes), "grads(f, inputs)")
        return {k: nodes[k].gradient for k in inputs.keys()}
