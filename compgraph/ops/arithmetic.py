# compgraph/ops/arithmetic.py
import numbers
import numpy as np
from typing import Optional, Sequence

from ..core.errors import NodeAllocationError
from ..core.node import Node, OpKind
from ..core import tape as tape_mod  # module access for use_tape() compatibility
from . import rules


def make_leaf(value, name: Optional[str] = None) -> Node:
    """Create an input node holding `value` with a zero gradient."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, np.floating)):
        raise TypeError(f"leaf values must be real numbers, got {type(value)}")
    return _push(OpKind.LEAF, float(value), (), name)


def _as_node(x) -> Node:
    """Ensure x is a Node; otherwise wrap it as a leaf."""
    return x if isinstance(x, Node) else make_leaf(x)


def _push(op: OpKind, value: float, operands: Sequence[Node], name: Optional[str] = None) -> Node:
    """Allocate the node and record it on the active tape, if any."""
    try:
        out = Node(value, op, operands, name=name)
    except MemoryError as exc:
        raise NodeAllocationError(f"could not allocate {op.value!r} node") from exc
    if tape_mod.global_tape is not None:
        tape_mod.global_tape.push_node(out)
    return out


def _apply(op: OpKind, *xs) -> Node:
    """
    Generic primitive:
      - computes out.value from the operand values
      - builds a node bound to `op`, whose rule drives the reverse pass
    Operands are only read.
    """
    xs = tuple(_as_node(x) for x in xs)
    return _push(op, rules.forward(op, *(x.value for x in xs)), xs)


def add(a, b) -> Node: return _apply(OpKind.ADD, a, b)
def multiply(a, b) -> Node: return _apply(OpKind.MUL, a, b)


def power(base, exponent) -> Node:
    """
    Power:
      out.value = base.value ** exponent.value

    Local partials:
      d out / d base     = exponent * base^(exponent-1)
      d out / d exponent = none; the exponent is a frozen constant and its
                           gradient is never touched by backward()
    """
    return _apply(OpKind.POW, base, exponent)
