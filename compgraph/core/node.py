# compgraph/core/node.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence, Tuple

from .errors import ArityError


class OpKind(str, Enum):
    """Closed set of operators a node can be produced by. Values double as debug tags."""
    LEAF = "leaf"
    ADD = "add"
    MUL = "mul"
    POW = "pow"
    EXP = "exp"
    RELU = "relu"


_ARITY = {
    OpKind.LEAF: 0,
    OpKind.ADD: 2,
    OpKind.MUL: 2,
    OpKind.POW: 2,
    OpKind.EXP: 1,
    OpKind.RELU: 1,
}


def arity(op: OpKind) -> int:
    """Number of operands taken by `op`."""
    return _ARITY[op]


class Node:
    """
    One vertex of the computation graph.

    Attributes
    ----------
    value : float
        Forward (primal) value. Read-only.
    gradient : float
        Reverse-mode accumulator, 0.0 at construction. Written by `backward`
        (seed + accumulation) and by `zero_gradients`.
    op : OpKind
        Operator that produced this node (`OpKind.LEAF` for inputs). Read-only.
    operands : tuple of Node
        Inputs of `op`, in order; empty for leaves. Read-only. The same node may
        appear as an operand of many consumers, or twice in one tuple.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    __slots__ = ("_value", "gradient", "_op", "_operands", "name")

    def __init__(self, value: float, op: OpKind = OpKind.LEAF,
                 operands: Sequence[Node] = (), *, name: Optional[str] = None):
        op = OpKind(op)
        operands = tuple(operands)
        if len(operands) != arity(op):
            raise ArityError(
                f"operator {op.value!r} takes {arity(op)} operand(s), got {len(operands)}"
            )
        for operand in operands:
            if not isinstance(operand, Node):
                raise TypeError(f"operands must be Node instances, got {type(operand)}")

        self._value = float(value)
        self.gradient = 0.0
        self._op = op
        self._operands: Tuple[Node, ...] = operands
        self.name = name

    @property
    def value(self) -> float:
        return self._value

    @property
    def op(self) -> OpKind:
        return self._op

    @property
    def operands(self) -> Tuple[Node, ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self._op is OpKind.LEAF

    def __repr__(self):
        return (f"Node({self._value!r}, op={self._op.value}, "
                f"grad={self.gradient!r}, name={self.name!r})")

    # Operator overloading; plain numbers are wrapped as leaves
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def __pow__(self, other):
        from ..ops.arithmetic import power
        return power(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import power
        return power(other, self)
