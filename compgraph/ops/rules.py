# compgraph/ops/rules.py
"""
Forward and local-gradient rules for every operator kind.

Each rule is split in two:
    forward(op, *values)   -> float
        primal value of the node from its operand values
    local_partials(node)   -> List[(operand, d node / d operand)]
        the partials the Backward Executor multiplies by node.gradient and adds
        into operand.gradient

All arithmetic is IEEE float64 through numpy scalars: overflow yields inf and
invalid powers yield nan instead of raising.

POW never lists its exponent: the exponent is treated as a frozen constant and
receives no gradient, only the base does.
"""
from __future__ import annotations
import logging
import numpy as np
from typing import List, Tuple

from ..core.node import Node, OpKind

logger = logging.getLogger(__name__)


def forward(op: OpKind, *values: float) -> float:
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        if op is OpKind.ADD:
            a, b = values
            out = np.float64(a) + np.float64(b)
        elif op is OpKind.MUL:
            a, b = values
            out = np.float64(a) * np.float64(b)
        elif op is OpKind.POW:
            base, exponent = values
            out = np.power(np.float64(base), np.float64(exponent))
        elif op is OpKind.EXP:
            (a,) = values
            out = np.exp(np.float64(a))
        elif op is OpKind.RELU:
            (a,) = values
            out = a if a > 0.0 else 0.0
        else:
            raise ValueError(f"operator {op.value!r} has no forward rule")

    out = float(out)
    if not np.isfinite(out):
        logger.debug("%s(%s) produced non-finite value %r", op.value, values, out)
    return out


def local_partials(node: Node) -> List[Tuple[Node, float]]:
    """
    Return the (operand, partial) pairs through which `node` passes gradient.

    Leaves have no operands and return an empty list.
    """
    op = node.op
    xs = node.operands

    if op is OpKind.LEAF:
        return []

    # ---------- Sum: d(a+b)/da = d(a+b)/db = 1 ----------
    if op is OpKind.ADD:
        return [(xs[0], 1.0), (xs[1], 1.0)]

    # ---------- Product: each side gets the other's value ----------
    if op is OpKind.MUL:
        a, b = xs
        return [(a, b.value), (b, a.value)]

    # ---------- Power: base only ----------
    if op is OpKind.POW:
        base, exponent = xs
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            d_base = exponent.value * np.power(np.float64(base.value),
                                               np.float64(exponent.value - 1.0))
        return [(base, float(d_base))]

    # ---------- Exponential: d(e^x)/dx = e^x, already in node.value ----------
    if op is OpKind.EXP:
        return [(xs[0], node.value)]

    # ---------- Rectifier: subgradient 0 at the kink ----------
    if op is OpKind.RELU:
        return [(xs[0], 1.0 if node.value > 0.0 else 0.0)]

    raise ValueError(f"operator {op.value!r} has no gradient rule")
