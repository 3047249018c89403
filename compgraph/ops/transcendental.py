# compgraph/ops/transcendental.py
from ..core.node import Node, OpKind
from .arithmetic import _apply


def exponential(a) -> Node:
    return _apply(OpKind.EXP, a)
