# compgraph/ops/activation.py
from ..core.node import Node, OpKind
from .arithmetic import _apply


def rectify(a) -> Node:
    """
    Rectified linear unit: out.value = max(0, a.value).

    The gradient passes through unchanged where out.value > 0 and is 0
    elsewhere, including at a.value == 0.
    """
    return _apply(OpKind.RELU, a)
