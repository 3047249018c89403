# compgraph/core/tape.py
from __future__ import annotations
from typing import List, Optional
from contextlib import contextmanager

from .errors import NodeAllocationError
from .node import Node


class Tape:
    """
    Records Nodes in creation (forward) order while it is the active tape.

    The tape holds strong references, so every recorded node stays alive until
    `reset()` drops them all at once. Nodes themselves are shared through
    ordinary references and do not need the tape to stay alive.

    Parameters
    ----------
    capacity : Optional[int]
        Maximum number of nodes the tape accepts; None for no limit. Recording
        past the limit raises NodeAllocationError.
    """
    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()

    def push_node(self, node: Node) -> None:
        """Append `node`, or raise NodeAllocationError if the tape is full."""
        if self.capacity is not None and len(self.nodes) >= self.capacity:
            raise NodeAllocationError(
                f"tape is full ({self.capacity} nodes); cannot record {node.op.value!r} node"
            )
        self.nodes.append(node)


# Active tape; None means nodes are not recorded anywhere
global_tape: Optional[Tape] = None


@contextmanager
def use_tape(tape: Optional[Tape] = None, capacity: Optional[int] = None):
    """
    Make `tape` (or a new Tape with `capacity`) the active tape for the block.

    Every node built by the op functions inside the block is appended to it; the
    previously active tape, usually None, is restored on exit even on error.

        with use_tape(capacity=1000) as tape:
            y = multiply(make_leaf(2.0), make_leaf(3.0))
        len(tape)  # 3
    """
    from . import tape as _tape_mod  # module access so ops see the swap
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape(capacity=capacity)
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
