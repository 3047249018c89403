"""
Computation graph utilities
Printing and analysis of the graph reachable from a root node
"""

import numpy as np
from typing import Dict
from collections import Counter

from .graph import topological_sort
from .node import Node


def get_graph_stats(root: Node) -> Dict:
    """
    Collect graph statistics without printing.

    Fan-in is the operand count of each node; fan-out is how many operand
    slots refer to it. A node used twice by one consumer (x + x) counts twice.

    Returns:
        dict with nodes, edges, max/avg fan-in, max/avg fan-out, operations
    """
    order = topological_sort(root)
    n_nodes = len(order)
    index = {id(node): i for i, node in enumerate(order)}

    fan_ins = [len(node.operands) for node in order]
    fan_outs = [0] * n_nodes
    for node in order:
        for operand in node.operands:
            fan_outs[index[id(operand)]] += 1

    op_counter = Counter(node.op.value for node in order)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def format_graph(root: Node, max_nodes: int = 20) -> str:
    """
    Render the graph one node per line, operands first.

    Args:
        root: output node
        max_nodes: how many nodes to show at most

    Returns:
        multi-line string
    """
    order = topological_sort(root)
    index = {id(node): i for i, node in enumerate(order)}
    lines = []

    for i, node in enumerate(order[:max_nodes]):
        label = f" '{node.name}'" if node.name else ""
        head = (f"Node {i:4d}: {node.op.value:6s} "
                f"(value={node.value:10.6f}, grad={node.gradient:10.6f}){label}")
        if node.operands:
            operand_info = ", ".join(f"Node{index[id(x)]}" for x in node.operands)
            lines.append(f"{head} <- [{operand_info}]")
        else:
            lines.append(f"{head} [leaf/input]")

    if len(order) > max_nodes:
        lines.append(f"... ({len(order) - max_nodes} more nodes)")
    return "\n".join(lines)


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output node
        detailed: also print the node list (graphs up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        print()
        print(format_graph(root, max_nodes=100))

    print("=" * 70 + "\n")
    return stats
