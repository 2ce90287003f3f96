"""
Computation-graph utilities.

Print and analyse the DAG reachable from a terminal Value. Nodes are numbered
in forward (leaves-first) order, so Node k only ever refers to Nodes < k.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from .engine import topological_order


def _forward_nodes(root) -> List:
    return list(reversed(topological_order(root)))


def get_graph_stats(root) -> Dict:
    """
    Statistics of the graph behind ``root`` (no printing).

    Returns:
        dict with nodes, edges, leaves, fan-in/fan-out maxima and means, and a
        per-label operation count (leaves are counted under their label,
        "leaf" when unlabelled)
    """
    nodes = _forward_nodes(root)
    n_nodes = len(nodes)
    n_edges = sum(len(node.operands) for node in nodes)

    fan_ins = [len(node.operands) for node in nodes]
    index = {id(node): i for i, node in enumerate(nodes)}
    fan_outs = [0] * n_nodes
    for node in nodes:
        for operand in node.operands:
            fan_outs[index[id(operand)]] += 1

    op_counter = Counter(node.label or "leaf" for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph behind ``root``.

    Args:
        root: terminal Value (or Node)
        detailed: also list every node when the graph has at most 100 nodes

    Returns:
        the dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print_computation_graph(root, max_nodes=100)
    else:
        print("="*70 + "\n")

    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """Print one line per node: index, label, data, grad and operand indices."""
    nodes = _forward_nodes(root)
    index = {id(node): i for i, node in enumerate(nodes)}

    print("="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    for i, node in enumerate(nodes[:max_nodes]):
        label = node.label or "leaf"
        head = f"Node {i:4d}: {label:12s} ({float(node.data):10.6f}, grad={float(node.grad):10.6f})"
        if node.operands:
            operand_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
            print(f"{head} <- [{operand_info}]")
        else:
            print(f"{head} [leaf]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")


def analyze_graph_complexity(root) -> str:
    """Short text report on the size and composition of the graph."""
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes'] - stats['leaves']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
