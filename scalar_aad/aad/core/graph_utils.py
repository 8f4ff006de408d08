"""
Graph inspection helpers.

Read-only views of a computation graph built from `op` tags and
`predecessors`; nothing here takes part in differentiation.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order


def _op_family(op: str) -> str:
    # "pow:2" and "pow:-1" count as one kind of operation
    if not op:
        return "leaf"
    return op.split(":", 1)[0]


def get_graph_stats(root) -> Dict:
    """
    Collect statistics for the graph reachable from `root`.

    Returns:
        dict with nodes, edges, fan-in/fan-out extremes and averages, and an
        operation breakdown by op family
    """
    topo = topological_order(root)
    n_nodes = len(topo)

    # fan-in: operands per node
    fan_ins = [len(v.predecessors) for v in topo]
    n_edges = sum(fan_ins)

    # fan-out: how many reachable nodes consume each node
    position = {id(v): i for i, v in enumerate(topo)}
    fan_outs = [0] * n_nodes
    for v in topo:
        for p in v.predecessors:
            fan_outs[position[id(p)]] += 1

    op_counter = Counter(_op_family(v.op) for v in topo)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def analyze_graph_complexity(root) -> str:
    """
    Text report of the graph size and its most common operations.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,}")
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


def check_acyclic(tape) -> bool:
    """
    True if every recorded parent was recorded strictly before the node that
    uses it (or is an unrecorded leaf). Holds by construction; useful as a
    sanity check over tapes assembled by hand.
    """
    node_index = {id(nd.out): i for i, nd in enumerate(tape.nodes)}
    for i, node in enumerate(tape.nodes):
        for parent in node.parents:
            idx = node_index.get(id(parent))
            if idx is not None and idx >= i:
                return False
    return True
