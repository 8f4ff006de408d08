# aad/core/engine.py
from __future__ import annotations
import logging
from typing import List, Sequence, Union
from . import tape as tape_mod
from .var import Value

logger = logging.getLogger(__name__)


def topological_order(root: Value) -> List[Value]:
    """
    Return every node reachable from `root` so that each node appears after
    all of its predecessors (post-order DFS).

    Predecessors are visited in the order the op recorded them, so the result
    is deterministic. A node reached along several paths appears once.
    The walk is iterative; deep graphs (long sums) do not touch the recursion
    limit.
    """
    topo: List[Value] = []
    visited = set()
    stack = [(root, False)]  # (node, predecessors already pushed?)

    while stack:
        node, expanded = stack.pop()
        if expanded:
            topo.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)

        stack.append((node, True))
        # reversed so the first recorded predecessor is finished first
        for child in reversed(node.predecessors):
            if child not in visited:
                stack.append((child, False))

    return topo


def backward(root: Value) -> None:
    """
    Reverse-mode pass: after the call, every node reachable from `root`
    holds d(root)/d(node) in `.grad`, added to whatever it held before.

    Steps
    -----
    1) topological order of the reachable subgraph,
    2) seed root.grad = 1.0,
    3) apply each node's backward rule in exactly the reverse order, so a
       node's grad is complete before it is pushed to its predecessors.
    """
    topo = topological_order(root)
    logger.debug("backward: %d reachable nodes", len(topo))

    root.grad = 1.0
    for node in reversed(topo):
        node._backward()


def zero_grad(root: Value) -> None:
    """Reset `.grad` to 0.0 on every node reachable from `root`."""
    for node in topological_order(root):
        node.grad = 0.0


# ---------------- Tape sweep ---------------- #
def _active_tape():
    tape = tape_mod.global_tape
    if tape is None:
        raise RuntimeError("no active tape; build the graph inside `with use_tape():`")
    return tape


def zero_adjoints():
    """
    Set `.grad` to zero on every value seen by the active tape: recorded
    outputs and their parents (leaves are only reachable as parents).
    """
    tape = _active_tape()
    seen = set()
    for node in tape.nodes:
        for v in (node.out, *node.parents):
            if id(v) not in seen:
                v.grad = 0.0
                seen.add(id(v))


def reverse(outputs: Union[Value, Sequence[Value]], seed=1.0):
    """
    Single reverse sweep over the active tape.

    Args:
        outputs: a Value or a (list/tuple) of Values to seed.
        seed: gradient seed added to `outputs`. If `outputs` is a sequence,
              each output is seeded with 1.0 (`seed` is ignored).

    Notes:
        - Tape order is creation order, so walking it backwards is a valid
          reverse topological order for everything recorded on it.
        - Seeds are added, not assigned, matching the accumulate-only
          contract of `.grad`.
        - Only nodes reachable from `outputs` are swept, so values recorded
          for other graphs keep their gradients. Zero gradients are still
          propagated: 0 * inf must surface as nan, as in backward().
    """
    tape = _active_tape()

    if isinstance(outputs, (list, tuple)):
        for y in outputs:
            y.grad += 1.0
    else:
        outputs.grad += float(seed)

    reachable = set()
    for y in (outputs if isinstance(outputs, (list, tuple)) else (outputs,)):
        reachable.update(id(v) for v in topological_order(y))

    logger.debug("reverse: sweeping %d of %d recorded nodes", len(reachable), len(tape))
    for node in reversed(tape.nodes):
        if id(node.out) in reachable:
            node.out._backward()
