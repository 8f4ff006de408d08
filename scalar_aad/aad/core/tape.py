# aad/core/tape.py
from __future__ import annotations
import logging
from typing import List, Optional, Tuple
from contextlib import contextmanager
from .node import Node

logger = logging.getLogger(__name__)


class Tape:
    """
    Records Nodes in creation order. Because an op can only reference values
    that already exist, creation order is itself a topological order.
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()

    def push_node(self, *, op_tag: str, out, parents: Tuple):
        """Append a Node(op_tag, out, parents) and return its index."""
        self.nodes.append(Node(op_tag=op_tag, out=out, parents=tuple(parents)))
        return len(self.nodes) - 1


# Active tape; None means operations are not recorded anywhere.
global_tape: Optional[Tape] = None


def record(out) -> Optional[int]:
    """Push `out` onto the active tape, if any, and return its tape index."""
    if global_tape is not None:
        return global_tape.push_node(op_tag=out.op, out=out, parents=out.predecessors)
    return None


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager that records every operation into a (fresh) tape:
        with use_tape() as tape:
            ... build computation ...
            reverse(y)
    """
    global global_tape
    prev = global_tape
    active = tape if tape is not None else Tape()
    try:
        global_tape = active
        logger.debug("tape opened (%d nodes already recorded)", len(active))
        yield active
    finally:
        logger.debug("tape closed with %d nodes", len(active))
        global_tape = prev
