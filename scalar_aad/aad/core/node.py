# aad/core/node.py
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass
class Node:
    """
    One operation recorded on a tape.

    Attributes
    ----------
    op_tag : str
        Tag of the primitive (e.g. "add", "mul", "pow:2").
    out    : Any
        The Value produced by the op.
    parents: Tuple[Any, ...]
        The operand Values, in the order the op recorded them.
    """
    op_tag: str
    out: Any
    parents: Tuple[Any, ...]
