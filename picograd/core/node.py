# picograd/core/node.py
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import numpy as np


def _no_op_rule(node: "Node") -> None:
    return None


@dataclass(eq=False)
class Node:
    """
    One scalar vertex of the computation graph.

    Attributes
    ----------
    data : np.float64
        Forward result. Set at construction; an optimizer may overwrite it
        between training iterations.
    grad : np.float64
        Accumulated d(terminal)/d(data). Starts at 0 and is only added to
        while a backward pass runs.
    operands : Tuple[Node, ...]
        0, 1 or 2 predecessor Nodes, in operator order. The same Node may
        appear twice (``x * x``).
    backward_rule : Callable[[Node], None]
        Adds this node's contribution ``grad * local_partial`` into the grad
        of each operand. Leaves keep the no-op rule.
    label : Optional[str]
        Operator tag ("add", "tanh", ...) or a user-supplied name.

    Nodes hash and compare by identity (``eq=False``), which is what the
    traversal's visited-set relies on.
    """
    data: np.float64
    grad: np.float64 = np.float64(0.0)
    operands: Tuple["Node", ...] = field(default=(), repr=False)
    backward_rule: Callable[["Node"], None] = field(default=_no_op_rule, repr=False)
    label: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.operands

    def propagate(self) -> None:
        """Run this node's backward rule once."""
        self.backward_rule(self)
