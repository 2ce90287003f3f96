# picograd/core/__init__.py

"""
Core public API of the autograd engine.

Exports:
    Node             : One scalar vertex of the computation graph.
    Value            : The differentiable scalar handle users compute with.
    backward         : Run one reverse pass from a terminal Value.
    topological_order: Reachable Nodes, terminal first.
    zero_grad        : Reset grads of a collection of Values.
    zero_graph_grad  : Reset grads of everything reachable from a Value.
    grad, grads      : Convenience: derivatives of a plain Python function.
    value            : Convenience: extract the data of a Value.
"""

from .node import Node
from .value import Value
from .engine import backward, topological_order, zero_grad, zero_graph_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "Value",
    "backward", "topological_order", "zero_grad", "zero_graph_grad",
    "grad", "grads", "grads_list", "value",
]
