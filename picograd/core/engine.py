# picograd/core/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Union

import numpy as np

from .node import Node
from .value import Value

logger = logging.getLogger("picograd.engine")


def _node_of(x: Union[Value, Node]) -> Node:
    if isinstance(x, Value):
        return x.node
    if isinstance(x, Node):
        return x
    raise TypeError(f"expected a Value or Node, but got {type(x)}")


def topological_order(root: Union[Value, Node]) -> List[Node]:
    """
    Every Node reachable from ``root`` through operand edges, terminal first.

    Each Node appears exactly once and strictly before all of its operands,
    i.e. after every consumer that can reach it. Built as an iterative
    depth-first postorder with an explicit ``(node, expanded)`` stack, so
    graph depth is not bounded by the interpreter recursion limit.
    """
    start = _node_of(root)
    postorder: List[Node] = []
    visited = set()
    stack = [(start, False)]  # (node, expanded?)

    while stack:
        node, expanded = stack.pop()
        if expanded:
            postorder.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)

        stack.append((node, True))
        for operand in reversed(node.operands):
            if operand not in visited:
                stack.append((operand, False))

    postorder.reverse()
    return postorder


def backward(root: Union[Value, Node]) -> None:
    """
    Reverse-mode sweep from ``root``.

    Steps:
        1) order all reachable Nodes terminal-first;
        2) reset grad of interior (non-leaf) Nodes, so that one pass adds
           exactly one copy of the derivative;
        3) seed d(root)/d(root) = 1;
        4) run each Node's backward rule once, consumers before operands.

    Leaves are never reset here: gradients accumulate across passes until the
    caller zeroes them (see :func:`zero_grad`). Calling this on a bare leaf
    just sets its grad to 1.
    """
    start = _node_of(root)
    order = topological_order(start)
    logger.debug("backward: %d nodes reachable from %s", len(order), start.label or "root")

    for node in order:
        if not node.is_leaf:
            node.grad = np.float64(0.0)

    start.grad = np.float64(1.0)
    for node in order:
        node.propagate()


def zero_grad(values: Iterable[Union[Value, Node]]) -> None:
    """Set grad = 0 on each given Value/Node (e.g. a layer's parameters)."""
    for v in values:
        _node_of(v).grad = np.float64(0.0)


def zero_graph_grad(root: Union[Value, Node]) -> None:
    """Set grad = 0 on every Node reachable from ``root``, leaves included."""
    zero_grad(topological_order(root))
