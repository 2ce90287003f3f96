# picograd/core/value.py
from __future__ import annotations

import functools
import numbers
from typing import Optional

from ..config import DTYPE
from .node import Node


def _coerce(x) -> DTYPE:
    # bool is a numbers.Real too; it is accepted like 0/1
    if not isinstance(x, numbers.Real):
        raise TypeError(f"Value only accepts real numbers, but got {type(x)}")
    return DTYPE(x)


@functools.total_ordering
class Value:
    """
    Differentiable scalar: a handle sharing one graph :class:`Node`.

    Copying a Value (``copy.copy``, ``copy.deepcopy``, :meth:`alias`) never
    copies the Node; the new handle points at the same storage, so a gradient
    step applied through one handle is visible through every other.

    Example
    -------
    >>> a, b = Value(2.0), Value(3.0)
    >>> c = a * b + a
    >>> c.backward()
    >>> float(a.grad), float(b.grad)
    (4.0, 2.0)
    """

    __slots__ = ("_node",)

    def __init__(self, data, *, label: Optional[str] = None):
        self._node = Node(data=_coerce(data), label=label)

    @classmethod
    def from_node(cls, node: Node) -> "Value":
        """Wrap an existing Node without creating a new one."""
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, but got {type(node)}")
        handle = cls.__new__(cls)
        handle._node = node
        return handle

    # ----------------------------- node access ----------------------------- #
    @property
    def node(self) -> Node:
        return self._node

    @property
    def data(self):
        return self._node.data

    @data.setter
    def data(self, x):
        self._node.data = _coerce(x)

    @property
    def grad(self):
        return self._node.grad

    @grad.setter
    def grad(self, x):
        self._node.grad = _coerce(x)

    @property
    def label(self) -> Optional[str]:
        return self._node.label

    @property
    def is_leaf(self) -> bool:
        return self._node.is_leaf

    def alias(self) -> "Value":
        """Second handle to the same Node."""
        return Value.from_node(self._node)

    def __copy__(self):
        return self.alias()

    def __deepcopy__(self, memo):
        return self.alias()

    def backward(self) -> None:
        """Fill ``grad`` of every node this value depends on. See engine.backward."""
        from .engine import backward
        backward(self)

    def __repr__(self):
        return f"Value(data={float(self.data)!r}, grad={float(self.grad)!r})"

    def __float__(self):
        return float(self._node.data)

    # ------------------------------ ordering ------------------------------- #
    # Compares forward data only; grad is ignored.
    @staticmethod
    def _data_of(other):
        if isinstance(other, Value):
            return other.data
        if isinstance(other, numbers.Real):
            return other
        return NotImplemented

    def __eq__(self, other):
        rhs = self._data_of(other)
        if rhs is NotImplemented:
            return NotImplemented
        return bool(self.data == rhs)

    def __lt__(self, other):
        rhs = self._data_of(other)
        if rhs is NotImplemented:
            return NotImplemented
        return bool(self.data < rhs)

    # equality is by value, so a Value cannot be a dict/set key
    __hash__ = None

    # ------------------------- operator overloading ------------------------ #
    def __add__(self, other):
        if not isinstance(other, (Value, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not isinstance(other, (Value, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        if not isinstance(other, (Value, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        if not isinstance(other, (Value, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    # -------------------------- elementary functions ----------------------- #
    def tanh(self) -> "Value":
        from ..ops.activations import tanh
        return tanh(self)

    def relu(self) -> "Value":
        from ..ops.activations import relu
        return relu(self)

    def sigmoid(self) -> "Value":
        from ..ops.activations import sigmoid
        return sigmoid(self)

    def exp(self) -> "Value":
        from ..ops.transcendental import exp
        return exp(self)

    def log(self) -> "Value":
        from ..ops.transcendental import log
        return log(self)
