# picograd/ops/arithmetic.py
import numpy as np

from ..core.node import Node
from ..core.value import Value


def _as_value(x):
    """Ensure x is a Value; otherwise promote it to a fresh constant leaf."""
    return x if isinstance(x, Value) else Value(x, label="const")


def _chain(partials):
    """
    Backward rule for a node whose local partials are already known.

    ``partials[k]`` is d(out)/d(operand k), evaluated from the forward values
    at node-creation time, so later writes to an operand's ``data`` do not
    leak into this pass.
    """
    def rule(node):
        for operand, local in zip(node.operands, partials):
            operand.grad = operand.grad + node.grad * local
    return rule


def _record(out_data, operands, partials, tag):
    node = Node(
        data=np.float64(out_data),
        operands=tuple(v.node for v in operands),
        backward_rule=_chain(tuple(np.float64(p) for p in partials)),
        label=tag,
    )
    return Value.from_node(node)


def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data)
      - records a Node with local partials (d out/dx, d out/dy)
    """
    x = _as_value(x)
    y = _as_value(y)
    a, b = x.data, y.data
    return _record(f(a, b), (x, y), (dfdx(a, b), dfdy(a, b)), tag)


def _unary(x, f, dfdx, tag):
    """Generic single-operand primitive; ``dfdx`` receives (x, out) forward values."""
    x = _as_value(x)
    a = x.data
    out = f(a)
    return _record(out, (x,), (dfdx(a, out),), tag)


def add(x, y): return _binary(x, y, lambda a,b:a+b, lambda a,b:1.0, lambda a,b:1.0,               "add")
def sub(x, y): return _binary(x, y, lambda a,b:a-b, lambda a,b:1.0, lambda a,b:-1.0,              "sub")
def mul(x, y): return _binary(x, y, lambda a,b:a*b, lambda a,b:b,   lambda a,b:a,                 "mul")
def div(x, y): return _binary(x, y, lambda a,b:a/b, lambda a,b:1.0/b, lambda a,b:-a/np.square(b), "div")


def neg(x):
    """
    Unary negation:
      out.data = -x.data
      d out/dx = -1
    """
    return _unary(x, lambda a: -a, lambda a, out: -1.0, "neg")


def pow(x, exponent):
    """
    Power with a constant real exponent n:
      out.data = x.data ** n
      d out/dx = n * x^(n-1)

    The exponent is not a graph operand; negative bases with non-integer
    exponents give nan, as in numpy.
    """
    n = np.float64(exponent)
    return _unary(x, lambda a: np.power(a, n), lambda a, out: n * np.power(a, n - 1.0), "pow")
