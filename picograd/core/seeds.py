# picograd/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Each helper builds a fresh graph, so nothing
# leaks between calls.
#-----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .value import Value
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric data of a Value; pass through plain numbers unchanged."""
    return x.data if isinstance(x, Value) else x


def _ensure_value(v: Any, *, name: str) -> Value:
    """Wrap a plain number as a leaf Value if needed; otherwise return the Value itself."""
    return v if isinstance(v, Value) else Value(v, label=name)


def _run(y, leaves: List[Value]) -> None:
    for x in leaves:
        x.grad = 0.0
    # A constant output does not depend on the inputs at all
    if isinstance(y, Value):
        backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> np.float64:
    """
    Derivative of a scalar function y = f(x) at x0.

    Example
    -------
    grad(lambda x: x * x + 3 * x, 2.0) -> 7.0
    """
    x = _ensure_value(x0, name="x")
    _run(f(x), [x])
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, np.float64]:
    """
    Gradient of y = f(vars) w.r.t. ALL inputs (dict form), in ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a scalar Value
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # partials in the same key order as `inputs`
    """
    vars_v: Dict[str, Value] = {k: _ensure_value(v, name=k) for k, v in inputs.items()}
    _run(f(vars_v), list(vars_v.values()))
    return {k: vars_v[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a
    list of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_ensure_value(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs), xs)
    return [x.grad for x in xs]
