"""
Backward traversal: ordering, accumulation through shared sub-expressions,
repeated passes, deep graphs, zeroing, functional helpers and graph stats.
"""

import pytest

from picograd import Value, Node, backward, topological_order, zero_grad, zero_graph_grad
from picograd.core import grad, grads, grads_list, value
from picograd.core.graph_utils import (get_graph_stats, print_graph_summary,
                                       print_computation_graph, analyze_graph_complexity)


def test_order_puts_consumers_before_operands():
    a, b = Value(1.0), Value(2.0)
    c = a * b
    d = c + a
    e = d.tanh()
    order = topological_order(e)

    assert order[0] is e.node
    position = {id(n): i for i, n in enumerate(order)}
    for node in order:
        for operand in node.operands:
            assert position[id(node)] < position[id(operand)]
    assert len(order) == len({id(n) for n in order}) == 5


def test_diamond_accumulates_both_paths():
    # x feeds two consumers which are joined again
    x = Value(3.0)
    left = x * 2.0
    right = x * x
    out = left + right
    out.backward()
    # d/dx (2x + x^2) = 2 + 2x
    assert x.grad == pytest.approx(2.0 + 2.0 * 3.0)


def test_shared_interior_node_runs_once():
    x = Value(0.5)
    shared = x.tanh()
    out = shared * shared + shared
    out.backward()
    t = float(shared.data)
    assert shared.grad == pytest.approx(2.0 * t + 1.0)
    assert x.grad == pytest.approx((2.0 * t + 1.0) * (1.0 - t * t))


def test_backward_on_bare_leaf():
    a = Value(4.0)
    a.backward()
    assert a.grad == 1.0


def test_backward_twice_doubles_leaf_grads():
    a, b = Value(1.5), Value(-2.0)
    out = ((a * b).tanh() + a).sigmoid() * b
    out.backward()
    first = (float(a.grad), float(b.grad))
    out.backward()
    assert a.grad == pytest.approx(2.0 * first[0])
    assert b.grad == pytest.approx(2.0 * first[1])
    assert out.grad == 1.0


def test_backward_accepts_node():
    a = Value(2.0)
    out = a * 3.0
    backward(out.node)
    assert a.grad == 3.0


def test_backward_rejects_other_types():
    with pytest.raises(TypeError):
        backward(1.0)


def test_deep_chain_does_not_hit_recursion_limit():
    x = Value(1.0)
    y = x
    depth = 5000
    for _ in range(depth):
        y = y + 1.0
    y.backward()
    assert y.data == 1.0 + depth
    assert x.grad == 1.0


def test_zero_grad_and_zero_graph_grad():
    a, b = Value(1.0), Value(2.0)
    out = a * b + b
    out.backward()
    zero_grad([a])
    assert a.grad == 0.0
    assert b.grad == 2.0

    zero_graph_grad(out)
    assert all(node.grad == 0.0 for node in topological_order(out))


def test_leaf_node_defaults():
    node = Node(data=1.0)
    assert node.is_leaf
    assert node.grad == 0.0
    node.propagate()
    assert node.grad == 0.0


def test_functional_grad_helpers():
    assert grad(lambda x: x * x + 3 * x, 2.0) == pytest.approx(7.0)

    result = grads(lambda v: v["a"] * v["b"] + v["b"].exp(), {"a": 2.0, "b": 0.0})
    assert list(result) == ["a", "b"]
    assert result["a"] == pytest.approx(0.0)
    assert result["b"] == pytest.approx(3.0)

    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == pytest.approx([4.0, 3.0])

    # constant output: no dependence on the input
    assert grad(lambda x: 5.0, 1.0) == 0.0

    assert value(Value(2.5)) == 2.5
    assert value(2.5) == 2.5


def test_graph_stats():
    a = Value(1.0, label="a")
    b = Value(2.0, label="b")
    c = a * b
    out = (c + c).tanh()
    stats = get_graph_stats(out)
    assert stats["nodes"] == 5
    assert stats["edges"] == 5
    assert stats["leaves"] == 2
    assert stats["max_fan_in"] == 2
    assert stats["max_fan_out"] == 2
    assert stats["operations"] == {"a": 1, "b": 1, "mul": 1, "add": 1, "tanh": 1}

    report = analyze_graph_complexity(out)
    assert "Total operations: 3" in report
    assert "Complexity level: Low" in report


def test_graph_printing(capsys):
    a = Value(1.0)
    out = (a * 2.0).relu()
    out.backward()
    stats = print_graph_summary(out, detailed=True)
    print_computation_graph(out, max_nodes=2)
    captured = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in captured
    assert "relu" in captured
    assert "... (2 more nodes)" in captured
    assert stats["nodes"] == 4
