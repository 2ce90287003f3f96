import math

import numpy as np
import pytest

from picograd import Value, ShapeMismatchError
from picograd.nn import softmax, cross_entropy, cross_entropy_with_logits, binary_cross_entropy


def test_softmax_single_element_is_one():
    assert softmax([Value(1.0)])[0].data == 1.0
    assert softmax([Value(0.5)])[0].data == 1.0
    assert softmax([Value(-300.0)])[0].data == 1.0


def test_softmax_sums_to_one_and_keeps_order():
    inputs = sorted([Value(1.0), Value(7.0), Value(-1.0)])
    result = softmax(inputs)
    total = Value(0.0)
    for r in result:
        total = total + r
    assert total.data == pytest.approx(1.0)
    assert result == sorted(result)


def test_softmax_large_inputs_stay_finite():
    result = softmax([Value(1000.0), Value(999.0), 1001.0])
    data = np.array([float(r.data) for r in result])
    assert np.all(np.isfinite(data))
    assert data.sum() == pytest.approx(1.0)
    assert np.argmax(data) == 2


def test_softmax_gradient():
    a, b = Value(0.3), Value(-0.4)
    p = softmax([a, b])
    p[0].backward()
    pa, pb = float(p[0].data), float(p[1].data)
    assert a.grad == pytest.approx(pa * (1.0 - pa))
    assert b.grad == pytest.approx(-pa * pb)


def test_cross_entropy_values():
    # single-element container: zero for the negative class, -log(p) for the positive one
    assert cross_entropy([Value(1.0)], [Value(0.0)]).data == pytest.approx(0.0)
    assert cross_entropy([Value(1.0)], [Value(1.0)]).data == pytest.approx(-math.log(1.0))

    some_inputs = [Value(1.64872), Value(1.0), Value(1.0)]  # log() = 0.5, 0, 0
    some_ones = [Value(1.0), Value(1.0), Value(1.0)]
    result = cross_entropy(some_inputs, some_ones)
    assert result.data == pytest.approx(-(1.0 * 0.5 + 0.0 + 0.0) / 3.0, abs=1e-4)


def test_cross_entropy_accepts_number_targets():
    pred = [Value(0.7), Value(0.3)]
    assert cross_entropy(pred, [1, 0]).data == pytest.approx(-math.log(0.7) / 2.0)


def test_cross_entropy_with_logits_matches_softmax_path():
    pred = [Value(0.8), Value(-2.1), Value(5.03)]
    target = [Value(1.0), Value(0.0), Value(0.0)]

    reference = cross_entropy(softmax(pred), target)
    under_test = cross_entropy_with_logits(pred, target)
    assert under_test.data == pytest.approx(reference.data)


def test_cross_entropy_with_logits_gradient():
    # d/dz_i = (softmax(z)_i - t_i) / N for a one-hot target
    z = [Value(0.2), Value(1.1), Value(-0.7)]
    t = [0.0, 1.0, 0.0]
    cross_entropy_with_logits(z, t).backward()
    probs = [float(p.data) for p in softmax([float(v.data) for v in z])]
    for v, p, ti in zip(z, probs, t):
        assert v.grad == pytest.approx((p - ti) / 3.0)


@pytest.mark.parametrize("p, t", [(0.8, 1.0), (0.2, 0.0), (0.35, 0.6)])
def test_binary_cross_entropy_matches_two_class_cross_entropy(p, t):
    reference = cross_entropy([Value(p), Value(1.0 - p)], [Value(t), Value(1.0 - t)])
    under_test = binary_cross_entropy(Value(p), Value(t))
    assert under_test.data == pytest.approx(reference.data)


def test_binary_cross_entropy_gradient():
    p = Value(0.25)
    binary_cross_entropy(p, 1.0).backward()
    # loss = -log(p) / 2
    assert p.grad == pytest.approx(-1.0 / (2.0 * 0.25))


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        cross_entropy([Value(0.5), Value(0.5)], [Value(1.0)])
    with pytest.raises(ShapeMismatchError):
        cross_entropy_with_logits([Value(0.5)], [1.0, 0.0])
    with pytest.raises(ShapeMismatchError):
        cross_entropy([], [])
    with pytest.raises(ShapeMismatchError):
        softmax([])
