"""
Loss helpers over Value collections.

Every helper is a pure function: it only builds new graph nodes. Targets may
be Values or plain numbers. Cross-entropy variants are averaged over the
number of classes N.
"""

from typing import List, Sequence

from ..core.value import Value
from ..errors import ShapeMismatchError
from ..ops.arithmetic import _as_value


def _check_lengths(prediction: Sequence, target: Sequence, name: str) -> None:
    if len(prediction) == 0:
        raise ShapeMismatchError(f"{name} expects non-empty inputs")
    if len(prediction) != len(target):
        raise ShapeMismatchError(
            f"{name} expects containers of equal length, got {len(prediction)} and {len(target)}"
        )


def _log_sum_exp(values: Sequence[Value]) -> Value:
    # Shifting by the max data is exact and keeps exp() finite; the shift is a
    # constant, so gradients are unchanged.
    shift = max(float(v.data) for v in values)
    sum_exps = Value(0.0)
    for v in values:
        sum_exps = sum_exps + (v - shift).exp()
    return sum_exps.log() + shift


def softmax(inputs: Sequence) -> List[Value]:
    """
    Turn scores into probabilities (between 0 and 1, summing to 1), for inputs
    of more than one value; a single value always maps to [1.0] (use sigmoid
    for single-output binary classification).
    """
    if len(inputs) == 0:
        raise ShapeMismatchError("softmax expects a non-empty collection")
    values = [_as_value(x) for x in inputs]
    shift = max(float(v.data) for v in values)

    exps = [(v - shift).exp() for v in values]
    sum_exps = Value(0.0)
    for e in exps:
        sum_exps = sum_exps + e
    return [e / sum_exps for e in exps]


def cross_entropy(prediction: Sequence, target: Sequence) -> Value:
    """Negative log-likelihood of probabilities: -(sum_i t_i * log(p_i)) / N."""
    _check_lengths(prediction, target, "cross_entropy")
    result = Value(0.0)
    for p, t in zip(prediction, target):
        result = result + t * _as_value(p).log()
    return -result / len(target)


def cross_entropy_with_logits(prediction: Sequence, target: Sequence) -> Value:
    """
    Cross-entropy computed from raw scores (logits) instead of probabilities:
    -(sum_i t_i * (z_i - logsumexp(z))) / N. Same value as
    ``cross_entropy(softmax(z), t)`` without evaluating log(softmax).
    """
    _check_lengths(prediction, target, "cross_entropy_with_logits")
    logits = [_as_value(z) for z in prediction]
    log_norm = _log_sum_exp(logits)

    result = Value(0.0)
    for z, t in zip(logits, target):
        result = result + t * (z - log_norm)
    return -result / len(target)


def binary_cross_entropy(prediction, target) -> Value:
    """
    Cross-entropy of a single probability (e.g. a sigmoid output) against a
    binary target; equals ``cross_entropy([p, 1-p], [t, 1-t])``.
    """
    prediction = _as_value(prediction)
    neg_pred = -prediction + 1
    neg_targ = -target + 1
    return cross_entropy([prediction, neg_pred], [target, neg_targ])
