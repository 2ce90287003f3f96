"""
Fully connected layer of scalar neurons.

Each of the ``num_outputs`` neurons computes
``activation(bias_j + sum_i w_ji * x_i)`` over all ``num_inputs`` inputs.
Weights are stored row-major per neuron: ``weights[j * num_inputs + i]``
connects input ``i`` to neuron ``j``.
"""

import enum
import logging
from typing import List, Sequence

from ..core.value import Value
from ..errors import ConfigurationError, ShapeMismatchError
from ..ops.activations import relu, sigmoid, tanh
from .random import RandomDistribution

logger = logging.getLogger("picograd.nn.layer")


class Activation(enum.Enum):
    TANH = "tanh"
    RELU = "relu"
    SIGMOID = "sigmoid"


_ACTIVATION_FUNCS = {
    Activation.TANH: tanh,
    Activation.RELU: relu,
    Activation.SIGMOID: sigmoid,
}


def resolve_activation(activation):
    """Map an Activation (or its string value) to its elementary function."""
    try:
        activation = Activation(activation)
    except ValueError:
        raise ConfigurationError(f"Unsupported activation function {activation!r}") from None
    return activation, _ACTIVATION_FUNCS[activation]


class Layer:
    """
    Layer of ``num_outputs`` neurons, each fully connected to ``num_inputs``
    inputs and carrying its own bias.

    Args:
        num_inputs: Number of inputs per neuron
        num_outputs: Number of neurons
        random: Source used to initialise every weight, then every bias
        activation: Activation member or its name ("tanh", "relu", "sigmoid")

    Raises:
        ConfigurationError: non-positive sizes or unsupported activation
    """

    def __init__(self, num_inputs: int, num_outputs: int,
                 random: RandomDistribution, activation=Activation.TANH):
        if num_inputs < 1 or num_outputs < 1:
            raise ConfigurationError(
                f"Layer sizes must be positive, got {num_inputs}x{num_outputs}"
            )
        self.activation, self._activation_func = resolve_activation(activation)
        self.num_inputs = num_inputs
        self.num_outputs = num_outputs

        self.weights: List[Value] = [Value(random.get()) for _ in range(num_inputs * num_outputs)]
        self.biases: List[Value] = [Value(random.get()) for _ in range(num_outputs)]
        # Same Value objects as weights/biases, so updates through either are shared
        self._parameters: List[Value] = self.weights + self.biases

        logger.debug("created layer %dx%d (%s)", num_inputs, num_outputs, self.activation.value)

    def __call__(self, inputs: Sequence) -> List[Value]:
        """Forward pass; ``inputs`` holds exactly ``num_inputs`` Values or numbers."""
        if len(inputs) != self.num_inputs:
            raise ShapeMismatchError(
                f"Layer expects {self.num_inputs} inputs, got {len(inputs)}"
            )
        outputs = []
        for neuron_idx in range(self.num_outputs):
            offset = neuron_idx * self.num_inputs
            dot_product = self.biases[neuron_idx]
            for weight, x in zip(self.weights[offset:offset + self.num_inputs], inputs):
                dot_product = dot_product + weight * x
            outputs.append(self._activation_func(dot_product))
        return outputs

    def parameters(self) -> List[Value]:
        """All weights followed by all biases (aliases, never copies)."""
        return self._parameters

    def __str__(self):
        lines = [f"Layer ({self.num_inputs} inputs, {self.num_outputs} neuron(s), {self.activation.value}):"]
        for neuron_idx in range(self.num_outputs):
            offset = neuron_idx * self.num_inputs
            weights = " ".join(f"{float(w.data):.6f}" for w in self.weights[offset:offset + self.num_inputs])
            lines.append(f"    weights: {weights}, bias: {float(self.biases[neuron_idx].data):.6f}")
        return "\n".join(lines)

    def __repr__(self):
        return f"Layer({self.num_inputs}, {self.num_outputs}, activation={self.activation.value!r})"
