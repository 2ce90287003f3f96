# picograd/__init__.py
# Scalar reverse-mode automatic differentiation with a tiny neural-network layer

from .core.value import Value
from .core.node import Node
from .core.engine import backward, topological_order, zero_grad, zero_graph_grad
from .errors import PicogradError, ConfigurationError, ShapeMismatchError

# Operator functions and the nn package
from . import ops
from . import nn
from .ops import tanh, relu, sigmoid, exp, log
from .nn import (Activation, Layer, RandomUniformDistribution, RandomNormalDistribution,
                 softmax, cross_entropy, cross_entropy_with_logits, binary_cross_entropy, SGD)

__version__ = "0.1.0"

__all__ = [
    # Core
    'Value',
    'Node',
    'backward',
    'topological_order',
    'zero_grad',
    'zero_graph_grad',
    # Errors
    'PicogradError',
    'ConfigurationError',
    'ShapeMismatchError',
    # Elementary functions
    'ops',
    'tanh',
    'relu',
    'sigmoid',
    'exp',
    'log',
    # Neural network
    'nn',
    'Activation',
    'Layer',
    'RandomUniformDistribution',
    'RandomNormalDistribution',
    'softmax',
    'cross_entropy',
    'cross_entropy_with_logits',
    'binary_cross_entropy',
    'SGD',
]
