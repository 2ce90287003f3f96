"""
Neural-network building blocks on top of the scalar autograd engine:
- RandomUniformDistribution / RandomNormalDistribution: seeded weight init
- Layer, Activation: fully connected layer with tanh / relu / sigmoid
- softmax and the cross-entropy losses
- SGD: gradient-descent step over a parameter collection
"""

from .random import (RandomDistribution, RandomUniformDistribution,
                     RandomNormalDistribution, make_distribution)
from .layer import Activation, Layer
from .losses import softmax, cross_entropy, cross_entropy_with_logits, binary_cross_entropy
from .optim import Optimizer, SGD

__all__ = ['RandomDistribution', 'RandomUniformDistribution', 'RandomNormalDistribution',
           'make_distribution',
           'Activation', 'Layer',
           'softmax', 'cross_entropy', 'cross_entropy_with_logits', 'binary_cross_entropy',
           'Optimizer', 'SGD']
