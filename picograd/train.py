"""
XOR training drivers.

Two 2-2-1 networks learn the XOR table with binary cross-entropy and full-batch
gradient descent (gradients of the four rows accumulate, then one step per
epoch):

- LayerNetwork: two Layer objects (tanh hidden layer, sigmoid output)
- HandWiredNetwork: the same topology written out weight by weight, without
  biases, as a worked example of using Value directly
"""

import logging
from typing import List

from .config import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, DEFAULT_SEED, LOG_EPSILON
from .core.value import Value
from .core.engine import zero_grad
from .nn.layer import Activation, Layer
from .nn.losses import binary_cross_entropy
from .nn.optim import SGD
from .nn.random import RandomDistribution, RandomUniformDistribution, make_distribution

logger = logging.getLogger("picograd.train")

# (x1, x2, y)
XOR_ROWS = (
    (0.0, 0.0, 0.0),
    (1.0, 0.0, 1.0),
    (0.0, 1.0, 1.0),
    (1.0, 1.0, 0.0),
)


class LayerNetwork:
    """Layer(2, 2, hidden_activation) followed by Layer(2, 1, sigmoid)."""

    def __init__(self, random: RandomDistribution, hidden_activation=Activation.TANH):
        self.hidden = Layer(2, 2, random, hidden_activation)
        self.output = Layer(2, 1, random, Activation.SIGMOID)

    def __call__(self, x1, x2) -> Value:
        return self.output(self.hidden([x1, x2]))[0]

    def parameters(self) -> List[Value]:
        return self.hidden.parameters() + self.output.parameters()


class HandWiredNetwork:
    """
    2-2-1 network without biases, each weight an explicit attribute:

        o1 = tanh(w11_1 * x1 + w12_1 * x2)
        o2 = tanh(w21_1 * x1 + w22_1 * x2)
        o3 = sigmoid(w11_2 * o1 + w12_2 * o2)
    """

    WEIGHT_NAMES = ("w11_1", "w12_1", "w21_1", "w22_1", "w11_2", "w12_2")

    def __init__(self, random: RandomDistribution):
        for name in self.WEIGHT_NAMES:
            setattr(self, name, Value(random.get(), label=name))

    def parameters(self) -> List[Value]:
        return [getattr(self, name) for name in self.WEIGHT_NAMES]

    def forward(self, x1, x2, y) -> Value:
        """Loss for one row: mean of the two log-likelihood terms, epsilon inside the logs."""
        o1 = (self.w11_1 * x1 + self.w12_1 * x2).tanh()
        o2 = (self.w21_1 * x1 + self.w22_1 * x2).tanh()
        o3 = (self.w11_2 * o1 + self.w12_2 * o2).sigmoid()

        log_likelihood = (y * (o3 + LOG_EPSILON).log() + (-y + 1) * (-o3 + LOG_EPSILON + 1).log()) / 2.0
        return -log_likelihood

    def learn(self, alpha: float) -> None:
        for w in self.parameters():
            w.data = w.data - w.grad * alpha

    def zero_grad(self) -> None:
        zero_grad(self.parameters())


def train_layer_network(epochs: int = DEFAULT_EPOCHS, lr: float = DEFAULT_LEARNING_RATE,
                        seed: int = DEFAULT_SEED, distribution: str = "uniform",
                        hidden_activation=Activation.TANH) -> List[float]:
    """
    Train a LayerNetwork on XOR_ROWS.

    Returns:
        mean binary cross-entropy of every epoch, measured before that
        epoch's update
    """
    net = LayerNetwork(make_distribution(distribution, seed), hidden_activation)
    optimizer = SGD(net.parameters(), lr)

    losses = []
    for epoch in range(epochs):
        loss_sum = 0.0
        for x1, x2, y in XOR_ROWS:
            loss = binary_cross_entropy(net(x1, x2), y)
            loss.backward()
            loss_sum += float(loss.data)
        mean_loss = loss_sum / len(XOR_ROWS)
        losses.append(mean_loss)
        logger.info("epoch %d: mean loss %.6f", epoch, mean_loss)

        optimizer.step()
        optimizer.zero_grad()
    return losses


def train_hand_wired(epochs: int = DEFAULT_EPOCHS, lr: float = DEFAULT_LEARNING_RATE,
                     seed: int = DEFAULT_SEED) -> List[float]:
    """Same loop as train_layer_network, for HandWiredNetwork (uniform init)."""
    net = HandWiredNetwork(RandomUniformDistribution(seed))

    losses = []
    for epoch in range(epochs):
        loss_sum = 0.0
        for x1, x2, y in XOR_ROWS:
            loss = net.forward(x1, x2, y)
            loss.backward()
            loss_sum += float(loss.data)
        mean_loss = loss_sum / len(XOR_ROWS)
        losses.append(mean_loss)
        logger.info("epoch %d: mean loss %.6f", epoch, mean_loss)

        net.learn(lr)
        net.zero_grad()
    return losses
