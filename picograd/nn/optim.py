from ..core.engine import zero_grad
from ..errors import ConfigurationError


class Optimizer:
    """Holds a parameter collection; subclasses implement ``step``."""

    def __init__(self, params):
        self.params = list(params)
        if not self.params:
            raise ConfigurationError("Optimizer got an empty parameter list.")

    def step(self):
        raise NotImplementedError

    def zero_grad(self):
        zero_grad(self.params)


class SGD(Optimizer):
    """Plain gradient descent: data <- data - lr * grad."""

    def __init__(self, params, lr):
        if not lr > 0:
            raise ConfigurationError(f"Learning rate must be positive, got {lr}")
        super().__init__(params)
        self.lr = lr

    def step(self):
        lr = self.lr
        for p in self.params:
            p.data = p.data - p.grad * lr
