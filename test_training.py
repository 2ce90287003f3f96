"""
End-to-end XOR training with both networks, and the command-line driver.
"""

import math

import pytest

from picograd.nn import RandomUniformDistribution
from picograd.train import (XOR_ROWS, HandWiredNetwork, LayerNetwork,
                            train_hand_wired, train_layer_network)
from picograd.cli import main, parse_args


def assert_non_increasing(losses):
    for before, after in zip(losses, losses[1:]):
        assert after <= before + 1e-12


def test_layer_network_loss_decreases():
    losses = train_layer_network(epochs=10, lr=0.1, seed=42)
    assert len(losses) == 10
    assert all(math.isfinite(loss) for loss in losses)
    assert_non_increasing(losses)
    assert losses[-1] < losses[0]


def test_layer_network_loss_decreases_with_small_rate():
    losses = train_layer_network(epochs=6, lr=0.01, seed=42, distribution="normal")
    assert_non_increasing(losses)


def test_hand_wired_network_loss_decreases():
    losses = train_hand_wired(epochs=10, lr=0.1, seed=42)
    assert len(losses) == 10
    assert_non_increasing(losses)
    assert losses[-1] < losses[0]


def test_training_is_reproducible():
    assert train_layer_network(epochs=3, seed=5) == train_layer_network(epochs=3, seed=5)


def test_layer_network_shape():
    net = LayerNetwork(RandomUniformDistribution(1))
    assert len(net.parameters()) == (2 * 2 + 2) + (2 * 1 + 1)
    out = net(1.0, 0.0)
    assert 0.0 < out.data < 1.0


def test_hand_wired_network_step():
    net = HandWiredNetwork(RandomUniformDistribution(3))
    assert len(net.parameters()) == 6
    for x1, x2, y in XOR_ROWS:
        loss = net.forward(x1, x2, y)
        assert loss.data > 0.0

    loss = net.forward(1.0, 1.0, 0.0)
    loss.backward()
    assert any(w.grad != 0.0 for w in net.parameters())
    net.learn(0.1)
    net.zero_grad()
    assert all(w.grad == 0.0 for w in net.parameters())


def test_cli_defaults():
    args = parse_args([])
    assert args.epochs == 10
    assert args.lr == pytest.approx(0.1)
    assert args.network == "layer"


@pytest.mark.parametrize("network", ["layer", "hand"])
def test_cli_main(network, capsys):
    assert main(["--epochs", "3", "--network", network]) == 0
    out = capsys.readouterr().out
    assert out.count("mean loss") == 3
