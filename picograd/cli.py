"""
Train a 2-2-1 network on XOR and print the mean loss of every epoch.

    picograd-xor --epochs 20 --lr 0.1 --network layer
"""

import argparse
import logging

from .config import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, DEFAULT_SEED, configure_logging
from .nn.layer import Activation
from .train import train_hand_wired, train_layer_network


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Train a tiny scalar-autograd network on XOR',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--epochs', type=int, default=DEFAULT_EPOCHS,
                        help='Number of full passes over the four XOR rows')
    parser.add_argument('--lr', type=float, default=DEFAULT_LEARNING_RATE,
                        help='Gradient-descent learning rate')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help='Seed of the weight-initialisation distribution')
    parser.add_argument('--distribution', choices=['uniform', 'normal'], default='uniform',
                        help='Weight-initialisation distribution (layer network only)')
    parser.add_argument('--hidden-activation', choices=[a.value for a in Activation],
                        default=Activation.TANH.value,
                        help='Activation of the hidden layer (layer network only)')
    parser.add_argument('--network', choices=['layer', 'hand'], default='layer',
                        help='Layer-based network or the hand-wired one')
    parser.add_argument('--verbose', action='store_true',
                        help='Log debug output')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.network == 'layer':
        print(f"Training Layer network ({args.hidden_activation} hidden, sigmoid output)")
        losses = train_layer_network(args.epochs, args.lr, args.seed, args.distribution,
                                     args.hidden_activation)
    else:
        print("Training hand-wired network (tanh hidden, sigmoid output, no biases)")
        losses = train_hand_wired(args.epochs, args.lr, args.seed)

    for epoch, loss in enumerate(losses):
        print(f"  epoch {epoch:4d}: mean loss {loss:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
