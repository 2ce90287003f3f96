# picograd/errors.py
"""
Error taxonomy.

Numeric domain problems (log of a non-positive number, division by zero) are
not errors here: they propagate as inf/nan float64 values.
"""


class PicogradError(Exception):
    """Base class for all errors raised by picograd."""


class ConfigurationError(PicogradError, ValueError):
    """Invalid construction argument (activation, distribution kind, sizes, lr)."""


class ShapeMismatchError(PicogradError, ValueError):
    """Two collections that must have the same length do not, or one is empty."""
