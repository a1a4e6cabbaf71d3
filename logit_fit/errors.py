"""
Error types raised at the entry points of the fitting pipeline.
"""


class DimensionMismatchError(ValueError):
    """X, y and theta shapes do not conform."""


class EmptyInputError(ValueError):
    """No usable rows remain after missing-value removal."""
