"""
Crossover operator for string genetic search.

Implements single-point positional splicing of two parent genomes.
"""

import math


def split_point(length: int) -> int:
    """Splice position for genomes of the given length: ceil(length / 2)."""
    return math.ceil(length / 2)


def mate(parent_a: str, parent_b: str) -> str:
    """
    Combine two parents into one offspring genome.

    The child takes the first ceil(L / 2) symbols of ``parent_a`` and the
    remaining symbols of ``parent_b``.

    Args:
        parent_a: First parent (contributes the leading half)
        parent_b: Second parent (contributes the trailing half)

    Returns:
        Child genome of length L

    Raises:
        ValueError: If the parents differ in length

    Example:
        mate("hello", "world") -> "helld"
    """
    if len(parent_a) != len(parent_b):
        raise ValueError(
            f"Parents must have equal length, got {len(parent_a)} and {len(parent_b)}"
        )

    split = split_point(len(parent_a))
    return parent_a[:split] + parent_b[split:]
