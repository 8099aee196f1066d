"""
Mutation operators for string genetic search.

Implements individual generation: a fully random genome for the first
generation, and per-position mutation of a mated seed afterwards.
"""

from typing import Optional
import numpy as np

from .data_models import ALPHABET


def mutation_probability(mutation_rate_denominator: int) -> float:
    """
    Per-position mutation probability for a mutation-rate denominator.

    A denominator of d corresponds to drawing an integer uniformly from
    [1, d) and mutating when the draw is 1, i.e. probability 1 / (d - 1).

    Args:
        mutation_rate_denominator: Denominator from the mutation preset (>= 2)

    Returns:
        Probability in (0, 1]

    Raises:
        ValueError: If the denominator is below 2
    """
    if mutation_rate_denominator < 2:
        raise ValueError(
            f"mutation_rate_denominator must be >= 2, got: {mutation_rate_denominator}"
        )
    return 1.0 / (mutation_rate_denominator - 1)


def random_genome(length: int, rng: np.random.Generator) -> str:
    """
    Generate a genome with every symbol drawn uniformly from the alphabet.

    Args:
        length: Number of symbols
        rng: Random number generator

    Returns:
        Random genome
    """
    if length == 0:
        return ""

    indices = rng.integers(0, len(ALPHABET), size=length)
    return "".join(ALPHABET[i] for i in indices)


def mutate_genome(
    base_genome: str,
    mutation_rate_denominator: int,
    rng: np.random.Generator
) -> str:
    """
    Derive a new genome from a base genome by per-position mutation.

    Each position independently mutates with probability
    1 / (mutation_rate_denominator - 1). A mutated position receives a
    uniformly random alphabet symbol; all other positions are copied.

    The replacement is drawn from the whole alphabet, so it can repeat the
    symbol it replaces. Even with a denominator of 2 (every position
    mutated) the child can equal the base genome, with probability
    (1/27) ** len(base_genome).

    Args:
        base_genome: Seed genome (result of mating)
        mutation_rate_denominator: Denominator from the mutation preset (>= 2)
        rng: Random number generator

    Returns:
        Mutated genome of the same length
    """
    probability = mutation_probability(mutation_rate_denominator)

    if not base_genome:
        return ""

    chars = list(base_genome)
    for i in range(len(chars)):
        if rng.random() < probability:
            chars[i] = ALPHABET[rng.integers(0, len(ALPHABET))]

    return "".join(chars)


def generate_individual(
    length: int,
    base_genome: Optional[str],
    mutation_rate_denominator: int,
    rng: np.random.Generator
) -> str:
    """
    Produce one candidate genome for the current generation.

    Args:
        length: Genome length (the goal's length)
        base_genome: Mated seed from the previous generation, or None for generation 0
        mutation_rate_denominator: Denominator from the mutation preset (>= 2)
        rng: Random number generator

    Returns:
        New genome of exactly ``length`` symbols

    Raises:
        ValueError: If the base genome length differs from ``length`` or the
            denominator is below 2
    """
    if base_genome is None:
        return random_genome(length, rng)

    if len(base_genome) != length:
        raise ValueError(
            f"Base genome has length {len(base_genome)}, expected {length}"
        )

    return mutate_genome(base_genome, mutation_rate_denominator, rng)
