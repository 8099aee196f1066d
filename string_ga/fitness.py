"""
Fitness function for string genetic search.

Scores a candidate genome by its edit distance to the goal string.
"""

from typing import Sequence


def edit_distance(a: Sequence, b: Sequence) -> int:
    """
    Compute the edit distance between two sequences.

    The result is the minimum number of single-symbol insertions, deletions,
    or substitutions needed to transform ``a`` into ``b``. Cell [i][j] of the
    table holds the distance between the first i symbols of ``a`` and the
    first j symbols of ``b``.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        Non-negative edit distance

    Example:
        edit_distance("kitten", "sitting") -> 3
    """
    n = len(a)
    m = len(b)

    if n == 0:
        return m
    if m == 0:
        return n

    d = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        d[i][0] = i
    for j in range(m + 1):
        d[0][j] = j

    for i in range(1, n + 1):
        prev_row = d[i - 1]
        row = d[i]
        symbol = a[i - 1]
        for j in range(1, m + 1):
            cost = 0 if symbol == b[j - 1] else 1
            row[j] = min(
                prev_row[j] + 1,
                row[j - 1] + 1,
                prev_row[j - 1] + cost,
            )

    return d[n][m]


def score_genome(goal: str, genome: str) -> int:
    """Fitness of a genome against the goal (0 is an exact match)."""
    return edit_distance(goal, genome)
