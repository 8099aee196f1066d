"""
Random-chance statistics for string genetic search.

Compares the number of individuals an evolution run evaluated with the
odds of producing the goal by pure random guessing. Overflow is detected
up front with a logarithmic bound instead of being caught after the fact.
"""

from decimal import Decimal
from typing import Optional
import math
import sys

from .data_models import ALPHABET


PERCENT_PRECISION = 15

ODDS_TOO_LARGE_DESCRIPTION = "1 in (too large to calculate. That's large!)"
ADVANTAGE_FALLBACK_PERCENT = "0.000000000000001%"

_LOG_FLOAT_MAX = math.log(sys.float_info.max)


def odds_overflow(goal_length: int, alphabet_size: int = len(ALPHABET)) -> bool:
    """
    Check whether alphabet_size ** goal_length exceeds the float range.

    Args:
        goal_length: Number of symbols in the goal
        alphabet_size: Number of possible symbols per position

    Returns:
        True if the odds cannot be represented as a finite float
    """
    if goal_length == 0:
        return False
    return goal_length * math.log(alphabet_size) > _LOG_FLOAT_MAX


def random_odds(goal_length: int, alphabet_size: int = len(ALPHABET)) -> Optional[int]:
    """
    Number of equally likely genomes of the goal's length.

    Returns:
        alphabet_size ** goal_length, or None when it overflows the float range
    """
    if odds_overflow(goal_length, alphabet_size):
        return None
    return alphabet_size ** goal_length


def relative_advantage(tries_used: int, goal_length: int) -> Optional[float]:
    """
    Percent chance that random guessing finds the goal in ``tries_used`` tries.

    Computed as tries_used / odds * 100 and rounded to PERCENT_PRECISION
    decimal places. The value is capped at 100, since more tries than
    possible genomes cannot exceed certainty.

    Args:
        tries_used: Individuals evaluated by the run
        goal_length: Number of symbols in the goal

    Returns:
        Percentage in [0, 100], or None when the odds overflow
    """
    odds = random_odds(goal_length)
    if odds is None:
        return None

    percent = round(tries_used / odds * 100, PERCENT_PRECISION)
    return min(percent, 100.0)


def format_percent(value: Optional[float]) -> str:
    """
    Format a percentage in plain (non-scientific) notation.

    Args:
        value: Percentage, or None for the overflow fallback

    Returns:
        String such as "37.037037037037%"
    """
    if value is None or not math.isfinite(value):
        return ADVANTAGE_FALLBACK_PERCENT

    text = format(Decimal(repr(value)).normalize(), "f")
    return f"{text}%"


def describe_odds(goal_length: int) -> str:
    """Human-readable odds, e.g. "1 in 19683"."""
    odds = random_odds(goal_length)
    if odds is None:
        return ODDS_TOO_LARGE_DESCRIPTION
    return f"1 in {odds}"


def odds_label(goal_length: int) -> str:
    """Heading for the odds line, e.g. "Chances if random (27^3):"."""
    return f"Chances if random ({len(ALPHABET)}^{goal_length}):"
