"""
Preset tables for string genetic search.

Mutation rate, population size, and generation cap are only ever chosen
from these enumerated presets. Indices outside the tables resolve to the
named fallbacks below and leave a note on the run configuration.
"""

from typing import Dict, List, Optional, Tuple

from .data_models import RunConfig


# Mutation-rate denominators by index (smaller means more mutation)
MUTATION_RATE_PRESETS = (20, 10, 5, 2)

# Genomes evaluated per generation by index
POPULATION_SIZE_PRESETS = (10, 100, 1000, 10000)

# Generation cap is (index + 1) * GENERATION_CAP_STEP
GENERATION_CAP_STEP = 100
GENERATION_CAP_PRESET_COUNT = 4

FALLBACK_MUTATION_DENOMINATOR = 100
FALLBACK_POPULATION_SIZE = 10
FALLBACK_GENERATION_CAP = 100

DEFAULT_PRESET_INDEX = 2


def _in_range(index: int, count: int) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < count


def resolve_mutation_rate(index: int) -> Tuple[int, Optional[str]]:
    """
    Resolve a mutation preset index to its denominator.

    Args:
        index: Preset index (0..3)

    Returns:
        Tuple of (denominator, fallback_note) where fallback_note is None
        when the index was valid
    """
    if _in_range(index, len(MUTATION_RATE_PRESETS)):
        return MUTATION_RATE_PRESETS[index], None

    return FALLBACK_MUTATION_DENOMINATOR, (
        f"Mutation preset {index!r} out of range, "
        f"using fallback denominator {FALLBACK_MUTATION_DENOMINATOR}"
    )


def resolve_population_size(index: int) -> Tuple[int, Optional[str]]:
    """
    Resolve a population preset index to its size.

    Args:
        index: Preset index (0..3)

    Returns:
        Tuple of (population_size, fallback_note)
    """
    if _in_range(index, len(POPULATION_SIZE_PRESETS)):
        return POPULATION_SIZE_PRESETS[index], None

    return FALLBACK_POPULATION_SIZE, (
        f"Population preset {index!r} out of range, "
        f"using fallback population {FALLBACK_POPULATION_SIZE}"
    )


def resolve_generation_cap(index: int) -> Tuple[int, Optional[str]]:
    """
    Resolve a generation-cap preset index to its cap.

    Args:
        index: Preset index (0..3)

    Returns:
        Tuple of (generation_cap, fallback_note)
    """
    if _in_range(index, GENERATION_CAP_PRESET_COUNT):
        return (index + 1) * GENERATION_CAP_STEP, None

    return FALLBACK_GENERATION_CAP, (
        f"Generation cap preset {index!r} out of range, "
        f"using fallback cap {FALLBACK_GENERATION_CAP}"
    )


def build_run_config(
    goal: str,
    mutation_preset: int = DEFAULT_PRESET_INDEX,
    population_preset: int = DEFAULT_PRESET_INDEX,
    generation_cap_preset: int = DEFAULT_PRESET_INDEX,
    random_seed: Optional[int] = None
) -> RunConfig:
    """
    Build a run configuration from preset indices.

    Args:
        goal: Target string (lowercase letters and spaces)
        mutation_preset: Mutation-rate preset index
        population_preset: Population-size preset index
        generation_cap_preset: Generation-cap preset index
        random_seed: Optional seed for reproducible runs

    Returns:
        RunConfig with resolved values and any fallback notes
    """
    mutation_rate_denominator, mutation_note = resolve_mutation_rate(mutation_preset)
    population_size, population_note = resolve_population_size(population_preset)
    generation_cap, cap_note = resolve_generation_cap(generation_cap_preset)

    notes = [note for note in (mutation_note, population_note, cap_note) if note]

    return RunConfig(
        goal=goal,
        mutation_rate_denominator=mutation_rate_denominator,
        population_size=population_size,
        generation_cap=generation_cap,
        mutation_preset=mutation_preset,
        population_preset=population_preset,
        generation_cap_preset=generation_cap_preset,
        random_seed=random_seed,
        notes=notes,
    )


def describe_presets() -> Dict[str, List[str]]:
    """
    Get display rows for every preset table.

    Returns:
        Dictionary mapping setting name to one line per preset index
    """
    return {
        "mutation": [
            f"{i}: denominator {d} (~{100.0 / (d - 1):.1f}% per position)"
            for i, d in enumerate(MUTATION_RATE_PRESETS)
        ],
        "population": [
            f"{i}: {size} individuals per generation"
            for i, size in enumerate(POPULATION_SIZE_PRESETS)
        ],
        "generation_cap": [
            f"{i}: {(i + 1) * GENERATION_CAP_STEP} generations"
            for i in range(GENERATION_CAP_PRESET_COUNT)
        ],
    }
