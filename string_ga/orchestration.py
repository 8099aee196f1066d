"""
Orchestration module for string genetic search.

Implements the generation loop (generate, score, shortlist, mate) and the
run workflow that reports results to the console.
"""

from typing import Dict, List, Optional
import time
import numpy as np

from .data_models import RunConfig, RunResult, TopTwo, GenerationRecord
from .fitness import score_genome
from .mutation import generate_individual
from .crossover import mate
from .presets import build_run_config, DEFAULT_PRESET_INDEX
from .odds import relative_advantage, format_percent, describe_odds, odds_label, random_odds


def evaluate_generation(
    run_config: RunConfig,
    seed_genome: Optional[str],
    rng: np.random.Generator,
    top_two: TopTwo
) -> TopTwo:
    """
    Generate and score one full population, shortlisting the best two.

    Individuals are generated one at a time and only the running top two
    are kept; the population itself is never stored.

    Args:
        run_config: Run configuration
        seed_genome: Mated seed from the previous generation (None for generation 0)
        rng: Random number generator
        top_two: Empty shortlist to fill

    Returns:
        The filled shortlist
    """
    for _ in range(run_config.population_size):
        genome = generate_individual(
            run_config.goal_length,
            seed_genome,
            run_config.mutation_rate_denominator,
            rng
        )
        top_two.offer(genome, score_genome(run_config.goal, genome))

    return top_two


def evolve(
    run_config: RunConfig,
    rng: Optional[np.random.Generator] = None,
    record_history: bool = False,
    verbose: bool = False,
    report_every: int = 10
) -> RunResult:
    """
    Evolve a population toward the goal string.

    Args:
        run_config: Run configuration
        rng: Random number generator (created from run_config.random_seed if None)
        record_history: If True, attach one GenerationRecord per generation
        verbose: If True, print progress lines while running
        report_every: Print progress every N generations when verbose

    Returns:
        RunResult with the final genome and random-chance statistics

    Algorithm:
        1. Generation 0 is fully random (no seed)
        2. For each generation, evaluate population_size individuals derived
           from the seed and keep the best two by edit distance
        3. If the best score is 0, stop: the goal was found
        4. Otherwise mate the best two into the next seed and continue,
           evaluating at most generation_cap generations
        5. Compute random-chance odds for the number of individuals evaluated
    """
    if rng is None:
        rng = np.random.default_rng(run_config.random_seed)

    top_two = TopTwo()
    history: List[GenerationRecord] = []
    seed_genome = None
    generation = 0

    while True:
        top_two.reset()
        evaluate_generation(run_config, seed_genome, rng, top_two)

        found = top_two.is_match()
        last_generation = found or generation + 1 >= run_config.generation_cap

        next_seed = None
        if not last_generation:
            parent_a, parent_b = top_two.parents()
            next_seed = mate(parent_a, parent_b)

        if record_history:
            history.append(
                GenerationRecord(
                    generation=generation,
                    best_genome=top_two.best_genome,
                    best_score=top_two.best_score,
                    second_score=top_two.second_score,
                    next_seed=next_seed
                )
            )

        if verbose and (generation % report_every == 0 or last_generation):
            print(f"  Generation {generation:03d}: best {top_two.best_genome!r} "
                  f"(score {top_two.best_score})")

        if last_generation:
            break

        seed_genome = next_seed
        generation += 1

    generations_used = generation + 1
    tries_used = run_config.population_size * generations_used
    advantage = relative_advantage(tries_used, run_config.goal_length)

    return RunResult(
        final_genome=top_two.best_genome,
        best_score=top_two.best_score,
        found=found,
        generations_used=generations_used,
        tries_used=tries_used,
        random_odds=random_odds(run_config.goal_length),
        random_odds_label=odds_label(run_config.goal_length),
        random_odds_description=describe_odds(run_config.goal_length),
        relative_advantage=advantage,
        relative_advantage_percent=format_percent(advantage),
        history=history,
        random_seed=run_config.random_seed
    )


def print_run_config(run_config: RunConfig) -> None:
    """Print the resolved parameters of a run."""
    print(f"Goal: {run_config.goal!r} ({run_config.goal_length} symbols)")
    print(f"Mutation rate denominator: {run_config.mutation_rate_denominator} "
          f"(preset {run_config.mutation_preset})")
    print(f"Population size: {run_config.population_size} "
          f"(preset {run_config.population_preset})")
    print(f"Generation cap: {run_config.generation_cap} "
          f"(preset {run_config.generation_cap_preset})")
    print(f"Random seed: {run_config.random_seed}")

    for note in run_config.notes:
        print(f"  Warning: {note}")


def print_run_result(result: RunResult, show_history: bool = False) -> None:
    """Print the summary report for a finished run."""
    if show_history and result.history:
        print()
        print("=" * 70)
        print("GENERATION HISTORY")
        print("=" * 70)
        for record in result.history:
            row = record.to_dict()
            print(f"  {row['generation']:>4}  score {row['best_score']:>3}  "
                  f"second {row['second_score']!s:>3}  best {row['best_genome']!r}")

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    for line in result.summary_lines():
        print(line)


def run_evolution_mode(run_config: Dict) -> RunResult:
    """
    Run one evolution from a run configuration dict and print the report.

    Args:
        run_config: Run configuration dict from YAML

    Returns:
        RunResult of the run
    """
    print("=" * 70)
    print("STRING GENETIC SEARCH")
    print("=" * 70)

    presets = run_config.get('presets') or {}
    report = run_config.get('report') or {}
    show_history = bool(report.get('history', False))

    # Setup RNG seed
    seed = run_config.get('random_seed')
    if seed is None:
        seed = int(np.random.randint(0, 2**31))

    config = build_run_config(
        goal=run_config['goal'],
        mutation_preset=presets.get('mutation', DEFAULT_PRESET_INDEX),
        population_preset=presets.get('population', DEFAULT_PRESET_INDEX),
        generation_cap_preset=presets.get('generation_cap', DEFAULT_PRESET_INDEX),
        random_seed=seed
    )
    print_run_config(config)

    print("\nEvolving...")
    start_time = time.time()
    result = evolve(config, record_history=show_history, verbose=True)
    elapsed_time = time.time() - start_time
    print(f"Evolution completed in {elapsed_time:.3f} seconds")

    print_run_result(result, show_history=show_history)
    return result
