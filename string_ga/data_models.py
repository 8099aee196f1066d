"""
Data models for string genetic search.

Core data structures representing the run configuration, the per-generation
top-two shortlist, generation history records, and the final run result.
"""

from dataclasses import dataclass, field
from typing import Optional, Any


# Possible gene expressions: 26 lowercase letters and a space
ALPHABET = "abcdefghijklmnopqrstuvwxyz "


@dataclass
class RunConfig:
    """
    Parameters for one evolution run, fixed for the duration of the run.

    Attributes:
        goal: Target string the population evolves toward
        mutation_rate_denominator: Denominator for the per-position mutation draw
        population_size: Genomes evaluated per generation
        generation_cap: Maximum number of generations evaluated
        mutation_preset: Preset index that produced mutation_rate_denominator
        population_preset: Preset index that produced population_size
        generation_cap_preset: Preset index that produced generation_cap
        random_seed: Seed for the run's random generator (None for fresh entropy)
        notes: Messages about fallbacks applied while resolving presets
    """
    goal: str
    mutation_rate_denominator: int
    population_size: int
    generation_cap: int
    mutation_preset: Optional[int] = None
    population_preset: Optional[int] = None
    generation_cap_preset: Optional[int] = None
    random_seed: Optional[int] = None
    notes: list[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate goal symbols and numeric parameters."""
        invalid = sorted(set(self.goal) - set(ALPHABET))
        if invalid:
            raise ValueError(
                f"Goal contains symbols outside the alphabet: {invalid!r}"
            )

        if self.mutation_rate_denominator < 2:
            raise ValueError(
                f"mutation_rate_denominator must be >= 2, got: {self.mutation_rate_denominator}"
            )

        if self.population_size < 1:
            raise ValueError(f"population_size must be >= 1, got: {self.population_size}")

        if self.generation_cap < 1:
            raise ValueError(f"generation_cap must be >= 1, got: {self.generation_cap}")

    @property
    def goal_length(self) -> int:
        """Length every genome in this run must have."""
        return len(self.goal)


@dataclass
class TopTwo:
    """
    Running best-two shortlist for a single generation.

    Slots start empty (None) rather than holding a sentinel score. Lower
    scores are better; a candidate only displaces a slot with a strictly
    worse score, so on ties the first-seen candidate is kept.

    Attributes:
        best_genome: Lowest-scoring genome seen so far
        best_score: Score of best_genome
        second_genome: Genome held in the second slot
        second_score: Score of second_genome
    """
    best_genome: Optional[str] = None
    best_score: Optional[int] = None
    second_genome: Optional[str] = None
    second_score: Optional[int] = None

    def offer(self, genome: str, score: int) -> bool:
        """
        Offer a scored candidate to the shortlist.

        A score strictly below slot 0 replaces slot 0; otherwise a score
        strictly below slot 1 replaces slot 1. The previous slot-0 entry is
        not shifted down.

        Args:
            genome: Candidate genome
            score: Candidate's fitness score

        Returns:
            True if the candidate was placed in either slot
        """
        if self.best_score is None or score < self.best_score:
            self.best_genome = genome
            self.best_score = score
            return True

        if self.second_score is None or score < self.second_score:
            self.second_genome = genome
            self.second_score = score
            return True

        return False

    def parents(self) -> tuple[str, str]:
        """
        Get the two genomes to mate.

        When the second slot was never filled, the best genome is used
        for both parents.

        Returns:
            Tuple of (parent_a, parent_b)

        Raises:
            ValueError: If no candidate has been offered yet
        """
        if self.best_genome is None:
            raise ValueError("No candidates have been offered this generation")

        if self.second_genome is None:
            return self.best_genome, self.best_genome

        return self.best_genome, self.second_genome

    def reset(self) -> None:
        """Empty both slots for the next generation."""
        self.best_genome = None
        self.best_score = None
        self.second_genome = None
        self.second_score = None

    def is_match(self) -> bool:
        """Whether the best slot holds an exact match (score 0)."""
        return self.best_score == 0


@dataclass
class GenerationRecord:
    """
    Snapshot of one completed generation.

    Attributes:
        generation: Zero-based generation index
        best_genome: Best genome of the generation
        best_score: Its score
        second_score: Score held in the second slot (None if never filled)
        next_seed: Mated seed carried to the next generation (None on the final one)
    """
    generation: int
    best_genome: str
    best_score: int
    second_score: Optional[int]
    next_seed: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert record to a flat dictionary for reporting.

        Returns:
            Dictionary with string-serializable values
        """
        return {
            "generation": self.generation,
            "best_genome": self.best_genome,
            "best_score": self.best_score,
            "second_score": "" if self.second_score is None else self.second_score,
            "next_seed": self.next_seed or "",
        }


@dataclass
class RunResult:
    """
    Outcome of an evolution run.

    Attributes:
        final_genome: Matching genome, or best effort of the last generation
        best_score: Score of final_genome
        found: Whether final_genome matches the goal
        generations_used: Generations evaluated
        tries_used: Genomes evaluated (population_size * generations_used)
        random_odds: 27 ** len(goal), None when not representable as a float
        random_odds_label: Heading describing the odds calculation
        random_odds_description: "1 in <odds>" or the too-large fallback
        relative_advantage: Percent chance random guessing finds the goal in tries_used
        relative_advantage_percent: relative_advantage formatted with a trailing "%"
        history: Per-generation records (only when requested)
        random_seed: Seed recorded on the run configuration
    """
    final_genome: str
    best_score: int
    found: bool
    generations_used: int
    tries_used: int
    random_odds: Optional[int]
    random_odds_label: str
    random_odds_description: str
    relative_advantage: Optional[float]
    relative_advantage_percent: str
    history: list[GenerationRecord] = field(default_factory=list)
    random_seed: Optional[int] = None

    def summary_lines(self) -> list[str]:
        """
        Get the human-readable result lines shown after a run.

        Returns:
            List of formatted lines
        """
        return [
            f"Result: {self.final_genome!r}",
            f"Exact match: {'yes' if self.found else 'no'} (score {self.best_score})",
            f"Generations used: {self.generations_used}",
            f"Individuals evaluated: {self.tries_used}",
            f"{self.random_odds_label} {self.random_odds_description}",
            f"Chance random guessing finds it in as many tries: {self.relative_advantage_percent}",
        ]
