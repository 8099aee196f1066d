"""
String Genetic Search

This package evolves a population of candidate strings toward a goal
string and compares the effort against pure random guessing.

Key Features:
- Edit-distance fitness (lower is better, 0 is an exact match)
- Running top-two selection with single-point crossover
- Per-position mutation from a mated seed
- Enumerated presets for mutation rate, population size, and generation cap
- Injectable numpy random generator for reproducible runs

Modules:
- data_models: Core data structures (RunConfig, TopTwo, GenerationRecord, RunResult)
- fitness: Edit distance between candidate and goal
- mutation: Random and seed-derived individual generation
- crossover: Single-point mating of two parents
- presets: Preset tables and fallback resolution
- odds: Random-chance odds and relative advantage
- orchestration: Generation loop and run reporting
- cli: Run configuration loading, validation, and dispatch
"""

__version__ = "0.1.0"
__author__ = "String GA Team"

from .data_models import ALPHABET, RunConfig, TopTwo, GenerationRecord, RunResult
from .fitness import edit_distance
from .mutation import generate_individual
from .crossover import mate
from .presets import build_run_config
from .orchestration import evolve

__all__ = [
    "ALPHABET",
    "RunConfig",
    "TopTwo",
    "GenerationRecord",
    "RunResult",
    "edit_distance",
    "generate_individual",
    "mate",
    "build_run_config",
    "evolve",
]
