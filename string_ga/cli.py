"""
CLI module for string genetic search.

Handles run configuration loading, command-line overrides, validation,
and dispatching the run.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import yaml

from .data_models import ALPHABET


DEFAULT_CONFIG_PATH = Path(__file__).parent / "string_ga_config.yaml"

PRESET_FIELDS = ['mutation', 'population', 'generation_cap']


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError("Configuration file must contain a mapping")

    return config


def apply_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line overrides into a run configuration.

    Recognized keys: goal, mutation, population, generation_cap,
    random_seed, history. Keys whose value is None are ignored.

    Args:
        config: Run configuration loaded from YAML
        overrides: Values given on the command line

    Returns:
        New configuration dictionary
    """
    merged = dict(config)
    merged['presets'] = dict(config.get('presets') or {})
    merged['report'] = dict(config.get('report') or {})

    for key, value in overrides.items():
        if value is None:
            continue
        if key in PRESET_FIELDS:
            merged['presets'][key] = value
        elif key == 'history':
            merged['report']['history'] = value
        else:
            merged[key] = value

    return merged


def normalize_goal(goal: str) -> str:
    """Lowercase the goal; the alphabet only holds lowercase letters and space."""
    return goal.lower()


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Preset indices are only checked for type here; out-of-range indices
    are resolved to fallbacks when the run is built.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'goal' not in config:
        raise ConfigValidationError("Missing required field: 'goal'")

    goal = config['goal']
    if not isinstance(goal, str):
        raise ConfigValidationError(f"'goal' must be a string, got: {goal!r}")

    invalid = sorted(set(goal) - set(ALPHABET))
    if invalid:
        raise ConfigValidationError(
            f"'goal' may only contain lowercase letters and spaces, found: {invalid!r}"
        )

    presets = config.get('presets', {})
    if presets is None:
        presets = {}
    if not isinstance(presets, dict):
        raise ConfigValidationError("'presets' must be a dictionary")

    for field in presets:
        if field not in PRESET_FIELDS:
            raise ConfigValidationError(
                f"Unknown preset: '{field}'. Must be one of {PRESET_FIELDS}"
            )
        value = presets[field]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError(
                f"'presets.{field}' must be an integer, got: {value!r}"
            )

    seed = config.get('random_seed')
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigValidationError(
            f"'random_seed' must be a non-negative integer, got: {seed!r}"
        )

    report = config.get('report', {})
    if report is not None and not isinstance(report, dict):
        raise ConfigValidationError("'report' must be a dictionary")


def run_from_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
):
    """
    Load run configuration and execute the evolution run.

    This is the main entry point called by ga_cli.py.

    Args:
        config_path: Path to run configuration YAML file (packaged default if None)
        overrides: Command-line values that replace file values

    Returns:
        RunResult of the run

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    if config_path is None:
        config_path = str(DEFAULT_CONFIG_PATH)

    print(f"Loading configuration from: {config_path}")
    config = load_run_config(config_path)
    config = apply_overrides(config, overrides or {})

    if isinstance(config.get('goal'), str):
        config['goal'] = normalize_goal(config['goal'])

    print("Validating configuration...")
    validate_run_config(config)
    print()

    from .orchestration import run_evolution_mode
    result = run_evolution_mode(config)

    print("\nRun completed successfully!")
    return result
