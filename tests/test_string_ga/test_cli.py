"""
Tests for run configuration loading, validation, and dispatch.
"""

import unittest
import tempfile
import shutil
import io
from contextlib import redirect_stdout
from pathlib import Path
import yaml

from string_ga.cli import (
    ConfigValidationError,
    DEFAULT_CONFIG_PATH,
    load_run_config,
    apply_overrides,
    normalize_goal,
    validate_run_config,
    run_from_config,
)


class TestLoadRunConfig(unittest.TestCase):
    """Test YAML loading."""

    def setUp(self):
        """Create temporary directory."""
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Remove temporary directory."""
        shutil.rmtree(self.temp_dir)

    def _write(self, name, text):
        path = self.temp_dir / name
        path.write_text(text)
        return path

    def test_load_valid(self):
        """Test loading a valid configuration."""
        path = self._write("run.yaml", "goal: abc\npresets:\n  mutation: 1\n")
        config = load_run_config(str(path))

        self.assertEqual(config['goal'], "abc")
        self.assertEqual(config['presets']['mutation'], 1)

    def test_missing_file(self):
        """Test missing configuration file."""
        with self.assertRaises(FileNotFoundError):
            load_run_config(str(self.temp_dir / "missing.yaml"))

    def test_empty_file(self):
        """Test empty configuration file."""
        path = self._write("empty.yaml", "")
        with self.assertRaises(ConfigValidationError):
            load_run_config(str(path))

    def test_invalid_yaml(self):
        """Test malformed YAML."""
        path = self._write("bad.yaml", "goal: [unclosed\n")
        with self.assertRaises(ConfigValidationError):
            load_run_config(str(path))

    def test_non_mapping(self):
        """Test YAML that is not a mapping."""
        path = self._write("list.yaml", "- a\n- b\n")
        with self.assertRaises(ConfigValidationError):
            load_run_config(str(path))

    def test_packaged_default(self):
        """Test packaged default configuration is valid."""
        config = load_run_config(str(DEFAULT_CONFIG_PATH))
        validate_run_config(config)

        self.assertEqual(config['presets'], {'mutation': 2, 'population': 2, 'generation_cap': 2})


class TestValidateRunConfig(unittest.TestCase):
    """Test configuration validation."""

    def test_valid(self):
        """Test a complete valid configuration."""
        validate_run_config({
            'goal': "hello world",
            'presets': {'mutation': 0, 'population': 3, 'generation_cap': 1},
            'random_seed': 4,
            'report': {'history': True},
        })

    def test_missing_goal(self):
        """Test goal is required."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'presets': {}})

    def test_goal_type(self):
        """Test goal must be a string."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': 123})

    def test_goal_symbols(self):
        """Test goal symbols must be in the alphabet."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': "hello!"})

    def test_unknown_preset(self):
        """Test unknown preset names are rejected."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': "a", 'presets': {'speed': 1}})

    def test_preset_type(self):
        """Test preset values must be integers."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': "a", 'presets': {'mutation': "high"}})

    def test_out_of_range_preset_allowed(self):
        """Test out-of-range indices pass validation (resolved to fallbacks later)."""
        validate_run_config({'goal': "a", 'presets': {'mutation': 9}})

    def test_seed(self):
        """Test random seed must be a non-negative integer."""
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': "a", 'random_seed': -1})
        with self.assertRaises(ConfigValidationError):
            validate_run_config({'goal': "a", 'random_seed': "seven"})


class TestOverrides(unittest.TestCase):
    """Test command-line overrides."""

    def test_apply_overrides(self):
        """Test overrides replace file values."""
        config = {'goal': "abc", 'presets': {'mutation': 1}, 'random_seed': 1}
        merged = apply_overrides(config, {
            'goal': "xyz",
            'population': 3,
            'random_seed': None,
            'history': True,
        })

        self.assertEqual(merged['goal'], "xyz")
        self.assertEqual(merged['presets'], {'mutation': 1, 'population': 3})
        self.assertEqual(merged['random_seed'], 1)
        self.assertTrue(merged['report']['history'])

    def test_original_untouched(self):
        """Test the loaded configuration is not modified."""
        config = {'goal': "abc", 'presets': {'mutation': 1}}
        apply_overrides(config, {'mutation': 3})

        self.assertEqual(config['presets']['mutation'], 1)

    def test_normalize_goal(self):
        """Test goal is lowercased."""
        self.assertEqual(normalize_goal("Hello World"), "hello world")


class TestRunFromConfig(unittest.TestCase):
    """Test end-to-end dispatch."""

    def setUp(self):
        """Create temporary run configuration."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.config_path = self.temp_dir / "run.yaml"
        with open(self.config_path, 'w') as f:
            yaml.safe_dump({
                'goal': "Hi",
                'presets': {'mutation': 2, 'population': 1, 'generation_cap': 0},
                'random_seed': 21,
                'report': {'history': True},
            }, f)

    def tearDown(self):
        """Remove temporary directory."""
        shutil.rmtree(self.temp_dir)

    def test_run(self):
        """Test a full run from a configuration file."""
        output = io.StringIO()
        with redirect_stdout(output):
            result = run_from_config(str(self.config_path))

        self.assertLessEqual(result.generations_used, 100)
        self.assertEqual(len(result.final_genome), 2)
        self.assertTrue(result.history)
        self.assertIn("SUMMARY", output.getvalue())
        self.assertIn("GENERATION HISTORY", output.getvalue())

    def test_run_with_overrides(self):
        """Test overrides reach the run."""
        output = io.StringIO()
        with redirect_stdout(output):
            result = run_from_config(str(self.config_path), {'goal': "OK", 'history': False})

        self.assertEqual(len(result.final_genome), 2)
        self.assertEqual(result.history, [])

    def test_missing_seed_is_drawn_and_reported(self):
        """Test a run without a seed reports one that reproduces it."""
        with open(self.config_path, 'w') as f:
            yaml.safe_dump({
                'goal': "hey",
                'presets': {'mutation': 2, 'population': 1, 'generation_cap': 0},
                'random_seed': None,
                'report': {'history': True},
            }, f)

        output = io.StringIO()
        with redirect_stdout(output):
            first = run_from_config(str(self.config_path))

        self.assertIsInstance(first.random_seed, int)
        self.assertIn(f"Random seed: {first.random_seed}", output.getvalue())
        self.assertNotIn("Random seed: None", output.getvalue())

        with redirect_stdout(io.StringIO()):
            second = run_from_config(str(self.config_path), {'random_seed': first.random_seed})

        self.assertEqual(second.random_seed, first.random_seed)
        self.assertEqual(second.final_genome, first.final_genome)
        self.assertEqual(second.generations_used, first.generations_used)
        self.assertEqual(
            [r.to_dict() for r in second.history],
            [r.to_dict() for r in first.history]
        )

    def test_fallback_note_printed(self):
        """Test out-of-range presets are reported."""
        output = io.StringIO()
        with redirect_stdout(output):
            run_from_config(str(self.config_path), {'population': 7, 'goal': "a"})

        self.assertIn("Warning: Population preset 7 out of range", output.getvalue())

    def test_invalid_goal(self):
        """Test invalid goal symbols stop the run."""
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(ConfigValidationError):
                run_from_config(str(self.config_path), {'goal': "hi 2u"})


class TestEntryPoint(unittest.TestCase):
    """Test the ga_cli.py entry point."""

    def test_list_presets(self):
        """Test preset listing exits cleanly."""
        import ga_cli

        output = io.StringIO()
        with redirect_stdout(output):
            code = ga_cli.main(['--list-presets'])

        self.assertEqual(code, 0)
        self.assertIn("10000 individuals per generation", output.getvalue())

    def test_missing_config_returns_error(self):
        """Test a missing configuration file exits with status 1."""
        import ga_cli

        output = io.StringIO()
        with redirect_stdout(output):
            code = ga_cli.main(['does_not_exist.yaml'])

        self.assertEqual(code, 1)
        self.assertIn("Error:", output.getvalue())

    def test_run_with_flags(self):
        """Test flags override the packaged defaults."""
        import ga_cli

        output = io.StringIO()
        with redirect_stdout(output):
            code = ga_cli.main(['--goal', 'Go', '--population', '1',
                                '--generation-cap', '0', '--seed', '3'])

        self.assertEqual(code, 0)
        self.assertIn("Goal: 'go'", output.getvalue())


if __name__ == '__main__':
    unittest.main()
