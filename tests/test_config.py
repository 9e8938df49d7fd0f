import json
import tempfile
import unittest
from pathlib import Path
from wordle_solver.utils import config as cfg
from wordle_solver.utils import constants

CONFIG_FILE = Path(__file__).resolve().parent.parent / "config" / "solver_config.json"


class TestSolverConfig(unittest.TestCase):

    def test_defaults(self):
        config = cfg.default_config()
        self.assertEqual(config.word_list.path, constants.WORDS_PATH)
        self.assertEqual(config.solver.initial_guess, "lares")
        self.assertFalse(config.solver.strict_feedback)
        self.assertFalse(config.solver.require_present_letters)
        self.assertEqual(config.evaluation.max_trials, 6)

    def test_from_dict_fills_missing_sections(self):
        config = cfg.SolverConfig.from_dict({"solver": {"initial_guess": "crane", "max_workers": 2}})
        self.assertEqual(config.solver.initial_guess, "crane")
        self.assertEqual(config.solver.max_workers, 2)
        self.assertEqual(config.evaluation, cfg.EvalConfig())

    def test_invalid_values_are_rejected(self):
        with self.assertRaises(AssertionError):
            cfg.SearchConfig(initial_guess="toolong")
        with self.assertRaises(AssertionError):
            cfg.SearchConfig(initial_guess="LARES")
        with self.assertRaises(AssertionError):
            cfg.SearchConfig(max_workers=0)
        with self.assertRaises(AssertionError):
            cfg.EvalConfig(max_trials=0)

    def test_save_and_load(self):
        config = cfg.default_config()
        config.solver.strict_feedback = True
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg.save_config(config, path)
            with open(path) as f:
                self.assertTrue(json.load(f)["solver"]["strict_feedback"])
            self.assertEqual(cfg.load_config_from_file(str(path)), config)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            cfg.load_config_from_file("/nonexistent/solver_config.json")

    def test_shipped_config_loads(self):
        config = cfg.load_config_from_file(str(CONFIG_FILE))
        self.assertEqual(config.solver.initial_guess, "lares")
        self.assertTrue(config.evaluation.canonical_feedback)


if __name__ == "__main__":
    unittest.main()
