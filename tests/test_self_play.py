import os
import tempfile
import unittest
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
from wordle_solver.utils import config as cfg
from wordle_solver.utils.logging import (
    plot_pool_shrinkage,
    plot_win_distribution,
    read_metrics_file,
    summarize_results,
    write_metrics_to_file,
)
from wordle_solver.sim.self_play import evaluate_solver, play_solver_game
from wordle_solver.wordle.game import GameRecord

WORDS = ["abcde", "abcdf", "abcdg", "xyzwv"]


def make_config(**evaluation):
    config = cfg.SolverConfig.from_dict({
        "solver": {"initial_guess": "abcde", "max_workers": 1},
        "evaluation": evaluation,
    })
    return config


class TestPlaySolverGame(unittest.TestCase):

    def test_game_is_solved(self):
        record = play_solver_game("abcdg", WORDS, make_config(), step=3)
        self.assertTrue(record.solved)
        self.assertEqual(record.turns_to_solve, 3)
        self.assertEqual(record.guesses, ["abcde", "abcdf", "abcdg"])
        self.assertEqual(record.pool_sizes, [2, 1])
        self.assertEqual(record.step, 3)

    def test_opening_guess_can_win(self):
        record = play_solver_game("abcde", WORDS, make_config())
        self.assertTrue(record.solved)
        self.assertEqual(record.turns_to_solve, 1)
        self.assertEqual(record.pool_sizes, [])

    def test_out_of_trials_is_a_loss(self):
        record = play_solver_game("abcdg", WORDS, make_config(max_trials=2))
        self.assertFalse(record.solved)
        self.assertEqual(record.turns_to_solve, 2)
        self.assertEqual(record.guesses, ["abcde", "abcdf"])

    def test_unknown_secret_is_a_loss(self):
        record = play_solver_game("abcdz", WORDS, make_config())
        self.assertFalse(record.solved)


class TestEvaluateSolver(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.metrics_file = Path(self.tmp.name) / "metrics.jsonl"

    def tearDown(self):
        self.tmp.cleanup()

    def test_every_game_is_written(self):
        config = make_config(num_games=4, log_interval=3)
        records = evaluate_solver(config, WORDS, metrics_file=self.metrics_file)
        self.assertEqual(len(records), 4)
        logged = read_metrics_file(self.metrics_file)
        self.assertEqual(sorted(r["secret_word"] for r in logged), sorted(WORDS))
        self.assertTrue(all(r["solved"] for r in logged))

    def test_explicit_secrets(self):
        records = evaluate_solver(make_config(), WORDS, metrics_file=self.metrics_file, secrets=["abcdg"])
        self.assertEqual([r.secret_word for r in records], ["abcdg"])

    def test_summary_and_plots(self):
        write_metrics_to_file([
            GameRecord("self_play", 0, "abcde", True, 1, ["abcde"], []),
            GameRecord("self_play", 1, "abcdg", True, 3, ["abcde", "abcdf", "abcdg"], [2, 1]),
            GameRecord("self_play", 2, "zzzzz", False, 6, ["abcde"] * 6, [2, 1]),
        ], self.metrics_file)
        summary = summarize_results(read_metrics_file(self.metrics_file))
        row = summary.iloc[0]
        self.assertEqual(row["total_games"], 3)
        self.assertEqual(row["total_wins"], 2)
        self.assertAlmostEqual(row["win_rate"], 200 / 3)
        self.assertAlmostEqual(row["avg_turns_on_win"], 2.0)

        self.assertTrue(os.path.exists(plot_win_distribution(self.metrics_file)))
        self.assertTrue(os.path.exists(plot_pool_shrinkage(self.metrics_file)))

    def test_empty_summary(self):
        self.assertTrue(summarize_results([]).empty)


if __name__ == "__main__":
    unittest.main()
