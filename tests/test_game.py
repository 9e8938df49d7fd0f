import unittest
from wordle_solver.utils.config import SearchConfig
from wordle_solver.utils.errors import ContradictoryHistory, ExhaustedCandidatePool
from wordle_solver.wordle import clue as clues
from wordle_solver.wordle.clue import ALL_GREEN
from wordle_solver.wordle.game import SolverSession, play_interactive
from wordle_solver.wordle.knowledge import KnowledgeState

WORDS = ["abcde", "abcdf", "abcdg", "xyzwv"]


def search(initial_guess="abcde", **kwargs):
    return SearchConfig(initial_guess=initial_guess, max_workers=1, **kwargs)


class TestSolverSession(unittest.TestCase):

    def test_round_narrows_pool_and_picks_guess(self):
        session = SolverSession(WORDS, search())
        result = session.apply_clue(clues.decode("ggggx"))
        self.assertEqual(result.pool_size, 2)
        self.assertEqual(result.scores, [("abcdf", 2), ("abcdg", 2)])
        self.assertEqual(result.guess, "abcdf")
        self.assertEqual(session.last_guess, "abcdf")
        self.assertEqual(session.guesses, ["abcde"])
        self.assertEqual(session.state.pattern(), "abcd_")

    def test_single_candidate_is_the_answer(self):
        session = SolverSession(WORDS, search())
        session.apply_clue(clues.decode("ggggx"))
        result = session.apply_clue(clues.decode("ggggx"))
        self.assertEqual(result.answer, "abcdg")
        self.assertTrue(session.finished)

    def test_all_green_solves(self):
        session = SolverSession(WORDS, search())
        result = session.apply_clue(ALL_GREEN)
        self.assertTrue(result.solved)
        self.assertTrue(session.finished)
        with self.assertRaises(ExhaustedCandidatePool):
            session.apply_clue(ALL_GREEN)

    def test_exhausted_pool_leaves_session_unchanged(self):
        session = SolverSession(["abcde", "fghij"], search())
        with self.assertRaises(ExhaustedCandidatePool):
            session.apply_clue(clues.decode("ggggx"))
        self.assertEqual(session.state, KnowledgeState.empty())
        self.assertEqual(len(session.pool), 2)
        self.assertEqual(session.history, [])
        self.assertEqual(session.last_guess, "abcde")

    def test_contradiction_is_rejected(self):
        session = SolverSession(["abcde", "afghi", "ajklm", "xyzwv"], search())
        result = session.apply_clue(clues.decode("gxxxx"))
        self.assertEqual(result.guess, "afghi")
        with self.assertRaises(ContradictoryHistory):
            session.apply_clue(clues.decode("xxxxx"))
        self.assertEqual(session.state.pattern(), "a____")
        self.assertEqual(session.last_guess, "afghi")

    def test_played_words_leave_the_pool(self):
        # All-yellow clues keep every anagram consistent with the state
        session = SolverSession(["abcde", "bcdea", "cdeab"], search())
        result = session.apply_clue(clues.decode("yyyyy"))
        self.assertNotIn("abcde", list(session.pool))
        self.assertEqual(result.scores, [("bcdea", 3), ("cdeab", 3)])
        self.assertEqual(result.guess, "bcdea")

        result = session.apply_clue(clues.decode("yyyyy"))
        self.assertEqual(result.answer, "cdeab")
        self.assertEqual(session.guesses, ["abcde", "bcdea"])
        self.assertTrue(session.finished)

    def test_opening_computed_when_not_configured(self):
        session = SolverSession(["abcde", "abcdf", "xyzwv"], search(initial_guess=None))
        self.assertEqual(session.last_guess, "abcde")


class TestPlayInteractive(unittest.TestCase):

    def test_console_transcript(self):
        output = []
        session = play_interactive(WORDS, search(), lines=["hello\n", "\n", "ggggx\n", "ggggx\n", "ggggg\n"], emit=output.append)
        self.assertEqual(output[:2], ["candidates: 4", "guess: abcde"])
        self.assertTrue(output[2].startswith("error: invalid clue character 'h'"))
        self.assertEqual(output[3], "guess: abcde")
        self.assertEqual(output[4:], [
            "score abcdf = 2",
            "score abcdg = 2",
            "guess: abcdf",
            "answer: abcdg",
            "solved in 3 guess(es)",
        ])
        self.assertTrue(session.finished)

    def test_scores_can_be_hidden(self):
        output = []
        play_interactive(WORDS, search(show_scores=False), lines=["ggggx"], emit=output.append)
        self.assertEqual(output[-1], "guess: abcdf")
        self.assertFalse(any(line.startswith("score") for line in output))

    def test_winning_clue_stops_loop(self):
        output = []
        play_interactive(WORDS, search(), lines=["ggggg", "xxxxx"], emit=output.append)
        self.assertEqual(output[-2:], ["solved!", "solved in 1 guess(es)"])

    def test_exhausted_pool_is_reported(self):
        output = []
        session = play_interactive(["abcde", "fghij"], search(), lines=["ggggx"], emit=output.append)
        self.assertTrue(output[-2].startswith("error: no candidate word"))
        self.assertEqual(output[-1], "guess: abcde")
        self.assertFalse(session.finished)


if __name__ == "__main__":
    unittest.main()
