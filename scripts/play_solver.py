import argparse
import sys
from dataclasses import replace
from wordle_solver.utils import config as cfg
from wordle_solver.utils.errors import SolverError
from wordle_solver.utils.read_files import load_words
from wordle_solver.wordle.game import play_interactive


def build_config(args) -> cfg.SolverConfig:
    config = cfg.load_config_from_file(args.config) if args.config else cfg.default_config()
    if args.words:
        config.word_list.path = args.words

    overrides = {}
    if args.initial_guess:
        overrides["initial_guess"] = args.initial_guess.lower()
    if args.compute_opening:
        overrides["initial_guess"] = None
    if args.strict:
        overrides["strict_feedback"] = True
    if args.require_present:
        overrides["require_present_letters"] = True
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.quiet:
        overrides["show_scores"] = False
    # replace() runs SearchConfig validation again on the overridden values
    config.solver = replace(config.solver, **overrides)
    return config


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Suggest the next Wordle guess. Type the clue for each guess as five of x/b (black), y (yellow), g (green)."
    )
    parser.add_argument("--config", type=str, help="Path to a JSON solver configuration file.")
    parser.add_argument("--words", type=str, help="Path to the word-list file.")
    parser.add_argument("--initial-guess", type=str, help="Opening guess (default: lares).")
    parser.add_argument("--compute-opening", action="store_true", help="Score the full list to pick the opening guess.")
    parser.add_argument("--strict", action="store_true", help="Simulate clues with the duplicate-letter rule.")
    parser.add_argument("--require-present", action="store_true", help="Candidates must contain every known letter.")
    parser.add_argument("--workers", type=int, help="Number of scoring processes.")
    parser.add_argument("--quiet", action="store_true", help="Only print the chosen guess, not every score.")
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        words = load_words(config.word_list)
    except (FileNotFoundError, SolverError, AssertionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    play_interactive(words, config.solver)
    return 0


if __name__ == "__main__":
    sys.exit(main())
