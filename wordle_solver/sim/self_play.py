import random
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence
from tqdm import tqdm
from wordle_solver.utils import config as cfg
from wordle_solver.utils.errors import ContradictoryHistory, ExhaustedCandidatePool
from wordle_solver.utils.logging import write_metrics_to_file
from wordle_solver.wordle import clue as clues
from wordle_solver.wordle.game import GameRecord, SolverSession
from wordle_solver.wordle.knowledge import KnowledgeState
from wordle_solver.wordle.selector import WordPool, select_next_guess

# ==============================================================================
# Solver Self-Play
# ==============================================================================

def play_solver_game(
    secret_word: str,
    words: Sequence[str],
    config: cfg.SolverConfig,
    step: int = 0,
    log_type: str = "self_play",
    print_debug: bool = False,
) -> GameRecord:
    """
    Plays one game of the solver against a hidden word.

    The solver only sees the clue for each of its guesses, exactly as in the
    interactive loop. A game that needs more than `max_trials` guesses, or in
    which the solver runs out of candidates, is recorded as lost.

    Args:
        secret_word: The hidden answer.
        words: The candidate word list (a WordPool is reused as is).
        config: Solver configuration; `evaluation.max_trials` and
            `evaluation.canonical_feedback` control the game.
        step: Index of this game, for logging purposes.
        log_type: Label stored with the record.
        print_debug: If True, prints each guess and clue.
    """
    max_trials = config.evaluation.max_trials
    strict = config.evaluation.canonical_feedback
    session = SolverSession(words, config.solver)
    guesses: List[str] = []
    pool_sizes: List[int] = []
    solved = False

    if print_debug:
        print(f"\n{'='*35}\n|| NEW GAME || Secret Word: {secret_word}\n{'='*35}")

    while len(guesses) < max_trials:
        guess = session.last_guess
        guesses.append(guess)
        clue = clues.compute(guess, secret_word, strict=strict)
        if print_debug:
            print(f"  Turn {len(guesses)}: {guess} -> {clues.encode(clue)} ({len(session.pool)} candidates)")
        if clue == clues.ALL_GREEN:
            solved = True
            break
        try:
            result = session.apply_clue(clue)
        except (ExhaustedCandidatePool, ContradictoryHistory) as e:
            print(f"Solver gave up on '{secret_word}': {e}")
            break
        pool_sizes.append(result.pool_size)

    if print_debug:
        print(f"  {'Solved' if solved else 'Failed'} after {len(guesses)} guess(es)")

    return GameRecord(
        log_type=log_type,
        step=step,
        secret_word=secret_word,
        solved=solved,
        turns_to_solve=len(guesses) if solved else max_trials,
        guesses=guesses,
        pool_sizes=pool_sizes,
    )


def evaluate_solver(
    config: cfg.SolverConfig,
    words: Sequence[str],
    metrics_file: Optional[Path] = None,
    secrets: Optional[Sequence[str]] = None,
    print_debug: bool = False,
) -> List[GameRecord]:
    """
    Plays the solver against a random sample of the word list and appends
    every game to the metrics file in batches of `log_interval`.
    """
    evaluation = config.evaluation
    metrics_file = Path(metrics_file or evaluation.metrics_file)
    pool = WordPool(words)
    if config.solver.initial_guess is None:
        # Every game opens from the same empty state, so score the opening once
        opening = select_next_guess(KnowledgeState.empty(), pool, config.solver)
        print(f"Best opening guess: {opening}")
        config = replace(config, solver=replace(config.solver, initial_guess=opening))
    if secrets is None:
        rng = random.Random(evaluation.seed)
        secrets = rng.sample(list(pool), min(evaluation.num_games, len(pool)))

    print(f"Selected {len(secrets)} secret words from a list of {len(pool)} words.")
    records: List[GameRecord] = []
    results_buffer: List[GameRecord] = []
    wins = 0

    pbar = tqdm(enumerate(secrets), total=len(secrets), desc="Playing Wordle Games")
    for i, secret_word in pbar:
        record = play_solver_game(secret_word, pool, config, step=i, print_debug=(print_debug and i % 10 == 0))
        records.append(record)
        results_buffer.append(record)
        if record.solved:
            wins += 1
        pbar.set_postfix_str(f"Wins: {wins}/{i + 1}")

        if (i + 1) % evaluation.log_interval == 0:
            write_metrics_to_file(results_buffer, metrics_file)
            results_buffer.clear()

    if results_buffer:
        write_metrics_to_file(results_buffer, metrics_file)
        results_buffer.clear()

    print(f"\n📊 Detailed results saved to '{metrics_file}'")
    return records
