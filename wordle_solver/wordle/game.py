import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from wordle_solver.utils.config import SearchConfig
from wordle_solver.utils.errors import ClueError, ContradictoryHistory, ExhaustedCandidatePool
from wordle_solver.wordle import clue as clues
from wordle_solver.wordle.clue import ALL_GREEN, Clue
from wordle_solver.wordle.knowledge import KnowledgeState
from wordle_solver.wordle.selector import WordPool, score_pool, select_best, select_next_guess

# ==============================================================================
# ---  DATA STRUCTURES FOR GAME LOGIC ---
# ==============================================================================
@dataclass
class GameRecord:
    """A structured object to hold the results of a single self-play game."""
    log_type: str
    step: int
    secret_word: str
    solved: bool
    turns_to_solve: int
    guesses: List[str] = field(default_factory=list)
    # Candidate pool size after each clue was applied
    pool_sizes: List[int] = field(default_factory=list)


@dataclass
class RoundResult:
    """What one round of the solver produced for the clue it was given."""
    clue: Clue
    pool_size: int
    scores: List[Tuple[str, int]] = field(default_factory=list)
    # Next word to play; None once the game is decided
    guess: Optional[str] = None
    # The clue was all green
    solved: bool = False
    # Only one candidate is left
    answer: Optional[str] = None

# ==============================================================================
# ---  CONTROL LOOP ---
# ==============================================================================
class SolverSession:
    """
    Runs the guess/clue loop for one puzzle.

    Each call to `apply_clue` consumes the clue for the last emitted guess,
    narrows the pool and picks the next guess. The state and pool only change
    once a round has fully succeeded, so a rejected clue leaves the session
    as it was.
    """

    def __init__(self, words: Sequence[str], search: Optional[SearchConfig] = None):
        self.search = search or SearchConfig()
        self.state = KnowledgeState.empty()
        self.pool = words if isinstance(words, WordPool) else WordPool(words)
        self.history: List[Tuple[str, Clue]] = []
        self.finished = False
        if self.search.initial_guess:
            self.last_guess = self.search.initial_guess
        else:
            self.last_guess = select_next_guess(self.state, self.pool, self.search)

    @property
    def guesses(self) -> List[str]:
        return [guess for guess, _ in self.history]

    def apply_clue(self, clue: Clue) -> RoundResult:
        """
        Raises:
            ContradictoryHistory: the clue disagrees with the earlier ones.
            ExhaustedCandidatePool: no word is left that fits every clue.
        """
        if self.finished:
            raise ExhaustedCandidatePool("the puzzle is already decided")

        state = self.state.update(self.last_guess, clue)
        if clue == ALL_GREEN:
            self._commit(clue, state, self.pool)
            self.finished = True
            return RoundResult(clue=clue, pool_size=len(self.pool), solved=True)

        # A word that was already played without winning cannot be the answer
        played = set(self.guesses) | {self.last_guess}
        pool = self.pool.filter(state, self.search.require_present_letters).without(played)
        if not len(pool):
            raise ExhaustedCandidatePool()

        if len(pool) == 1:
            self._commit(clue, state, pool)
            self.last_guess = pool[0]
            self.finished = True
            return RoundResult(clue=clue, pool_size=1, guess=pool[0], answer=pool[0])

        scores = score_pool(state, pool, self.search)
        guess, _ = select_best(scores)
        self._commit(clue, state, pool)
        self.last_guess = guess
        return RoundResult(clue=clue, pool_size=len(pool), scores=scores, guess=guess)

    def _commit(self, clue: Clue, state: KnowledgeState, pool: WordPool):
        self.history.append((self.last_guess, clue))
        self.state = state
        self.pool = pool


def print_round(result: RoundResult, show_scores: bool = True, emit: Callable[[str], None] = print):
    """Writes the round the way the console loop reports it."""
    if result.solved:
        emit("solved!")
        return
    if show_scores:
        for word, value in result.scores:
            emit(f"score {word} = {value}")
    if result.answer:
        emit(f"answer: {result.answer}")
    else:
        emit(f"guess: {result.guess}")


def play_interactive(
    words: Sequence[str],
    search: SearchConfig,
    lines: Optional[Iterable[str]] = None,
    emit: Callable[[str], None] = print,
) -> SolverSession:
    """
    Reads one clue per line and answers with the next guess until the puzzle
    is solved, only one word is left, or the input ends.

    Bad clue lines, contradictions and clues that leave no candidate are
    reported and the clue is ignored; the previous guess stays in play.
    """
    session = SolverSession(words, search)
    emit(f"candidates: {len(session.pool)}")
    emit(f"guess: {session.last_guess}")

    for line in (sys.stdin if lines is None else lines):
        if not line.strip():
            continue
        try:
            clue = clues.decode(line.strip())
            result = session.apply_clue(clue)
        except (ClueError, ContradictoryHistory, ExhaustedCandidatePool) as e:
            emit(f"error: {e}")
            emit(f"guess: {session.last_guess}")
            continue

        print_round(result, show_scores=search.show_scores, emit=emit)
        if session.finished:
            emit(f"solved in {len(session.history) + (0 if result.solved else 1)} guess(es)")
            break
    return session
