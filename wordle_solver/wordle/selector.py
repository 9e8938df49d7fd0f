import os
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np
from tqdm import tqdm
from wordle_solver.utils import constants
from wordle_solver.utils.config import SearchConfig
from wordle_solver.utils.errors import ExhaustedCandidatePool
from wordle_solver.wordle import clue as clues
from wordle_solver.wordle.clue import Clue, Mark
from wordle_solver.wordle.knowledge import KnowledgeState, letter_index

# =====================================================================
# CANDIDATE POOL
# =====================================================================

def words_to_array(words: Sequence[str]) -> np.ndarray:
    """Converts 5-letter words to an (N, 5) array of letter indices, keeping order."""
    if not words:
        return np.zeros((0, constants.WORD_LENGTH), dtype=np.uint8)
    return np.array([[letter_index(char) for char in word] for word in words], dtype=np.uint8)


class WordPool:
    """An ordered, immutable collection of candidate words."""

    def __init__(self, words: Sequence[str], codes: Optional[np.ndarray] = None):
        self.words: Tuple[str, ...] = tuple(words)
        self.codes = words_to_array(self.words) if codes is None else codes
        self.codes.setflags(write=False)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __eq__(self, other) -> bool:
        return isinstance(other, WordPool) and self.words == other.words

    def __repr__(self) -> str:
        preview = ", ".join(self.words[:5])
        return f"WordPool({len(self)} words: {preview}{', ...' if len(self) > 5 else ''})"

    def count_consistent(self, state: KnowledgeState, require_present: bool = False) -> int:
        return int(np.count_nonzero(state.consistent_mask(self.codes, require_present)))

    def filter(self, state: KnowledgeState, require_present: bool = False) -> "WordPool":
        keep = state.consistent_mask(self.codes, require_present)
        return WordPool([w for w, k in zip(self.words, keep) if k], codes=self.codes[keep])

    def without(self, excluded) -> "WordPool":
        keep = np.array([w not in excluded for w in self.words], dtype=bool)
        return WordPool([w for w, k in zip(self.words, keep) if k], codes=self.codes[keep])


PoolLike = Union[WordPool, Sequence[str]]


def as_pool(pool: PoolLike) -> WordPool:
    return pool if isinstance(pool, WordPool) else WordPool(pool)

# =====================================================================
# SCORING
# =====================================================================

_MARKS_BY_DIGIT = (Mark.BLACK, Mark.YELLOW, Mark.GREEN)
_PLACE_VALUES = 3 ** np.arange(constants.WORD_LENGTH)


def _key_to_clue(key: int) -> Clue:
    return tuple(_MARKS_BY_DIGIT[(key // 3 ** i) % 3] for i in range(constants.WORD_LENGTH))


def clue_distribution(guess: str, pool: PoolLike, strict: bool = False) -> Dict[Clue, int]:
    """
    Counts how many pool members, taken as the answer, would give each clue for `guess`.

    The simplified derivation is vectorised over the whole pool; the strict one
    is computed word by word.
    """
    pool = as_pool(pool)
    if strict:
        return Counter(clues.compute(guess, answer, strict=True) for answer in pool)
    if not len(pool):
        return {}

    guess_codes = words_to_array([guess])[0]
    greens = pool.codes == guess_codes
    present = np.stack([(pool.codes == code).any(axis=1) for code in guess_codes], axis=1)
    digits = np.where(greens, 2, np.where(present, 1, 0))
    keys, counts = np.unique(digits @ _PLACE_VALUES, return_counts=True)
    return {_key_to_clue(int(key)): int(count) for key, count in zip(keys, counts)}


def remaining_possibilities(
    state: KnowledgeState,
    guess: str,
    hypothetical_answer: str,
    pool: PoolLike,
    strict: bool = False,
    require_present: bool = False,
) -> int:
    """Given a guess and a hypothetical answer, how many pool words would remain after the clue."""
    simulated = state.update_from_answer(guess, hypothetical_answer, strict=strict)
    return as_pool(pool).count_consistent(simulated, require_present)


def score(
    state: KnowledgeState,
    guess: str,
    pool: PoolLike,
    strict: bool = False,
    require_present: bool = False,
) -> int:
    """
    Sum of `remaining_possibilities` over every pool word as the answer.

    This is the expected number of remaining words under a uniform prior, times
    the pool size; the division is skipped since the value only ranks guesses.
    Answers giving the same clue lead to the same simulated state, so each
    distinct clue is evaluated once and weighted by how many answers give it.
    """
    pool = as_pool(pool)
    total = 0
    for clue, count in clue_distribution(guess, pool, strict=strict).items():
        total += count * pool.count_consistent(state.simulate(guess, clue), require_present)
    return total

# =====================================================================
# PARALLEL FAN-OUT
# =====================================================================

# Read-only snapshot each worker process scores against.
_worker_context: Dict = {}


def _init_worker(state: KnowledgeState, pool: WordPool, strict: bool, require_present: bool):
    _worker_context.update(state=state, pool=pool, strict=strict, require_present=require_present)


def _score_range(start: int, stop: int) -> List[Tuple[int, int]]:
    ctx = _worker_context
    return [
        (i, score(ctx["state"], ctx["pool"][i], ctx["pool"], ctx["strict"], ctx["require_present"]))
        for i in range(start, stop)
    ]


def _resolve_workers(search: SearchConfig) -> int:
    return search.max_workers or os.cpu_count() or 1


def score_pool(
    state: KnowledgeState,
    pool: PoolLike,
    search: Optional[SearchConfig] = None,
) -> List[Tuple[str, int]]:
    """
    Scores every pool word as the next guess.

    Returns:
        (word, score) pairs in pool order, whatever order the workers finish in.
    """
    pool = as_pool(pool)
    search = search or SearchConfig()
    workers = _resolve_workers(search)

    if workers == 1 or len(pool) < search.parallel_threshold:
        scores = [
            score(state, word, pool, search.strict_feedback, search.require_present_letters)
            for word in tqdm(pool, desc="Scoring guesses", disable=not search.show_progress)
        ]
        return list(zip(pool.words, scores))

    chunk_size = max(1, len(pool) // (workers * 4))
    scores: List[Optional[int]] = [None] * len(pool)
    with ProcessPoolExecutor(
        max_workers=workers,
        initializer=_init_worker,
        initargs=(state, pool, search.strict_feedback, search.require_present_letters),
    ) as executor:
        futures = [
            executor.submit(_score_range, start, min(start + chunk_size, len(pool)))
            for start in range(0, len(pool), chunk_size)
        ]
        with tqdm(total=len(pool), desc="Scoring guesses", disable=not search.show_progress) as pbar:
            for future in as_completed(futures):
                chunk = future.result()
                for index, value in chunk:
                    scores[index] = value
                pbar.update(len(chunk))
    return list(zip(pool.words, scores))


def select_best(scored: Sequence[Tuple[str, int]]) -> Tuple[str, int]:
    """The pair with the lowest score; the earliest one wins a tie."""
    if not scored:
        raise ExhaustedCandidatePool()
    return min(scored, key=lambda item: item[1])


def select_next_guess(
    state: KnowledgeState,
    pool: PoolLike,
    search: Optional[SearchConfig] = None,
) -> str:
    pool = as_pool(pool)
    if not len(pool):
        raise ExhaustedCandidatePool()
    return select_best(score_pool(state, pool, search))[0]
