from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Dict, List, Optional, Tuple
import numpy as np
from wordle_solver.utils import constants
from wordle_solver.utils.errors import ContradictoryHistory
from wordle_solver.wordle import clue as clues
from wordle_solver.wordle.clue import Clue, Mark


class LetterStatus(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


def letter_index(letter: str) -> int:
    return ord(letter) - ord("a")


@dataclass(frozen=True)
class KnowledgeState:
    """
    Everything deduced about the answer so far.

    `mask` holds the letter confirmed at each position (None while unknown).
    `letters` holds one status per letter of the alphabet, in alphabet order.
    A state is never modified; `update` and `update_from_answer` return a new one.
    """
    mask: Tuple[Optional[str], ...]
    letters: Tuple[LetterStatus, ...]

    @classmethod
    def empty(cls) -> "KnowledgeState":
        return cls(
            mask=(None,) * constants.WORD_LENGTH,
            letters=(LetterStatus.UNKNOWN,) * len(constants.ALPHABET),
        )

    def status(self, letter: str) -> LetterStatus:
        return self.letters[letter_index(letter)]

    def present_letters(self) -> List[str]:
        return [letter for letter, s in zip(constants.ALPHABET, self.letters) if s is LetterStatus.PRESENT]

    def absent_letters(self) -> List[str]:
        return [letter for letter, s in zip(constants.ALPHABET, self.letters) if s is LetterStatus.ABSENT]

    @property
    def is_solved(self) -> bool:
        return all(letter is not None for letter in self.mask)

    def pattern(self) -> str:
        return "".join(letter or "_" for letter in self.mask)

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------
    def consistent(self, word: str, require_present: bool = False) -> bool:
        """
        Checks whether `word` could still be the answer.

        Confirmed positions must match and no unconfirmed position may hold a
        letter known to be absent. Letters known to be present are only
        required to appear in the word when `require_present` is set.
        """
        for i, known in enumerate(self.mask):
            if known is None:
                if self.status(word[i]) is LetterStatus.ABSENT:
                    return False
            elif word[i] != known:
                return False
        if require_present:
            return all(letter in word for letter in self.present_letters())
        return True

    @cached_property
    def _absent_table(self) -> np.ndarray:
        return np.array([s is LetterStatus.ABSENT for s in self.letters], dtype=bool)

    def consistent_mask(self, codes: np.ndarray, require_present: bool = False) -> np.ndarray:
        """Row-wise `consistent` over an (N, 5) array of letter indices."""
        keep = np.ones(codes.shape[0], dtype=bool)
        for i, known in enumerate(self.mask):
            column = codes[:, i]
            if known is None:
                keep &= ~self._absent_table[column]
            else:
                keep &= column == letter_index(known)
        if require_present:
            for letter in self.present_letters():
                keep &= (codes == letter_index(letter)).any(axis=1)
        return keep

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def update(self, guess: str, clue: Clue) -> "KnowledgeState":
        """
        Returns the state after `guess` received `clue`.

        Raises:
            ContradictoryHistory: if the clue disagrees with what is already known.
        """
        return self._apply(guess, clue, strict_merge=True)

    def update_from_answer(self, guess: str, answer: str, strict: bool = False) -> "KnowledgeState":
        """
        Returns the state we would reach by guessing `guess` if `answer` were
        the hidden word. Used for simulation only: it never raises, confirmed
        positions are kept and each guessed letter takes the status the
        answer gives it.
        """
        return self._apply(guess, clues.compute(guess, answer, strict=strict), strict_merge=False)

    def simulate(self, guess: str, clue: Clue) -> "KnowledgeState":
        return self._apply(guess, clue, strict_merge=False)

    def _apply(self, guess: str, clue: Clue, strict_merge: bool) -> "KnowledgeState":
        mask = list(self.mask)
        for i, (letter, mark) in enumerate(zip(guess, clue)):
            known = mask[i]
            if known is None:
                if mark is Mark.GREEN:
                    mask[i] = letter
            elif strict_merge and (known == letter) != (mark is Mark.GREEN):
                raise ContradictoryHistory(
                    f"position {i + 1} is known to be '{known}' but '{letter}' was marked {mark.name.lower()}"
                )

        letters = list(self.letters)
        for letter, claim in _letter_claims(guess, clue).items():
            idx = letter_index(letter)
            current = letters[idx]
            if current is LetterStatus.UNKNOWN:
                letters[idx] = claim
            elif current is not claim:
                if strict_merge:
                    raise ContradictoryHistory(
                        f"letter '{letter}' was {current.value} and is now reported {claim.value}"
                    )
                letters[idx] = claim
        return KnowledgeState(mask=tuple(mask), letters=tuple(letters))


def _letter_claims(guess: str, clue: Clue) -> Dict[str, LetterStatus]:
    """A letter is present if any of its copies in the guess was green or yellow."""
    claims: Dict[str, LetterStatus] = {}
    for letter, mark in zip(guess, clue):
        if mark is not Mark.BLACK:
            claims[letter] = LetterStatus.PRESENT
        else:
            claims.setdefault(letter, LetterStatus.ABSENT)
    return claims
