from collections import Counter
from enum import Enum
from typing import Tuple
from wordle_solver.utils import constants
from wordle_solver.utils.errors import InvalidClueCharacter, InvalidClueLength


class Mark(Enum):
    """One block of a clue."""
    BLACK = "x"
    YELLOW = "y"
    GREEN = "g"


# A clue is one mark per letter position of the guess.
Clue = Tuple[Mark, ...]

ALL_GREEN: Clue = (Mark.GREEN,) * constants.WORD_LENGTH

_SYMBOLS = {
    **{symbol: Mark.BLACK for symbol in constants.BLACK_SYMBOLS},
    constants.YELLOW_SYMBOL: Mark.YELLOW,
    constants.GREEN_SYMBOL: Mark.GREEN,
}


def decode(raw: str) -> Clue:
    """
    Decodes a clue line such as 'xygxx'.

    Raises:
        InvalidClueLength: if the line (without its newline) is not 5 characters.
        InvalidClueCharacter: for any character other than x, b, y or g.
    """
    raw = raw.rstrip("\r\n")
    if len(raw) != constants.WORD_LENGTH:
        raise InvalidClueLength(raw, constants.WORD_LENGTH)
    marks = []
    for position, char in enumerate(raw):
        if char not in _SYMBOLS:
            raise InvalidClueCharacter(char, position)
        marks.append(_SYMBOLS[char])
    return tuple(marks)


def encode(clue: Clue) -> str:
    return "".join(mark.value for mark in clue)


def compute(guess: str, answer: str, strict: bool = False) -> Clue:
    """
    Derives the clue a guess would receive against the answer.

    The default derivation marks a letter yellow wherever it occurs in the
    answer, so a repeated letter in the guess can collect more yellow/green
    marks than the answer holds copies of it. With `strict` the canonical
    Wordle rule is used: greens first, then yellows while unmatched copies of
    the letter remain in the answer.
    """
    if strict:
        return _compute_strict(guess, answer)
    return tuple(
        Mark.GREEN if g == a else Mark.YELLOW if g in answer else Mark.BLACK
        for g, a in zip(guess, answer)
    )


def _compute_strict(guess: str, answer: str) -> Clue:
    marks = [Mark.BLACK] * constants.WORD_LENGTH
    answer_counts = Counter()

    # First pass: greens, and count the answer letters they did not use
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            marks[i] = Mark.GREEN
        else:
            answer_counts[a] += 1

    # Second pass: yellows limited by the remaining copies
    for i, g in enumerate(guess):
        if marks[i] is Mark.GREEN:
            continue
        if answer_counts[g] > 0:
            marks[i] = Mark.YELLOW
            answer_counts[g] -= 1
    return tuple(marks)


def green_count(clue: Clue) -> int:
    return sum(1 for mark in clue if mark is Mark.GREEN)
