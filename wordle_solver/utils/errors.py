class SolverError(Exception):
    """Base class for every error the solver reports to its caller."""


# --- Clue Input ---
class ClueError(SolverError):
    pass


class InvalidClueCharacter(ClueError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"invalid clue character {char!r} at position {position + 1}; use x/b, y or g"
        )


class InvalidClueLength(ClueError):
    def __init__(self, raw: str, expected: int):
        self.raw = raw
        self.expected = expected
        super().__init__(f"clue {raw!r} must have exactly {expected} characters")


# --- Word List ---
class WordListError(SolverError):
    pass


class TruncatedWordList(WordListError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"word list ends with a truncated record of {length} byte(s)")


class MalformedWordList(WordListError):
    def __init__(self, index: int, record: bytes):
        self.index = index
        self.record = record
        super().__init__(f"record {index} ({record!r}) is not a 5-letter lowercase word")


# --- Game State ---
class ExhaustedCandidatePool(SolverError):
    def __init__(self, message: str = "no candidate word is consistent with the clues so far"):
        super().__init__(message)


class ContradictoryHistory(SolverError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"clue contradicts earlier clues: {reason}")
