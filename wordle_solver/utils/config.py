from dataclasses import dataclass, asdict, field
import json
from pathlib import Path
from typing import Dict, Optional
from wordle_solver.utils import constants

@dataclass
class WordListConfig:
    # Fixed-record word list read at startup
    path: str = constants.WORDS_PATH
    # Optional remote list, downloaded into `path` when the file is missing
    url: Optional[str] = None

@dataclass
class SearchConfig:
    # First guess played before any clue is read; None scores the full list for it
    initial_guess: Optional[str] = constants.INITIAL_GUESS
    # Canonical duplicate-letter feedback when simulating clues
    strict_feedback: bool = False
    # Candidates must contain every letter already known to be present
    require_present_letters: bool = False
    # Worker processes used for scoring, None lets the executor decide
    max_workers: Optional[int] = None
    # Pools smaller than this are scored in-process
    parallel_threshold: int = constants.DEFAULT_PARALLEL_THRESHOLD
    show_scores: bool = True
    show_progress: bool = False

    def __post_init__(self):
        if self.initial_guess is not None:
            assert len(self.initial_guess) == constants.WORD_LENGTH, \
                f"initial_guess must have {constants.WORD_LENGTH} letters"
            assert set(self.initial_guess) <= set(constants.ALPHABET), \
                "initial_guess must be lowercase ascii letters"
        assert self.max_workers is None or self.max_workers > 0, "max_workers must be positive"

@dataclass
class EvalConfig:
    num_games: int = 100
    # Games that are not solved within this many guesses count as losses
    max_trials: int = 6
    # Clues shown to the solver follow the real duplicate-letter rule
    canonical_feedback: bool = True
    seed: int = 42
    metrics_file: str = "./data/self_play_metrics.jsonl"
    log_interval: int = 10

    def __post_init__(self):
        assert self.max_trials > 0, "max_trials must be greater than 0"

@dataclass
class SolverConfig:
    word_list: WordListConfig = field(default_factory=WordListConfig)
    solver: SearchConfig = field(default_factory=SearchConfig)
    evaluation: EvalConfig = field(default_factory=EvalConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "SolverConfig":
        return cls(
            word_list=WordListConfig(**config_dict.get("word_list", {})),
            solver=SearchConfig(**config_dict.get("solver", {})),
            evaluation=EvalConfig(**config_dict.get("evaluation", {})),
        )

    def to_dict(self) -> Dict:
        return asdict(self)


def default_config() -> SolverConfig:
    return SolverConfig()


def save_config(config: SolverConfig, file_path: Path):
    """Saves the configuration object to a JSON file."""
    with open(file_path, 'w') as f:
        json.dump(asdict(config), f, indent=4)
    print(f"Configuration saved to {file_path}")


def load_config_from_file(config_path: str) -> SolverConfig:
    """Loads the solver configuration from a JSON file."""
    config_file = Path(config_path)
    if not config_file.is_file():
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = json.load(f)

    return SolverConfig.from_dict(config_dict)
