import string

# --- Word Shape ---
WORD_LENGTH = 5
ALPHABET = string.ascii_lowercase
# Each record of the word-list file is 5 letter bytes plus one separator byte.
RECORD_SIZE = WORD_LENGTH + 1

# --- Word Lists ---
WORDS_PATH = "./words"
URL_ANSWERS = "https://raw.githubusercontent.com/Roy-Orbison/wordle-guesses-answers/refs/heads/main/answers.txt"

# --- Solver Defaults ---
INITIAL_GUESS = "lares"
DEFAULT_PARALLEL_THRESHOLD = 200

# --- Clue Symbols ---
# 'x' and 'b' both read as black; clues are always written back with 'x'.
BLACK_SYMBOLS = ("x", "b")
YELLOW_SYMBOL = "y"
GREEN_SYMBOL = "g"
