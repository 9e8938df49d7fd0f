import os
import requests
from typing import List, Tuple
from functools import lru_cache
from wordle_solver.utils import constants
from wordle_solver.utils.config import WordListConfig
from wordle_solver.utils.errors import MalformedWordList, TruncatedWordList, WordListError


def _is_word(candidate: str) -> bool:
    return len(candidate) == constants.WORD_LENGTH and set(candidate) <= set(constants.ALPHABET)


def parse_word_records(data: bytes) -> List[str]:
    """
    Splits the raw contents of a word-list file into words.

    Every record is 5 letter bytes followed by a single separator byte. The
    separator of the last record may be missing; any shorter tail is an error.

    Raises:
        TruncatedWordList: if the data ends with a partial record.
        MalformedWordList: if a record does not hold 5 lowercase letters.
    """
    words = []
    for index, start in enumerate(range(0, len(data), constants.RECORD_SIZE)):
        record = data[start:start + constants.WORD_LENGTH]
        if len(record) < constants.WORD_LENGTH:
            raise TruncatedWordList(len(record))
        try:
            word = record.decode("ascii")
        except UnicodeDecodeError:
            raise MalformedWordList(index, record)
        if not _is_word(word):
            raise MalformedWordList(index, record)
        words.append(word)
    return words


def load_word_list_from_file(path: str) -> List[str]:
    """Reads the fixed-record word list at `path`, keeping file order."""
    with open(path, "rb") as f:
        data = f.read()
    words = parse_word_records(data)
    if not words:
        raise WordListError(f"word list {path} is empty")
    return words


def write_word_list(words: List[str], output_path: str):
    """Writes words back out in the fixed-record layout, one per line."""
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "wb") as f:
        f.write("".join(f"{word}\n" for word in words).encode("ascii"))


@lru_cache(maxsize=None)
def load_word_list_from_url(url: str, output_path: str) -> Tuple[str, ...]:
    """
    Loads a list of words from a remote URL.

    Args:
        url (str): The URL of the text file to load.
        output_path (str): Local file the list is cached into.

    Returns:
        Tuple[str, ...]: The lowercase 5-letter words in source order, or an
        empty tuple if loading fails.
    """
    try:
        if os.path.exists(output_path):
            print(f"File found reading locally: {output_path}")
            return tuple(load_word_list_from_file(output_path))

        response = requests.get(url, timeout=30)

        response.raise_for_status()

        # dict keeps the source order while dropping duplicates
        words = list(dict.fromkeys(
            line.strip().lower()
            for line in response.text.splitlines()
            if _is_word(line.strip().lower())
        ))
        print(f"Successfully loaded {len(words)} words from the URL.")
        if output_path and words:
            write_word_list(words, output_path)
        return tuple(words)

    except requests.exceptions.RequestException as e:
        print(f"Error: Could not fetch word list from URL. {e}")
        return ()


def load_words(word_list: WordListConfig) -> List[str]:
    """Loads the initial candidate pool from the configured file or URL."""
    if os.path.exists(word_list.path):
        return load_word_list_from_file(word_list.path)
    if not word_list.url:
        raise FileNotFoundError(f"Word list not found at: {word_list.path}")
    words = load_word_list_from_url(word_list.url, word_list.path)
    if not words:
        raise WordListError(f"could not load a word list from {word_list.url}")
    return list(words)
