# model/words.py

"""
Recursion functions over strings, for enumerating words of an alphabet.

A breadth-first traversal starting at the empty word with `append_each`
lists all words in shortlex order: "", "a", "b", ..., "aa", "ab", ...
"""

from typing import Callable, List


def append_each(alphabet: str) -> Callable[[str], List[str]]:
    """Return a recursion function extending a word by each letter of `alphabet`."""
    letters = list(alphabet)

    def extend(word: str) -> List[str]:
        return [word + letter for letter in letters]

    return extend


def append_each_up_to(alphabet: str, max_length: int) -> Callable[[str], List[str]]:
    """Like `append_each`, but stops extending words of length `max_length`."""
    extend = append_each(alphabet)
    return lambda word: extend(word) if len(word) < max_length else []
