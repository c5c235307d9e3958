"""
This module contains classes for stemming purpose.
"""

import functools

from porterstem.rules import Context, SimplifiedContext


def stem(word: str) -> str:
    """
    Stem a single English word with the Porter algorithm.

    Words of length 1 or 2 are returned untouched. Anything else is stripped,
    lowercased and run through steps 1a to 5. Empty input gives "".
    """

    if type(word) != str:
        raise TypeError("word must be a string!")

    return Context(word).result


def _stem(word: str) -> str:
    return Context(word).result


class Stemmer:
    """
    English word stemmer.

    Porter, M.F. (1980) "An algorithm for suffix stripping". Program 14(3).
    @link https://tartarus.org/martin/PorterStemmer/
    """

    def __init__(self, cache: bool = True, cache_size: int = 100_000):

        # least recently used stems are evicted once cache_size is reached
        size = cache_size if cache else 0
        self._cache = functools.lru_cache(maxsize=size)(_stem)

    def stem(self, word: str) -> str:
        """
        Stem a word to its common stem form.
        """

        if type(word) != str:
            raise TypeError("word must be a string!")

        return self._cache(word)

    def context(self, word: str) -> SimplifiedContext:
        """
        Return simplified Context of the word.

        The second item lists (step, subject, result) for each step that
        rewrote the word.
        """

        if type(word) != str:
            raise TypeError("word must be a string!")

        t = Context(word)
        removals = [(r.step, r.subject, r.result) for r in t.removals]
        return t.result, removals
