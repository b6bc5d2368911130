"""Word pluralization backed by the pluralizer library."""

from typing import Optional, Union

import pluralizer

Number = Union[int, float]


class Pluralizer:
    """Count-aware singular/plural conversion of a word.

    A count of exactly 1 yields the singular form; any other count,
    including 0, yields the plural form. Words already in the requested
    form come back unchanged.
    """

    def __init__(self, inflector: Optional[pluralizer.Pluralizer] = None):
        self._inflector = inflector or pluralizer.Pluralizer()

    def singular(self, word: str) -> str:
        return self._inflector.singular(word)

    def plural(self, word: str) -> str:
        return self._inflector.plural(word)

    def pluralize(self, word: str, count: Number, inclusive: bool = False) -> str:
        """Return the form of ``word`` matching ``count``.

        Args:
            word: The word to pluralize. Blank words are returned as is.
            count: Number of items.
            inclusive: Prefix the count to the returned string.

        Returns:
            The singular or plural word, optionally prefixed with the count.
        """
        if word.strip():
            word = self.singular(word) if count == 1 else self.plural(word)
        if inclusive:
            return f"{count} {word}"
        return word
