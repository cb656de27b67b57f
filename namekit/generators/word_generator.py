#!/usr/bin/env python3
"""
Word Synthesizer
================
Builds a single invented word from a prefix, zero or more middles and a
suffix, fitted to a target syllable count.

Usage:
    gen = WordGenerator()
    gen.generate_word('place', 3)            # e.g. "Belarwood"
    gen.generate_word('person', 2, ['a'])    # custom suffix pool
"""

from enum import Enum
from typing import Optional, Sequence, Union

from .entropy import get_rng
from .fragments import FragmentTables, load_fragment_tables
from .syllables import count_syllables


class Category(Enum):
    """Name categories. ALL blends the pools of the other three."""
    PLACE = "place"
    PERSON = "person"
    CREATURE = "creature"
    ALL = "all"

    @classmethod
    def parse(cls, value: Union['Category', str]) -> 'Category':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ', '.join(c.value for c in cls)
            raise ValueError(
                f"Unknown category '{value}'. Available categories: {available}"
            ) from None


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return text[:1].upper() + text[1:]


class WordGenerator:
    """
    Synthesizes single words from the fragment tables.

    Parameters
    ----------
    tables : FragmentTables, optional
        Fragment data (defaults to the bundled tables)
    rng : random source, optional
        Object with choice()/randint() (defaults to the shared TrueRandom)
    """

    def __init__(self, tables: FragmentTables = None, rng=None):
        self.tables = tables or load_fragment_tables()
        self.rng = rng or get_rng()

    def generate_word(self,
                      category: Union[Category, str],
                      syllables: int,
                      suffixes: Optional[Sequence[str]] = None) -> str:
        """
        Generate one capitalized word.

        Parameters
        ----------
        category : Category or str
            Fragment table to draw prefixes and middles from
        syllables : int
            Target syllable count (values below 1 are treated as 1)
        suffixes : sequence, optional
            Suffix pool overriding the category default (ignored if empty)

        Returns
        -------
        str
            The word. A prefix that already meets the target is returned on
            its own, even if it overshoots.
        """
        table = self.tables.get(Category.parse(category).value)
        pool = list(suffixes) if suffixes else list(table.suffixes)
        target = max(1, syllables)

        prefix = self.rng.choice(table.prefixes)
        prefix_syllables = count_syllables(prefix)
        if prefix_syllables >= target:
            return capitalize_first(prefix)

        remaining = target - prefix_syllables
        fitting = [s for s in pool if count_syllables(s) <= remaining]
        suffix = self.rng.choice(fitting or pool)

        middles_needed = max(0, target - prefix_syllables - count_syllables(suffix))
        middles = [self.rng.choice(table.middles) for _ in range(middles_needed)]

        return capitalize_first(prefix + ''.join(middles) + suffix)
