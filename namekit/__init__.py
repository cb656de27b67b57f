#!/usr/bin/env python3
"""
NameKit - Procedural Name Generator
===================================

Invents pronounceable names for places, people and creatures by joining
prefix, middle and suffix fragments to a target syllable count.

Quick Start
-----------
    from namekit import NameKit

    kit = NameKit()

    # Ten two-syllable place names
    names = kit.generate(count=10, category="place", syllables=2)

    # Two-word feminine person names
    names = kit.generate(count=5, category="person", syllables=[2, 3],
                         words=2, gender="feminine")

    # Inhabitants of a hyphenated place
    names = kit.generate(count=3, words=2, hyphenated=True, demonym=True)

Modules
-------
    namekit.generators - Fragment tables, syllable counter, word and name synthesis
    namekit.favorites  - SQLite store for saved names
    namekit.settings   - YAML application settings

CLI Usage
---------
    python -m namekit generate -n 10 --type place -s 2 3 -w 2
    python -m namekit demonym Narnia
    python -m namekit list
"""

__version__ = "0.2.0"
__author__ = "NameKit"

from typing import List, Optional, Sequence, Union

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import settings

from .generators import (
    Category,
    Gender,
    GenerationOptions,
    GenerationRequest,
    NameComposer,
    WordGenerator,
    FragmentTables,
    load_fragment_tables,
    count_syllables,
    to_demonym,
    get_rng,
)
from .favorites import (
    Favorite,
    FavoritesDB,
    get_favorites_db,
)


# =============================================================================
# Unified Interface
# =============================================================================

class NameKit:
    """
    Unified interface for name generation and favorites.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible output (default: true randomness)
    tables : FragmentTables, optional
        Custom fragment tables (default: bundled YAML data)
    db_path : str, optional
        Favorites database path (default: favorites.db_path setting)
    """

    def __init__(self, seed: int = None, tables: FragmentTables = None, db_path: str = None):
        self.rng = get_rng(seed)
        self.tables = tables or load_fragment_tables()
        self.composer = NameComposer(self.tables, self.rng)
        self._db_path = db_path
        self._db = None

    @property
    def db(self) -> FavoritesDB:
        if self._db is None:
            self._db = FavoritesDB(self._db_path) if self._db_path else get_favorites_db()
        return self._db

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate_one(self,
                     category: Union[Category, str] = "place",
                     syllables: Union[int, Sequence[int]] = 2,
                     words: int = 1,
                     hyphenated: bool = False,
                     demonym: bool = False,
                     **options) -> str:
        """Generate a single name. Extra keyword arguments are GenerationOptions."""
        return self.composer.generate(
            category, syllables,
            words=words,
            hyphenated=hyphenated,
            demonym=demonym,
            options=GenerationOptions.from_dict(options),
        )

    def generate(self,
                 count: int = 10,
                 category: Union[Category, str] = "place",
                 syllables: Union[int, Sequence[int]] = 2,
                 words: int = 1,
                 hyphenated: bool = False,
                 demonym: bool = False,
                 **options) -> List[str]:
        """
        Generate a batch of names.

        Every name is an independent draw; duplicates are possible.

        Parameters
        ----------
        count : int
            Number of names
        category : str
            'place', 'person', 'creature' or 'all'
        syllables : int or list of int
            Syllables per word (last value repeats)
        words : int
            Words per name
        hyphenated : bool
            Join words with hyphens
        demonym : bool
            Return inhabitant names (place/all)
        **options
            include_natural, include_artificial, include_generic,
            include_continent, include_prepositions, gender

        Returns
        -------
        list[str]
        """
        request = GenerationRequest(
            category=Category.parse(category),
            syllables=syllables,
            words=words,
            hyphenated=hyphenated,
            demonym=demonym,
            options=GenerationOptions.from_dict(options),
        )
        return [self.composer.generate_request(request) for _ in range(max(0, count))]

    def demonym(self, name: str) -> str:
        """Convert a place name to its inhabitant form."""
        return to_demonym(name)

    def count_syllables(self, word: str) -> int:
        """Estimate syllables in a word."""
        return count_syllables(word)

    # -------------------------------------------------------------------------
    # Favorites
    # -------------------------------------------------------------------------

    def save(self, name: str, category: str = None, note: str = None) -> Optional[int]:
        """Save a name to favorites. Returns None if it was already saved."""
        return self.db.add(name, category=category, note=note)

    def remove(self, name: str) -> bool:
        """Remove a name from favorites."""
        return self.db.remove(name)

    def favorites(self, category: str = None, limit: int = None) -> List[Favorite]:
        """List saved names."""
        return self.db.list(category=category, limit=limit)


__all__ = [
    '__version__',
    'NameKit',
    'Category',
    'Gender',
    'GenerationOptions',
    'GenerationRequest',
    'NameComposer',
    'WordGenerator',
    'FragmentTables',
    'load_fragment_tables',
    'count_syllables',
    'to_demonym',
    'Favorite',
    'FavoritesDB',
    'get_favorites_db',
]
