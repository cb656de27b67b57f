#!/usr/bin/env python3
"""
Name Composer
=============
Composes full names from one or more synthesized words.

Handles:
- Per-word syllable targets (last target repeats for extra words)
- Suffix pool selection from category options (gender, place groups)
- Preposition injection for multi-word place names
- Hyphenated or space-separated joining
- Demonym conversion for place names

Usage:
    composer = NameComposer()
    composer.generate('place', [2, 3], words=2, demonym=True)
    composer.generate('person', 2, options={'gender': 'feminine'})
"""

import logging
import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .demonym import to_demonym
from .entropy import get_rng
from .fragments import FragmentTables, load_fragment_tables
from .word_generator import Category, WordGenerator

logger = logging.getLogger(__name__)

# Used when an empty list of syllable targets is supplied
DEFAULT_SYLLABLES = 2

PLACE_GROUPS = ('natural', 'artificial', 'generic', 'continent')
PERSON_GROUPS = ('neutral', 'masculine', 'feminine')


class Gender(Enum):
    """Suffix flavour for person names."""
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTRAL = "neutral"
    ANY = "any"

    @classmethod
    def parse(cls, value: Union['Gender', str]) -> 'Gender':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ', '.join(g.value for g in cls)
            raise ValueError(
                f"Unknown gender '{value}'. Available: {available}"
            ) from None


# =============================================================================
# Request Types
# =============================================================================

# camelCase option names accepted from external callers
_OPTION_ALIASES = {
    'includeNatural': 'include_natural',
    'includeArtificial': 'include_artificial',
    'includeGeneric': 'include_generic',
    'includeContinent': 'include_continent',
    'includePrepositions': 'include_prepositions',
}


@dataclass(frozen=True)
class GenerationOptions:
    """Category-dependent toggles for one generation call."""
    include_natural: bool = True
    include_artificial: bool = True
    include_generic: bool = True
    include_continent: bool = False
    include_prepositions: bool = False
    gender: Gender = Gender.ANY

    def __post_init__(self):
        object.__setattr__(self, 'gender', Gender.parse(self.gender))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'GenerationOptions':
        """Build options from a dict with snake_case or camelCase keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(
                    f"Unknown option '{key}'. Available options: {', '.join(sorted(known))}"
                )
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to compose one name."""
    category: Union[Category, str]
    syllables: Union[int, Sequence[int]] = DEFAULT_SYLLABLES
    words: int = 1
    hyphenated: bool = False
    demonym: bool = False
    options: GenerationOptions = field(default_factory=GenerationOptions)


# =============================================================================
# Resolution Helpers
# =============================================================================

def resolve_syllable_targets(syllables: Union[int, Sequence[int]], words: int) -> List[int]:
    """
    Expand syllable targets to one per word.

    A scalar is repeated; a short list is padded with its last value.
    Non-integer numbers are truncated to int.
    """
    if words <= 0:
        return []
    if isinstance(syllables, numbers.Number):
        targets = [int(syllables)]
    else:
        targets = [int(s) for s in syllables] or [DEFAULT_SYLLABLES]
    targets = targets[:words]
    return targets + [targets[-1]] * (words - len(targets))


def _person_suffixes(tables: FragmentTables, options: GenerationOptions) -> List[str]:
    person = tables.get(Category.PERSON.value)
    if options.gender is Gender.ANY:
        return person.get_suffix_pool(*PERSON_GROUPS)
    return person.get_suffix_pool(options.gender.value)


def _selected_place_groups(options: GenerationOptions) -> List[str]:
    toggles = (
        options.include_natural,
        options.include_artificial,
        options.include_generic,
        options.include_continent,
    )
    return [group for group, enabled in zip(PLACE_GROUPS, toggles) if enabled]


def _place_suffixes(tables: FragmentTables, options: GenerationOptions) -> List[str]:
    place = tables.get(Category.PLACE.value)
    pool = place.get_suffix_pool(*_selected_place_groups(options))
    if not pool:
        logger.debug("No place suffix groups selected, using all place suffixes")
        pool = list(place.suffixes)
    return pool


def _blend_suffixes(tables: FragmentTables, options: GenerationOptions) -> List[str]:
    pool = tables.get(Category.PLACE.value).get_suffix_pool(*_selected_place_groups(options))
    pool.extend(tables.get(Category.PERSON.value).get_suffix_pool(*PERSON_GROUPS))
    pool.extend(tables.get(Category.CREATURE.value).suffixes)
    if not pool:
        logger.debug("Blended suffix pool is empty, using all suffixes")
        pool = list(tables.get(Category.ALL.value).suffixes)
    return pool


def _creature_suffixes(tables: FragmentTables, options: GenerationOptions) -> List[str]:
    return list(tables.get(Category.CREATURE.value).suffixes)


_SUFFIX_POLICIES: Dict[Category, Callable[[FragmentTables, GenerationOptions], List[str]]] = {
    Category.PLACE: _place_suffixes,
    Category.PERSON: _person_suffixes,
    Category.CREATURE: _creature_suffixes,
    Category.ALL: _blend_suffixes,
}


def resolve_suffix_pool(tables: FragmentTables,
                        category: Union[Category, str],
                        options: GenerationOptions = None) -> List[str]:
    """Effective suffix pool for a category and its options. Never empty."""
    category = Category.parse(category)
    return _SUFFIX_POLICIES[category](tables, options or GenerationOptions())


# =============================================================================
# Composer
# =============================================================================

class NameComposer:
    """
    Composes single- and multi-word names.

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
        self.word_generator = WordGenerator(self.tables, self.rng)

    def generate(self,
                 category: Union[Category, str],
                 syllables: Union[int, Sequence[int]] = DEFAULT_SYLLABLES,
                 words: int = 1,
                 hyphenated: bool = False,
                 demonym: bool = False,
                 options: Union[GenerationOptions, Dict[str, Any]] = None) -> str:
        """
        Generate one name.

        Parameters
        ----------
        category : Category or str
            'place', 'person', 'creature' or 'all'
        syllables : int or sequence of int
            Syllable target per word; the last value repeats
        words : int
            Number of words (0 or less gives an empty string)
        hyphenated : bool
            Join words with '-' instead of a space
        demonym : bool
            Convert to the inhabitant form (place and all only)
        options : GenerationOptions or dict, optional
            Suffix group toggles, gender and preposition injection

        Returns
        -------
        str
            The composed name
        """
        category = Category.parse(category)
        if not isinstance(options, GenerationOptions):
            options = GenerationOptions.from_dict(options)

        targets = resolve_syllable_targets(syllables, words)
        pool = resolve_suffix_pool(self.tables, category, options)

        parts = [
            self.word_generator.generate_word(category, target, pool)
            for target in targets
        ]
        if not parts:
            return ''

        is_place = category in (Category.PLACE, Category.ALL)
        if is_place and options.include_prepositions and len(parts) > 1:
            preposition = self.rng.choice(self.tables.prepositions)
            parts.insert(self.rng.randint(1, len(parts) - 1), preposition)

        name = ('-' if hyphenated else ' ').join(parts)

        if demonym and is_place:
            return to_demonym(name)
        return name

    def generate_request(self, request: GenerationRequest) -> str:
        """Generate one name from a GenerationRequest."""
        return self.generate(
            request.category,
            request.syllables,
            words=request.words,
            hyphenated=request.hyphenated,
            demonym=request.demonym,
            options=request.options,
        )
