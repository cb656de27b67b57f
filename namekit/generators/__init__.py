#!/usr/bin/env python3
"""
Name Generators
===============
Syllable-based synthesis of place, person and creature names:
- fragments:       YAML-backed prefix/middle/suffix tables
- syllables:       heuristic syllable counter
- word_generator:  single word synthesis within a syllable budget
- name_composer:   multi-word names, prepositions, suffix options
- demonym:         place name -> inhabitant name
"""

from .entropy import (
    TrueRandom,
    SeededRandom,
    get_rng,
)
from .fragments import (
    FragmentTable,
    FragmentTables,
    load_fragment_tables,
    reload_fragments,
)
from .syllables import count_syllables
from .word_generator import (
    Category,
    WordGenerator,
    capitalize_first,
)
from .name_composer import (
    Gender,
    GenerationOptions,
    GenerationRequest,
    NameComposer,
    resolve_suffix_pool,
    resolve_syllable_targets,
)
from .demonym import to_demonym

__all__ = [
    'TrueRandom',
    'SeededRandom',
    'get_rng',
    'FragmentTable',
    'FragmentTables',
    'load_fragment_tables',
    'reload_fragments',
    'count_syllables',
    'Category',
    'WordGenerator',
    'capitalize_first',
    'Gender',
    'GenerationOptions',
    'GenerationRequest',
    'NameComposer',
    'resolve_suffix_pool',
    'resolve_syllable_targets',
    'to_demonym',
]
