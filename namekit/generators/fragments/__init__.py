#!/usr/bin/env python3
"""
Fragment Table Loader
=====================
Loads prefix/middle/suffix fragments from YAML files for the name generators.

Usage:
    from namekit.generators.fragments import load_fragment_tables

    tables = load_fragment_tables()
    place = tables.get('place')
    pool = place.get_suffix_pool('natural', 'generic')
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, List, Tuple, Any
from dataclasses import dataclass, field
from functools import lru_cache

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

FRAGMENTS_DIR = Path(__file__).parent

# Concrete categories backed by a YAML file, in blend order
CATEGORY_FILES = {
    'place': 'place.yaml',
    'person': 'person.yaml',
    'creature': 'creature.yaml',
}

BLEND_CATEGORY = 'all'


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class FragmentTable:
    """Fragment pools for one category."""
    prefixes: Tuple[str, ...]
    middles: Tuple[str, ...]
    suffix_groups: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    @property
    def suffixes(self) -> Tuple[str, ...]:
        """Default suffix pool: every group concatenated in file order."""
        pool = []
        for group in self.suffix_groups.values():
            pool.extend(group)
        return tuple(pool)

    @property
    def group_names(self) -> List[str]:
        return list(self.suffix_groups.keys())

    def get_suffix_pool(self, *groups: str) -> List[str]:
        """Get combined suffix list from the named groups."""
        pool = []
        for name in groups:
            if name not in self.suffix_groups:
                raise ValueError(
                    f"Unknown suffix group '{name}'. "
                    f"Available groups: {', '.join(self.group_names)}"
                )
            pool.extend(self.suffix_groups[name])
        return pool


@dataclass(frozen=True)
class FragmentTables:
    """All fragment tables plus the preposition list."""
    tables: Dict[str, FragmentTable]
    prepositions: Tuple[str, ...]

    def get(self, category: str) -> FragmentTable:
        table = self.tables.get(category)
        if table is None:
            available = ', '.join(self.categories())
            raise ValueError(
                f"Unknown category '{category}'. Available categories: {available}"
            )
        return table

    def categories(self) -> List[str]:
        return list(self.tables.keys())

    def stats(self) -> Dict[str, Dict[str, Any]]:
        """Pool sizes per category."""
        return {
            name: {
                'prefixes': len(table.prefixes),
                'middles': len(table.middles),
                'suffixes': len(table.suffixes),
                'groups': {g: len(s) for g, s in table.suffix_groups.items()},
            }
            for name, table in self.tables.items()
        }


# =============================================================================
# Loading
# =============================================================================

def _load_yaml(filename: str, directory: Path = None) -> Dict[str, Any]:
    """Load a YAML file from the fragments directory."""
    filepath = (directory or FRAGMENTS_DIR) / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Fragment file not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require_pool(values, context: str) -> Tuple[str, ...]:
    """Validate a fragment pool: a non-empty list of non-empty strings."""
    if not isinstance(values, list) or not values:
        raise ValueError(f"{context} must be a non-empty list")
    for value in values:
        if not isinstance(value, str) or not value:
            raise ValueError(f"{context} contains an invalid fragment: {value!r}")
    return tuple(values)


def parse_table(raw: Dict[str, Any], source: str) -> FragmentTable:
    """Build a validated FragmentTable from raw YAML data."""
    suffixes = raw.get('suffixes')
    if isinstance(suffixes, list):
        suffixes = {'default': suffixes}
    if not isinstance(suffixes, dict) or not suffixes:
        raise ValueError(f"{source}.suffixes must define at least one group")

    groups = {
        name: _require_pool(pool, f"{source}.suffixes.{name}")
        for name, pool in suffixes.items()
    }

    return FragmentTable(
        prefixes=_require_pool(raw.get('prefixes'), f"{source}.prefixes"),
        middles=_require_pool(raw.get('middles'), f"{source}.middles"),
        suffix_groups=groups,
    )


def blend_tables(tables: List[FragmentTable]) -> FragmentTable:
    """Concatenate several tables into one (used for the 'all' category)."""
    prefixes, middles, suffixes = [], [], []
    for table in tables:
        prefixes.extend(table.prefixes)
        middles.extend(table.middles)
        suffixes.extend(table.suffixes)
    return FragmentTable(
        prefixes=tuple(prefixes),
        middles=tuple(middles),
        suffix_groups={'default': tuple(suffixes)},
    )


def build_fragment_tables(directory: Path = None) -> FragmentTables:
    """Load and validate every fragment file from a directory."""
    tables = {}
    for category, filename in CATEGORY_FILES.items():
        tables[category] = parse_table(_load_yaml(filename, directory), filename)

    tables[BLEND_CATEGORY] = blend_tables(list(tables.values()))

    raw = _load_yaml('prepositions.yaml', directory)
    prepositions = _require_pool(raw.get('place'), 'prepositions.yaml.place')

    logger.debug(
        "Loaded fragment tables: %s",
        ', '.join(f"{name}={len(t.prefixes)}/{len(t.middles)}/{len(t.suffixes)}"
                  for name, t in tables.items()),
    )
    return FragmentTables(tables=tables, prepositions=prepositions)


@lru_cache(maxsize=1)
def load_fragment_tables() -> FragmentTables:
    """Load the bundled fragment tables (cached)."""
    return build_fragment_tables()


def reload_fragments():
    """Clear cached tables and reload from disk."""
    load_fragment_tables.cache_clear()


__all__ = [
    'FragmentTable',
    'FragmentTables',
    'FRAGMENTS_DIR',
    'CATEGORY_FILES',
    'BLEND_CATEGORY',
    'parse_table',
    'blend_tables',
    'build_fragment_tables',
    'load_fragment_tables',
    'reload_fragments',
]
