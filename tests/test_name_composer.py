"""
Tests for Name Composition
==========================
Tests NameComposer, option parsing and suffix pool resolution in
namekit/generators/name_composer.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators import (
    Category,
    FragmentTable,
    FragmentTables,
    Gender,
    GenerationOptions,
    GenerationRequest,
    NameComposer,
    SeededRandom,
    load_fragment_tables,
    resolve_suffix_pool,
    resolve_syllable_targets,
)
from namekit.generators.fragments import blend_tables
from namekit.generators.name_composer import PLACE_GROUPS, PERSON_GROUPS


class ScriptedRandom:
    """Takes the first candidate and a fixed insertion index."""

    def __init__(self, index=None):
        self.index = index
        self.randint_calls = []

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        return a if self.index is None else self.index


def make_tables(prefixes=('bel',), middles=('a',), suffixes=('ton',)):
    """Tables with every suffix group holding the same fragments."""
    def table(groups):
        return FragmentTable(tuple(prefixes), tuple(middles),
                             {g: tuple(suffixes) for g in groups})
    tables = {
        'place': table(PLACE_GROUPS),
        'person': table(PERSON_GROUPS),
        'creature': table(('default',)),
    }
    tables['all'] = blend_tables(list(tables.values()))
    return FragmentTables(tables=tables, prepositions=('of', 'upon'))


class TestSyllableTargets:
    """Tests for resolve_syllable_targets."""

    def test_scalar_repeats(self):
        assert resolve_syllable_targets(2, 3) == [2, 2, 2]

    def test_short_list_padded(self):
        """The last target repeats."""
        assert resolve_syllable_targets([2], 3) == [2, 2, 2]
        assert resolve_syllable_targets([2, 3], 3) == [2, 3, 3]

    def test_long_list_truncated(self):
        assert resolve_syllable_targets([1, 2, 3], 2) == [1, 2]

    def test_empty_list_uses_default(self):
        assert resolve_syllable_targets([], 2) == [2, 2]

    def test_zero_words(self):
        assert resolve_syllable_targets([2, 3], 0) == []
        assert resolve_syllable_targets(2, -1) == []

    def test_tuple(self):
        assert resolve_syllable_targets((4, 1), 3) == [4, 1, 1]

    def test_float_scalar(self):
        """Non-int numbers are accepted as scalars."""
        assert resolve_syllable_targets(2.0, 2) == [2, 2]
        assert all(type(t) is int for t in resolve_syllable_targets(3.0, 2))

    def test_float_list(self):
        assert resolve_syllable_targets([2.0, 3.0], 3) == [2, 3, 3]


class TestOptions:
    """Tests for GenerationOptions."""

    def test_defaults(self):
        opts = GenerationOptions()
        assert opts.include_natural
        assert opts.include_artificial
        assert opts.include_generic
        assert not opts.include_continent
        assert not opts.include_prepositions
        assert opts.gender is Gender.ANY

    def test_from_dict_snake_case(self):
        opts = GenerationOptions.from_dict({'include_continent': True, 'gender': 'feminine'})
        assert opts.include_continent
        assert opts.gender is Gender.FEMININE

    def test_from_dict_camel_case(self):
        opts = GenerationOptions.from_dict({'includeNatural': False, 'includePrepositions': True})
        assert not opts.include_natural
        assert opts.include_prepositions

    def test_from_dict_empty(self):
        assert GenerationOptions.from_dict(None) == GenerationOptions()
        assert GenerationOptions.from_dict({}) == GenerationOptions()

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown option"):
            GenerationOptions.from_dict({'includeVolcanic': True})

    def test_unknown_gender(self):
        with pytest.raises(ValueError, match="Unknown gender"):
            GenerationOptions(gender='plural')

    def test_frozen(self):
        opts = GenerationOptions()
        with pytest.raises(AttributeError):
            opts.include_natural = False


class TestSuffixPool:
    """Tests for resolve_suffix_pool with the bundled data."""

    @pytest.fixture
    def tables(self):
        return load_fragment_tables()

    def test_place_defaults(self, tables):
        """Natural, artificial and generic by default; no continent."""
        place = tables.get('place')
        pool = resolve_suffix_pool(tables, 'place')
        assert pool == place.get_suffix_pool('natural', 'artificial', 'generic')

    def test_place_continent_only(self, tables):
        opts = GenerationOptions(include_natural=False, include_artificial=False,
                                 include_generic=False, include_continent=True)
        pool = resolve_suffix_pool(tables, 'place', opts)
        assert pool == list(tables.get('place').suffix_groups['continent'])

    def test_place_nothing_selected_falls_back(self, tables):
        """With every group off, all place suffixes are used."""
        opts = GenerationOptions(include_natural=False, include_artificial=False,
                                 include_generic=False, include_continent=False)
        pool = resolve_suffix_pool(tables, 'place', opts)
        assert pool
        assert pool == list(tables.get('place').suffixes)

    @pytest.mark.parametrize("gender", ['masculine', 'feminine', 'neutral'])
    def test_person_gender(self, tables, gender):
        pool = resolve_suffix_pool(tables, 'person', GenerationOptions(gender=gender))
        assert pool == list(tables.get('person').suffix_groups[gender])

    def test_person_any(self, tables):
        pool = resolve_suffix_pool(tables, 'person', GenerationOptions(gender='any'))
        assert pool == tables.get('person').get_suffix_pool('neutral', 'masculine', 'feminine')

    def test_creature_ignores_options(self, tables):
        opts = GenerationOptions(include_natural=False, gender='feminine')
        pool = resolve_suffix_pool(tables, 'creature', opts)
        assert pool == list(tables.get('creature').suffixes)

    def test_all_includes_person_and_creature(self, tables):
        pool = resolve_suffix_pool(tables, 'all')
        expected = (
            tables.get('place').get_suffix_pool('natural', 'artificial', 'generic')
            + tables.get('person').get_suffix_pool('neutral', 'masculine', 'feminine')
            + list(tables.get('creature').suffixes)
        )
        assert pool == expected

    def test_all_groups_appended_once(self, tables):
        """No subgroup is counted twice under 'all'."""
        pool = resolve_suffix_pool(tables, 'all')
        place_only = tables.get('place').get_suffix_pool('natural', 'artificial', 'generic')
        assert len(pool) == (len(place_only)
                             + len(tables.get('person').suffixes)
                             + len(tables.get('creature').suffixes))

    def test_all_with_places_off(self, tables):
        opts = GenerationOptions(include_natural=False, include_artificial=False,
                                 include_generic=False)
        pool = resolve_suffix_pool(tables, 'all', opts)
        assert pool == (tables.get('person').get_suffix_pool('neutral', 'masculine', 'feminine')
                        + list(tables.get('creature').suffixes))


class TestComposerScripted:
    """Composition with controlled fragments and randomness."""

    def test_single_word(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', 2) == 'Belton'

    def test_float_syllables(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', 2.0) == 'Belton'
        assert composer.generate('place', 3.0, words=2) == 'Belaton Belaton'

    def test_targets_repeat(self):
        """Missing targets repeat the last one."""
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', [2], words=3) == 'Belton Belton Belton'
        assert composer.generate('place', [3, 2], words=3) == 'Belaton Belton Belton'

    def test_hyphenated(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', 2, words=3, hyphenated=True) == 'Belton-Belton-Belton'

    def test_preposition_inserted(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        name = composer.generate('place', 2, words=2, options={'include_prepositions': True})
        assert name == 'Belton of Belton'

    def test_preposition_index_range(self):
        """The insertion index is drawn from 1..words-1."""
        rng = ScriptedRandom(index=2)
        composer = NameComposer(make_tables(), rng)
        name = composer.generate('place', 2, words=3, hyphenated=True,
                                 options={'include_prepositions': True})
        assert name == 'Belton-Belton-of-Belton'
        assert rng.randint_calls == [(1, 2)]

    def test_no_preposition_for_single_word(self):
        rng = ScriptedRandom()
        composer = NameComposer(make_tables(), rng)
        assert composer.generate('place', 2, options={'include_prepositions': True}) == 'Belton'
        assert rng.randint_calls == []

    def test_no_preposition_for_person(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        name = composer.generate('person', 2, words=2, options={'include_prepositions': True})
        assert name == 'Belton Belton'

    def test_demonym(self):
        composer = NameComposer(make_tables(prefixes=('narn',), suffixes=('ia',)), ScriptedRandom())
        assert composer.generate('place', 2, demonym=True) == 'Narnian'
        assert composer.generate('all', 2, demonym=True) == 'Narnian'

    def test_demonym_ignored_for_person_and_creature(self):
        composer = NameComposer(make_tables(prefixes=('narn',), suffixes=('ia',)), ScriptedRandom())
        assert composer.generate('person', 2, demonym=True) == 'Narnia'
        assert composer.generate('creature', 2, demonym=True) == 'Narnia'

    def test_demonym_after_join(self):
        """The demonym rewrites the end of the joined name."""
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', 2, words=2, hyphenated=True, demonym=True) == 'Belton-Beltonian'

    def test_zero_words(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        assert composer.generate('place', 2, words=0) == ''
        assert composer.generate('place', 2, words=0, demonym=True) == ''

    def test_request(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        request = GenerationRequest(category=Category.PLACE, syllables=[3, 2], words=2,
                                    hyphenated=True)
        assert composer.generate_request(request) == 'Belaton-Belton'

    def test_unknown_category(self):
        composer = NameComposer(make_tables(), ScriptedRandom())
        with pytest.raises(ValueError, match="Unknown category"):
            composer.generate('planet', 2)


class TestComposerBundled:
    """Randomized properties with the bundled data."""

    @pytest.fixture
    def composer(self):
        return NameComposer(load_fragment_tables(), SeededRandom(1234))

    @pytest.mark.parametrize("category", ['place', 'person', 'creature', 'all'])
    def test_every_word_capitalized(self, composer, category):
        for _ in range(50):
            name = composer.generate(category, [1, 3], words=3)
            words = name.split(' ')
            assert len(words) == 3
            for word in words:
                assert word[0].isupper()

    def test_preposition_never_first(self, composer):
        prepositions = set(load_fragment_tables().prepositions)
        for words in (2, 3):
            for _ in range(200):
                name = composer.generate('place', 2, words=words,
                                         options={'include_prepositions': True})
                parts = name.split(' ')
                assert len(parts) == words + 1
                assert parts[0] not in prepositions
                assert parts[0][0].isupper()
                assert sum(1 for p in parts if p in prepositions) >= 1
                assert sum(1 for p in parts if p[0].islower()) == 1

    def test_hyphen_only_separator(self, composer):
        """Hyphenated names never mix separators, prepositions included."""
        for _ in range(100):
            name = composer.generate('all', 2, words=3, hyphenated=True,
                                     options={'includePrepositions': True})
            assert ' ' not in name
            assert len(name.split('-')) == 4

    def test_place_all_groups_off(self, composer):
        opts = {'includeNatural': False, 'includeArtificial': False,
                'includeGeneric': False, 'includeContinent': False}
        for _ in range(50):
            assert composer.generate('place', 3, options=opts)

    def test_demonym_suffixes(self, composer):
        for _ in range(50):
            name = composer.generate('place', 2, demonym=True)
            assert name.endswith('n')
