#!/usr/bin/env python3
"""
Syllable Estimation
===================
Heuristic syllable counter used to fit fragments into a syllable budget.

This is an approximation, not a phonetic model. Fragment selection depends
on its exact output, so the stripping order below must stay as it is:
    1. drop a trailing "Xes", "ed" or silent "Xe" (X = consonant other than l)
    2. drop a leading "y"
    3. count runs of one or two vowels
"""

import re
from functools import lru_cache

_INFLECTION_RE = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
_LEADING_Y_RE = re.compile(r'^y')
_VOWEL_RUN_RE = re.compile(r'[aeiouy]{1,2}')


@lru_cache(maxsize=4096)
def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a word or fragment.

    Never returns less than 1.

    >>> count_syllables("haven")
    2
    >>> count_syllables("gate")
    1
    """
    word = word.lower()
    word = _INFLECTION_RE.sub('', word, count=1)
    word = _LEADING_Y_RE.sub('', word, count=1)
    matches = _VOWEL_RUN_RE.findall(word)
    return len(matches) if matches else 1
