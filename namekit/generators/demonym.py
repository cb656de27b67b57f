#!/usr/bin/env python3
"""Turn a place name into the name of its inhabitants (Narnia -> Narnian)."""


def to_demonym(name: str) -> str:
    """
    Rewrite the ending of a place name into its demonym form.

    Only the last one or two letters are inspected (case-insensitive);
    the rest of the name keeps its casing. "ia" must be checked before "a".
    """
    ending = name[-2:].lower()
    last = name[-1:].lower()

    if ending == 'ia':
        return name + 'n'
    if last == 'a':
        return name + 'n'
    if last == 'e':
        return name[:-1] + 'an'
    if last == 'y':
        return name[:-1] + 'ian'
    if last in ('o', 'i'):
        return name + 'an'
    return name + 'ian'
