# grammar\plurals.py
"""
grammar/plurals.py

Count classification functions (value -> CountClass).

Each profile references exactly one of these. They are kept apart from the
rendering code so plural rules can be tested in isolation.
"""

from __future__ import annotations

from numwords.core.domain.grammar.base import CountClass


def classify_singular_plural(count: int) -> CountClass:
    """English, German, Spanish, Bulgarian, Zulu: 1 is singular, everything else plural."""
    return CountClass.ONE if count == 1 else CountClass.OTHER


def classify_french(count: int) -> CountClass:
    """French treats 0 and 1 as singular ("zéro euro", "un euro")."""
    return CountClass.ONE if count in (0, 1) else CountClass.OTHER


def classify_east_slavic(count: int) -> CountClass:
    """
    Russian-style rules on the last two digits:
        11-14 (and the rest of the teens) -> MANY
        ends in 1 -> ONE
        ends in 2-4 -> FEW
        otherwise -> MANY
    """
    last_two = count % 100
    last = count % 10
    if 11 <= last_two <= 19:
        return CountClass.MANY
    if last == 1:
        return CountClass.ONE
    if 2 <= last <= 4:
        return CountClass.FEW
    return CountClass.MANY


def classify_polish(count: int) -> CountClass:
    """
    Polish: only exactly 1 is singular; 2-4 (not 12-14) -> FEW; else MANY.
    So 21 takes the genitive plural ("dwadzieścia jeden złotych").
    """
    if count == 1:
        return CountClass.ONE
    last_two = count % 100
    last = count % 10
    if 2 <= last <= 4 and not 12 <= last_two <= 14:
        return CountClass.FEW
    return CountClass.MANY


def classify_invariant(count: int) -> CountClass:
    """Korean nouns do not inflect for number."""
    return CountClass.OTHER
