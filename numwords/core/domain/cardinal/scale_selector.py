# cardinal\scale_selector.py
"""
cardinal/scale_selector.py

ScaleSelector: picks the inflected scale word for a count and decides
whether the count numeral is elided.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from numwords.core.domain.exceptions import MissingGrammarDataError
from numwords.core.domain.grammar.base import CountClass, GrammarProfile, ScaleDef

logger = structlog.get_logger()

# Order in which missing forms are substituted; ends at the singular.
_FALLBACK_ORDER = (CountClass.OTHER, CountClass.ONE)


@dataclass(frozen=True)
class ScaleChoice:
    count_class: CountClass
    word: str
    elide_numeral: bool
    numeral_class: Optional[str]


def lookup_form(forms: Mapping[CountClass, str], count_class: CountClass, what: str, lang: str) -> str:
    """
    Form for `count_class`, raising MissingGrammarDataError when absent.
    """
    form = forms.get(count_class)
    if not form:
        raise MissingGrammarDataError(f"{what} form for '{count_class.value}'", lang)
    return form


def lookup_form_with_fallback(forms: Mapping[CountClass, str], count_class: CountClass, what: str, lang: str) -> str:
    """
    Form for `count_class`; missing forms fall back to OTHER, then ONE.
    """
    try:
        return lookup_form(forms, count_class, what, lang)
    except MissingGrammarDataError as exc:
        for candidate in _FALLBACK_ORDER:
            form = forms.get(candidate)
            if form:
                logger.debug("grammar_form_fallback", lang=lang, missing=exc.what, used=candidate.value)
                return form
        raise


class ScaleSelector:
    def __init__(self, profile: GrammarProfile):
        self.profile = profile

    def select(self, count: int, scale: ScaleDef) -> ScaleChoice:
        if count <= 0:
            raise ValueError(f"Scale counts must be positive, got {count}")

        count_class = self.profile.classify(count)
        word = lookup_form_with_fallback(scale.names, count_class, f"scale 10^{scale.power}", self.profile.tag)
        return ScaleChoice(
            count_class=count_class,
            word=word,
            elide_numeral=scale.elides_one and count == 1,
            numeral_class=scale.noun_classes.get(count_class, scale.grammatical_class),
        )


__all__ = ["ScaleChoice", "ScaleSelector", "lookup_form", "lookup_form_with_fallback"]
