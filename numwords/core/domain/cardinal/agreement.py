# cardinal\agreement.py
"""
cardinal/agreement.py

AgreementResolver: class-specific numeral forms and concord prefixes.

Both lookups are total: an unknown or unspecified class yields the
unmarked form (units table) and an empty prefix, never an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from numwords.core.domain.grammar.base import GrammarProfile


class AgreementResolver:
    def __init__(self, profile: GrammarProfile):
        self.profile = profile

    def resolve_class(self, hint: Optional[Union[str, Enum]]) -> Optional[str]:
        """Map a caller hint (Gender enum, raw class name or None) to a profile class."""
        if hint is None:
            return self.profile.default_class
        if isinstance(hint, Enum):
            return str(hint.value)
        return str(hint)

    def has_form(self, value: int, agreement_class: Optional[str]) -> bool:
        if agreement_class is None:
            return False
        return value in self.profile.agreement.get(agreement_class, {})

    def form(self, value: int, agreement_class: Optional[str]) -> str:
        """
        Surface form of a small numeral under `agreement_class`.

            ru: form(1, "feminine") -> "одна"
            de: form(1, "attributive") -> "ein"
            en: form(1, "feminine") -> "one"
        """
        if agreement_class is not None:
            forms = self.profile.agreement.get(agreement_class)
            if forms and value in forms:
                return forms[value]
        return self.profile.units[value]

    def concord_prefix(self, value: int, agreement_class: Optional[str]) -> str:
        """First concord band containing `value`, or '' when the class has none."""
        if agreement_class is None:
            return ""
        for band in self.profile.concord.get(agreement_class, ()):
            if band.contains(value):
                return band.prefix
        return ""


__all__ = ["AgreementResolver"]
