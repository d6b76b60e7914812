# numwords/adapters/persistence/profile_registry.py
from typing import List, Mapping, Optional

import structlog

from numwords.core.domain.exceptions import LanguageNotFoundError
from numwords.core.domain.grammar import PROFILE_REGISTRY
from numwords.core.domain.grammar.base import GrammarProfile
from numwords.core.ports.profile_repository import IProfileRepository

logger = structlog.get_logger()


class InMemoryProfileRepository(IProfileRepository):
    """
    Serves profiles from the process-wide read-only registry.
    A different mapping can be injected (e.g. in tests).
    """

    def __init__(self, profiles: Optional[Mapping[str, GrammarProfile]] = None):
        self._profiles = PROFILE_REGISTRY if profiles is None else profiles

    def get(self, lang_code: str) -> GrammarProfile:
        profile = self._profiles.get(lang_code)
        if profile is None:
            logger.warning("profile_not_found", lang=lang_code)
            raise LanguageNotFoundError(lang_code)
        return profile

    def list_languages(self) -> List[str]:
        return sorted(self._profiles.keys())
