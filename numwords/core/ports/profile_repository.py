# numwords/core/ports/profile_repository.py
from typing import List, Protocol

from numwords.core.domain.grammar.base import GrammarProfile


class IProfileRepository(Protocol):
    """
    Port for read-only access to grammar profiles.
    Implementations:
    - InMemoryProfileRepository (the process-wide registry)
    """

    def get(self, lang_code: str) -> GrammarProfile:
        """
        Returns the profile registered under `lang_code`.

        Raises:
            LanguageNotFoundError: If no profile is registered for the tag.
        """
        ...

    def list_languages(self) -> List[str]:
        """Returns the registered language tags."""
        ...
