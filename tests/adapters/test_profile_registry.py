# tests\adapters\test_profile_registry.py
import pytest

from numwords.adapters.persistence.profile_registry import InMemoryProfileRepository
from numwords.core.domain.exceptions import LanguageNotFoundError
from numwords.core.domain.grammar import get_profile
from numwords.core.domain.models import Lang


class TestInMemoryProfileRepository:
    def test_serves_registered_profiles(self):
        repo = InMemoryProfileRepository()
        assert repo.get("ru") is get_profile("ru")

    def test_lists_every_language(self):
        repo = InMemoryProfileRepository()
        assert set(repo.list_languages()) == set(Lang.available_codes())

    def test_unknown_language(self):
        with pytest.raises(LanguageNotFoundError) as excinfo:
            InMemoryProfileRepository().get("xx")
        assert excinfo.value.lang_code == "xx"

    def test_injected_mapping(self):
        """A custom mapping replaces the global registry."""
        repo = InMemoryProfileRepository({"en": get_profile("en")})
        assert repo.list_languages() == ["en"]
        with pytest.raises(LanguageNotFoundError):
            repo.get("ru")
