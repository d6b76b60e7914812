# tests\conftest.py
import pytest
from unittest.mock import MagicMock

from numwords.shared.container import Container
from numwords.core.domain.cardinal.integer_converter import IntegerConverter
from numwords.core.domain.grammar import get_profile
from numwords.core.ports.number_normalizer import INumberNormalizer
from numwords.core.ports.profile_repository import IProfileRepository


@pytest.fixture
def profile_for():
    """Returns a lookup for registered grammar profiles by tag."""
    return get_profile


@pytest.fixture
def converter_for():
    """Returns a factory building an IntegerConverter for a language tag."""
    def _build(tag: str) -> IntegerConverter:
        return IntegerConverter(get_profile(tag))
    return _build


@pytest.fixture
def english(converter_for):
    return converter_for("en")


@pytest.fixture
def russian(converter_for):
    return converter_for("ru")


@pytest.fixture(scope="function")
def mock_repo():
    """Returns a mock Profile Repository serving the real English profile."""
    repo = MagicMock(spec=IProfileRepository)
    repo.get.return_value = get_profile("en")
    repo.list_languages.return_value = ["en"]
    return repo


@pytest.fixture(scope="function")
def mock_normalizer():
    """Returns a mock Normalizer; tests set return values or side effects."""
    return MagicMock(spec=INumberNormalizer)


@pytest.fixture(scope="function")
def container():
    """
    Sets up the Dependency Injection Container for testing.
    Tests override providers as needed; overrides are reset afterwards.
    """
    container = Container()

    yield container

    container.reset_override()


@pytest.fixture
def use_case(container):
    """The real ConvertNumber use case wired with the real adapters."""
    return container.convert_number_use_case()
