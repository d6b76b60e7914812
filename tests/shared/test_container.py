# tests\shared\test_container.py
from numwords.adapters.normalizer import DecimalNormalizer
from numwords.adapters.persistence.profile_registry import InMemoryProfileRepository
from numwords.core.use_cases.convert_number import ConvertNumber


class TestContainer:
    def test_adapters_are_singletons(self, container):
        assert isinstance(container.profile_repository(), InMemoryProfileRepository)
        assert container.profile_repository() is container.profile_repository()
        assert isinstance(container.normalizer(), DecimalNormalizer)

    def test_use_case_is_a_factory(self, container):
        """Each call builds a new use case sharing the same adapters."""
        first = container.convert_number_use_case()
        second = container.convert_number_use_case()

        assert isinstance(first, ConvertNumber)
        assert first is not second
        assert first.repository is second.repository

    def test_override(self, container, mock_repo):
        with container.profile_repository.override(mock_repo):
            assert container.convert_number_use_case().repository is mock_repo

    def test_config_reaches_use_case(self, container):
        container.config.DEFAULT_FALLBACK.override("n/a")
        container.config.ROUND_CURRENCY.override(True)

        use_case = container.convert_number_use_case()

        assert use_case.default_fallback == "n/a"
        assert use_case.round_currency is True
