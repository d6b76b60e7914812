from dependency_injector import containers, providers

from numwords.shared.config import settings
from numwords.adapters.normalizer import DecimalNormalizer
from numwords.adapters.persistence.profile_registry import InMemoryProfileRepository

from numwords.core.use_cases.convert_number import ConvertNumber

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the library.
    """

    # 1. Configuration
    # Loaded from the pydantic settings; wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Adapters

    # Profiles are immutable and registered once, so one repository is shared.
    profile_repository = providers.Singleton(
        InMemoryProfileRepository
    )

    normalizer = providers.Singleton(
        DecimalNormalizer
    )

    # 3. Use Cases

    # Factory: stateless logic, Singleton dependencies injected.
    convert_number_use_case = providers.Factory(
        ConvertNumber,
        repository=profile_repository,
        normalizer=normalizer,
        default_fallback=config.DEFAULT_FALLBACK,
        round_currency=config.ROUND_CURRENCY,
    )

# Instantiate the container for global access (e.g. by numwords.convert)
container = Container()
