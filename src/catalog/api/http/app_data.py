from dataclasses import dataclass

from loguru import logger

from src.catalog.core.services import DbSessionService, ProductService
from src.catalog.entities.service.product import (
    InMemoryProductRepository,
    ProductRepository,
    SqlProductRepository,
)
from src.catalog.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    product_repository: ProductRepository
    product_service: ProductService
    database_service: DbSessionService | None = None

    @classmethod
    def from_repository(
        cls,
        repository: ProductRepository,
        database_service: DbSessionService | None = None,
    ) -> "ApplicationDependencies":
        return cls(
            product_repository=repository,
            product_service=ProductService(repository),
            database_service=database_service,
        )

    def close(self) -> None:
        if self.database_service is not None:
            self.database_service.dispose()


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Create the product store selected by ``database.backend``."""
    if config.database.backend == "sql":
        database_service = DbSessionService(config.database)
        database_service.create_all()
        repository: ProductRepository = SqlProductRepository(database_service)
        logger.info("Using SQL product store at {}", config.database.url)
        return ApplicationDependencies.from_repository(repository, database_service)

    logger.info("Using in-memory product store")
    return ApplicationDependencies.from_repository(InMemoryProductRepository())
