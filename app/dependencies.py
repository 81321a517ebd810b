import logging

from fastapi import Depends, Request

from app.config import Settings
from app.database import Base, build_engine, build_session_factory
from app.repositories.dynamodb import DynamoProductRepository
from app.repositories.product_repository import ProductRepository, SqlProductRepository
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> ProductRepository:
    """
    Build the product repository selected by STORE_BACKEND.

    Called once at startup; the repository (and the store client it wraps)
    is then shared by every request.

    Raises:
        ValueError: If STORE_BACKEND names an unknown backend
    """
    backend = settings.STORE_BACKEND.lower()

    if backend == "sql":
        engine = build_engine(settings.DATABASE_URL)

        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)

        return SqlProductRepository(build_session_factory(engine))

    if backend == "dynamodb":
        logger.info(f"Using DynamoDB table {settings.PRODUCTS_TABLE}")
        return DynamoProductRepository.from_settings(settings)

    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")


def get_repository(request: Request) -> ProductRepository:
    """Dependency returning the repository built during startup."""
    return request.app.state.repository


def get_product_service(
    repository: ProductRepository = Depends(get_repository)
) -> ProductService:
    return ProductService(repository)


async def get_raw_body(request: Request) -> bytes:
    """Dependency returning the undecoded request body."""
    return await request.body()
