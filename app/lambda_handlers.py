"""
AWS Lambda entry points, one per verb, for API Gateway proxy events.

The repository is built once per execution environment, at cold start, and
reused by every invocation that environment serves.
"""
import logging
from typing import Any, Dict

from app.config import get_settings
from app.dependencies import build_repository
from app.schemas.http import ProductRequest
from app.services.product_service import ProductService

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

repository = build_repository(settings)


def _service() -> ProductService:
    return ProductService(repository)


def create_product(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    return _service().create_product(ProductRequest.from_event(event)).to_event()


def get_product(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    return _service().get_product(ProductRequest.from_event(event)).to_event()


def update_product(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    return _service().update_product(ProductRequest.from_event(event)).to_event()


def delete_product(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    return _service().delete_product(ProductRequest.from_event(event)).to_event()


def list_products(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    return _service().list_products(ProductRequest.from_event(event)).to_event()
