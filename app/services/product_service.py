import json
import logging
import math
import uuid
from typing import Any, Callable, Optional

from fastapi import status

from app.repositories.product_repository import ProductRepository
from app.schemas.http import HandlerResponse, ProductRequest
from app.schemas.product import validate_product
from app.services.outcomes import DecodeFailure, Failure, NotFound, classify

logger = logging.getLogger(__name__)


def _new_product_id() -> str:
    return str(uuid.uuid4())


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _decode_body(body: Any) -> Any:
    """
    Decode a raw JSON body, returning a DecodeFailure instead of raising.

    Only RFC 8259 JSON is accepted: NaN, Infinity and float literals that
    overflow are decode failures. A missing body decodes as JSON null.
    """
    if body is None:
        return None

    try:
        return json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float
        )
    except (ValueError, TypeError) as e:
        return DecodeFailure(message=str(e))


class ProductService:
    """
    Request handlers for the product resource.

    Every handler runs its steps in order and stops at the first failure
    outcome, which is mapped to a response by classify(). Each handler
    performs at most one store mutation:

    - create: decode -> validate -> mint productId -> put
    - get:    get (absent -> 404)
    - update: get (existence check) -> decode -> validate -> put with path id
    - delete: get (existence check) -> delete
    - list:   scan_all

    Store errors are not caught; they propagate to the caller.
    """

    def __init__(
        self,
        repository: ProductRepository,
        id_factory: Optional[Callable[[], str]] = None
    ):
        self.repository = repository
        self.id_factory = id_factory or _new_product_id

    def create_product(self, request: ProductRequest) -> HandlerResponse:
        """Create a product from the request body under a freshly minted productId."""
        payload = _decode_body(request.body)
        if isinstance(payload, DecodeFailure):
            return self._failure("create", payload)

        invalid = validate_product(payload)
        if invalid:
            return self._failure("create", invalid)

        product = {**payload, ProductRepository.KEY: self.id_factory()}
        self.repository.put(product)

        logger.info(f"Product {product[ProductRepository.KEY]} created")

        return HandlerResponse(
            status_code=status.HTTP_201_CREATED,
            body=json.dumps(product, indent=2)
        )

    def get_product(self, request: ProductRequest) -> HandlerResponse:
        product_id = request.product_id

        product = self.repository.get(product_id)
        if product is None:
            return self._failure("get", NotFound(product_id))

        return HandlerResponse(status_code=status.HTTP_200_OK, body=json.dumps(product))

    def update_product(self, request: ProductRequest) -> HandlerResponse:
        """
        Replace a product's fields with the request body.

        This is a full replacement: fields missing from the new body are
        dropped, and any productId in the body is ignored in favour of the
        path id. Concurrent updates are last-writer-wins.
        """
        product_id = request.product_id

        if self.repository.get(product_id) is None:
            return self._failure("update", NotFound(product_id))

        payload = _decode_body(request.body)
        if isinstance(payload, DecodeFailure):
            return self._failure("update", payload)

        invalid = validate_product(payload)
        if invalid:
            return self._failure("update", invalid)

        product_body = {**payload, ProductRepository.KEY: product_id}
        self.repository.put(product_body)

        logger.info(f"Product {product_id} updated")

        return HandlerResponse(
            status_code=status.HTTP_200_OK,
            body=json.dumps({"productBody": product_body})
        )

    def delete_product(self, request: ProductRequest) -> HandlerResponse:
        product_id = request.product_id

        if self.repository.get(product_id) is None:
            return self._failure("delete", NotFound(product_id))

        self.repository.delete(product_id)

        logger.info(f"Product {product_id} deleted")

        return HandlerResponse(status_code=status.HTTP_204_NO_CONTENT, body="")

    def list_products(self, request: ProductRequest) -> HandlerResponse:
        products = self.repository.scan_all()
        return HandlerResponse(status_code=status.HTTP_200_OK, body=json.dumps(products))

    def _failure(self, verb: str, failure: Failure) -> HandlerResponse:
        status_code, body = classify(failure)
        logger.warning(f"{verb} rejected with {status_code}: {type(failure).__name__}")
        return HandlerResponse(status_code=status_code, body=json.dumps(body))
