import json
from decimal import Decimal
from typing import Any, List, Optional

import boto3

from app.config import Settings
from app.repositories.product_repository import Product, ProductRepository


def _to_dynamo(item: Product) -> dict:
    """DynamoDB rejects floats, so every float becomes a Decimal."""
    return json.loads(json.dumps(item), parse_float=Decimal)


def _from_dynamo(value: Any) -> Any:
    """
    Turn the Decimals boto3 returns back into ints and floats.

    The round-trip is lossy: DynamoDB normalises 1.0 to 1, so a float
    stored with no fractional part comes back as an int.
    """
    if isinstance(value, Decimal):
        if value == value.to_integral_value() and value.as_tuple().exponent >= 0:
            return int(value)
        return float(value)
    if isinstance(value, dict):
        return {key: _from_dynamo(inner) for key, inner in value.items()}
    if isinstance(value, list):
        return [_from_dynamo(inner) for inner in value]
    return value


class DynamoProductRepository(ProductRepository):
    """Product repository backed by a DynamoDB table keyed by productId."""

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoProductRepository":
        dynamodb = boto3.resource(
            "dynamodb",
            region_name=settings.AWS_REGION,
            endpoint_url=settings.DYNAMODB_ENDPOINT_URL,
        )
        return cls(dynamodb.Table(settings.PRODUCTS_TABLE))

    def get(self, product_id: Optional[str]) -> Optional[Product]:
        if product_id is None:
            return None

        response = self.table.get_item(Key={self.KEY: product_id})
        item = response.get("Item")
        return _from_dynamo(item) if item else None

    def put(self, item: Product) -> None:
        self.table.put_item(Item=_to_dynamo(item))

    def delete(self, product_id: str) -> None:
        self.table.delete_item(Key={self.KEY: product_id})

    def scan_all(self) -> List[Product]:
        response = self.table.scan()
        items = response.get("Items", [])

        # A single scan page is capped at 1 MB
        while "LastEvaluatedKey" in response:
            response = self.table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response.get("Items", []))

        return [_from_dynamo(item) for item in items]

    def ping(self) -> None:
        self.table.load()
