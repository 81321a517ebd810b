from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from app.models.product import ProductRecord

Product = Dict[str, Any]


class ProductRepository(ABC):
    """
    Contract over the key-value store holding products.

    Each method is a single store call with no retry. A missing product is
    reported by get() returning None, never by raising.
    """

    KEY = "productId"

    @abstractmethod
    def get(self, product_id: Optional[str]) -> Optional[Product]:
        """Return the product stored under product_id, or None."""

    @abstractmethod
    def put(self, item: Product) -> None:
        """Create or replace the product keyed by item["productId"]."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Delete the product; deleting a missing key is not an error."""

    @abstractmethod
    def scan_all(self) -> List[Product]:
        """Return every stored product, in no particular order."""

    @abstractmethod
    def ping(self) -> None:
        """Raise if the store cannot be reached."""


class SqlProductRepository(ProductRepository):
    """
    Product repository backed by a single SQLAlchemy table.

    Holds the session factory built at startup and opens one short-lived
    session per operation, so the engine's connection pool is reused across
    requests.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, product_id: Optional[str]) -> Optional[Product]:
        if product_id is None:
            return None

        with self.session_factory() as db:
            record = db.get(ProductRecord, product_id)
            return dict(record.document) if record else None

    def put(self, item: Product) -> None:
        with self.session_factory() as db:
            db.merge(ProductRecord(product_id=item[self.KEY], document=dict(item)))
            db.commit()

    def delete(self, product_id: str) -> None:
        with self.session_factory() as db:
            db.query(ProductRecord).filter(ProductRecord.product_id == product_id).delete()
            db.commit()

    def scan_all(self) -> List[Product]:
        with self.session_factory() as db:
            return [dict(record.document) for record in db.query(ProductRecord).all()]

    def ping(self) -> None:
        with self.session_factory() as db:
            db.execute(text("SELECT 1"))
