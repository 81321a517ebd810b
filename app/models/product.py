from sqlalchemy import Column, String, JSON

from app.database import Base


class ProductRecord(Base):
    """
    Key-value record holding one product document.

    Attributes:
        product_id: Opaque string key (the product's productId)
        document: Whole product as stored, including productId and any extra fields
    """
    __tablename__ = "products"

    product_id = Column(String(64), primary_key=True)
    document = Column(JSON, nullable=False)

    def __repr__(self):
        return f"<ProductRecord(product_id='{self.product_id}')>"
