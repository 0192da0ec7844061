from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Product(Base):
    # Existing table owned by the catalog database; every column but the key may be NULL
    __tablename__ = "Products"

    product_id: Mapped[int] = mapped_column("ProductID", Integer, primary_key=True)
    product_name: Mapped[str | None] = mapped_column("ProductName", String(200), nullable=True)
    category: Mapped[str | None] = mapped_column("Category", String(100), nullable=True)
    price: Mapped[Decimal | None] = mapped_column("Price", Numeric(10, 2), nullable=True)
    stock: Mapped[int | None] = mapped_column("Stock", Integer, nullable=True)
    supplier: Mapped[str | None] = mapped_column("Supplier", String(200), nullable=True)
    created_date: Mapped[datetime | None] = mapped_column(
        "CreatedDate", DateTime, server_default=func.now(), nullable=True
    )
