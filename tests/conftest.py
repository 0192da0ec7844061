import os
import tempfile
from datetime import datetime
from decimal import Decimal

import pytest

from app.database import Base, create_db_engine
from app.models.product import Product
from app.services.product_gateway import ProductGateway


@pytest.fixture
def temp_db_url():
    """Create a temporary SQLite database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield f"sqlite:///{path}"
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


@pytest.fixture
def engine(temp_db_url):
    engine = create_db_engine(temp_db_url)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def add_products(engine):
    """Insert products as (id, name, category, price, stock, supplier) tuples."""
    from sqlalchemy.orm import Session

    def _add(*rows):
        with Session(engine) as db:
            for product_id, name, category, price, stock, supplier in rows:
                db.add(Product(
                    product_id=product_id,
                    product_name=name,
                    category=category,
                    price=Decimal(str(price)),
                    stock=stock,
                    supplier=supplier,
                    created_date=datetime(2024, 1, product_id % 28 + 1, 9, 30),
                ))
            db.commit()

    return _add


@pytest.fixture
def gateway(engine):
    return ProductGateway(engine=engine)


@pytest.fixture
def seeded_gateway(gateway, add_products):
    """Gateway over the two-product Widget/Gadget catalog."""
    add_products(
        (1, "Widget", "Tools", 9.99, 10, "Acme"),
        (2, "Gadget", "Electronics", 19.99, 5, "Acme"),
    )
    return gateway


@pytest.fixture
def broken_gateway(tmp_path):
    """Gateway whose database file can never be opened."""
    return ProductGateway(database_url=f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}")
