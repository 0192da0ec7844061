import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError
from sqlalchemy import func, or_, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.database import create_db_engine
from app.models.product import Product as ProductModel
from app.schemas.product import Product

logger = logging.getLogger(__name__)

T = TypeVar("T")

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class StorageError:
    """Any failure reaching or querying the product store."""
    message: str


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    value: T | None = None
    error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _storage_error(e: Exception) -> StorageError:
    """Use the driver's message when there is one."""
    orig = getattr(e, "orig", None)
    return StorageError(message=str(orig) if orig is not None else str(e))


def _like_pattern(search_term: str) -> str:
    """Build a %term% pattern that matches LIKE wildcards literally."""
    escaped = (
        search_term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class ProductGateway:
    """
    Read-only access to the Products table.

    Every call opens its own session and closes it before returning,
    whether the query succeeded or not. Failures come back as a
    QueryResult carrying a StorageError instead of being raised, including
    a connection string whose engine cannot be built and rows that do not
    fit the Product schema.
    """

    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        if engine is None and not database_url:
            raise ValueError("A database URL or an engine is required")
        self.database_url = database_url
        self._engine = engine
        self._session_factory: sessionmaker | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProductGateway":
        return cls(database_url=settings.DATABASE_URL)

    @property
    def engine(self) -> Engine:
        """Engine for the store, created on first use."""
        if self._engine is None:
            self._engine = create_db_engine(self.database_url)
        return self._engine

    def _session(self) -> Session:
        if self._session_factory is None:
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return self._session_factory()

    def get_products(self, search_term: str = "") -> QueryResult[list[Product]]:
        """
        Get products matching a search term, ordered by ProductID.

        An empty term returns every product. Otherwise a product matches when
        its name, category or supplier contains the term, ignoring case.
        """
        query = select(ProductModel)
        if search_term:
            pattern = _like_pattern(search_term)
            query = query.where(
                or_(
                    ProductModel.product_name.ilike(pattern, escape=LIKE_ESCAPE),
                    ProductModel.category.ilike(pattern, escape=LIKE_ESCAPE),
                    ProductModel.supplier.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        query = query.order_by(ProductModel.product_id.asc())

        try:
            with self._session() as db:
                rows = db.scalars(query).all()
                products = [Product.model_validate(row) for row in rows]
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to load products for search={search_term!r}: {e}", exc_info=True)
            return QueryResult(error=_storage_error(e))

        logger.info(f"Retrieved {len(products)} products for search={search_term!r}")
        return QueryResult(value=products)

    def get_product_count(self) -> QueryResult[int]:
        """Get the total number of products, ignoring any search."""
        try:
            with self._session() as db:
                count = db.scalar(select(func.count()).select_from(ProductModel))
        except SQLAlchemyError as e:
            logger.error(f"Failed to count products: {e}", exc_info=True)
            return QueryResult(error=_storage_error(e))

        return QueryResult(value=int(count or 0))
