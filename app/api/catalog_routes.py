import logging
from functools import lru_cache
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import settings
from app.schemas.product import CatalogView, ProductCount
from app.services.catalog_page import ProductCatalogPage
from app.services.grid import ProductGrid
from app.services.product_gateway import ProductGateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])

CatalogAction = Literal["load", "search", "show_all", "page"]


@lru_cache
def get_product_gateway() -> ProductGateway:
    """Dependency to get the product gateway for the configured database."""
    return ProductGateway.from_settings(settings)


def get_page_size() -> int:
    return settings.PAGE_SIZE


@router.get("/catalog", response_model=CatalogView)
def catalog(
    gateway: Annotated[ProductGateway, Depends(get_product_gateway)],
    page_size: Annotated[int, Depends(get_page_size)],
    action: Annotated[CatalogAction, Query()] = "load",
    search: Annotated[str, Query(max_length=200)] = "",
    page: Annotated[int, Query(ge=0)] = 0,
):
    """
    Run one catalog page interaction.

    The browser owns the search box text and the grid's page index and sends
    them back with every interaction:
    - load: initial render, lists every product
    - search: filter by the trimmed search text, back to the first page
    - show_all: clear the search text and list every product
    - page: move to `page`, keeping the current search text
    """
    logger.info(f"Catalog action={action}, search={search!r}, page={page}")

    if action == "load":
        view = ProductCatalogPage(gateway, ProductGrid(page_size=page_size))
        view.load(is_postback=False)
    elif action == "search":
        view = ProductCatalogPage(gateway, ProductGrid(page_size=page_size, page_index=page), search_text=search)
        view.search_clicked()
    elif action == "show_all":
        view = ProductCatalogPage(gateway, ProductGrid(page_size=page_size, page_index=page), search_text=search)
        view.show_all_clicked()
    else:
        view = ProductCatalogPage(gateway, ProductGrid(page_size=page_size), search_text=search)
        view.page_index_changing(page)

    return view.to_view()


@router.get("/products/count", response_model=ProductCount)
def product_count(
    gateway: Annotated[ProductGateway, Depends(get_product_gateway)]
):
    """Get the total number of products, ignoring any search."""
    result = gateway.get_product_count()
    if not result.ok:
        raise HTTPException(status_code=503, detail=f"Error counting products: {result.error.message}")
    return ProductCount(count=result.value)
