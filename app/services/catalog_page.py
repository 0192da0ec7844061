import logging

from app.schemas.product import CatalogView, Product
from app.services.grid import ProductGrid
from app.services.product_gateway import ProductGateway

logger = logging.getLogger(__name__)


class ProductCatalogPage:
    """
    Controller for the product catalog page.

    Wires the search box, the Search / Show All buttons and the paged grid to
    the product gateway. One instance handles one page view; the search text
    and page index are owned by the display surface and handed in.
    """

    def __init__(
        self,
        gateway: ProductGateway,
        grid: ProductGrid[Product] | None = None,
        search_text: str = "",
    ):
        self.gateway = gateway
        self.grid = grid if grid is not None else ProductGrid()
        self.search_text = search_text
        self.status_text = ""
        self.has_error = False
        self._rebound = False

    def load(self, is_postback: bool = False) -> None:
        """Initial render binds the full, unfiltered list."""
        if not is_postback:
            self.load_products()

    def search_clicked(self) -> None:
        # A new term starts from the first page
        self.grid.page_index = 0
        self.load_products(self.search_text.strip())

    def show_all_clicked(self) -> None:
        self.search_text = ""
        self.grid.page_index = 0
        self.load_products()

    def page_index_changing(self, new_page_index: int) -> None:
        self.grid.page_index = new_page_index
        self.load_products(self.search_text.strip())

    def load_products(self, search_term: str = "") -> None:
        """Reload the grid; on failure keep the grid as it is and show the error."""
        self._rebound = False
        result = self.gateway.get_products(search_term)
        if not result.ok:
            logger.warning(f"Catalog reload failed for search={search_term!r}: {result.error.message}")
            self.has_error = True
            self.status_text = f"Error loading products: {result.error.message}"
            return

        products = result.value
        self.grid.bind(products)
        self._rebound = True
        self.has_error = False
        self.status_text = f"Total Records: {len(products)}"

    def to_view(self) -> CatalogView:
        return CatalogView(
            search_text=self.search_text,
            page_index=self.grid.page_index,
            page_count=self.grid.page_count,
            page_size=self.grid.page_size,
            total_records=self.grid.row_count,
            status_text=self.status_text,
            error=self.has_error,
            products=self.grid.page_rows if self._rebound else None,
        )
