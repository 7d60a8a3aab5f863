"""
Catalog Domain Service

Product listing, lookup, categories and reviews for the store pages.
Reads from Supabase through repositories, or from the mock catalog when
the backend is not configured. Every call degrades to "no data" on failure.
"""

from dataclasses import dataclass
from typing import List, Optional

from tranex.db import get_supabase, is_supabase_configured
from tranex.errors import ERROR_PRODUCTS_LOAD
from tranex.logging import get_logger, sanitize_id_for_logging
from tranex.services import mock_catalog
from tranex.services.models import Category, Product, Review
from tranex.services.repositories import CategoryRepository, ProductRepository, ReviewRepository

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 6

# UI sort option -> (field, direction)
SORT_OPTIONS = {
    "newest": ("created_at", "desc"),
    "oldest": ("created_at", "asc"),
    "price-low": ("price", "asc"),
    "price-high": ("price", "desc"),
}


def sort_option_to_query(sort_option: str) -> tuple[str, str]:
    """Map a store sort option to (field, direction); unknown -> newest first."""
    return SORT_OPTIONS.get(sort_option, ("created_at", "desc"))


@dataclass
class ProductQuery:
    """Paginated product list query."""

    category: Optional[str] = None
    sort_by: str = "created_at"
    sort_direction: str = "desc"
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0
    search: Optional[str] = None

    @classmethod
    def from_sort_option(
        cls,
        sort_option: str = "newest",
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "ProductQuery":
        """Build a query for the store page; category "all" means no filter."""
        sort_by, direction = sort_option_to_query(sort_option)
        return cls(
            category=None if category in (None, "", "all") else category,
            sort_by=sort_by,
            sort_direction=direction,
            limit=per_page,
            offset=max(page - 1, 0) * per_page,
            search=search.strip() if search and search.strip() else None,
        )


class CatalogService:
    """
    Read-only catalog access.

    Usage:
        catalog = await CatalogService.create()
        products = await catalog.load_products(ProductQuery.from_sort_option("price-low"))
    """

    def __init__(
        self,
        products: Optional[ProductRepository] = None,
        categories: Optional[CategoryRepository] = None,
        reviews: Optional[ReviewRepository] = None,
    ):
        self.products = products
        self.categories = categories
        self.reviews = reviews
        self.is_loading = False
        self.last_error: Optional[str] = None

    @classmethod
    async def create(cls) -> "CatalogService":
        """Supabase-backed service when configured, mock catalog otherwise."""
        if not is_supabase_configured():
            logger.info("Supabase not configured, serving mock catalog")
            return cls()
        client = await get_supabase()
        return cls(
            products=ProductRepository(client),
            categories=CategoryRepository(client),
            reviews=ReviewRepository(client),
        )

    @property
    def uses_mock(self) -> bool:
        return self.products is None

    def _start(self) -> None:
        self.is_loading = True
        self.last_error = None

    def _fail(self, what: str, e: Exception) -> None:
        self.last_error = str(e)
        logger.error(f"Error loading {what}: {e}")

    async def load_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        """Products for a list query; [] on failure."""
        query = query or ProductQuery()
        self._start()
        try:
            if self.uses_mock:
                return mock_catalog.query_mock_products(
                    category=query.category,
                    sort_by=query.sort_by,
                    sort_direction=query.sort_direction,
                    limit=query.limit,
                    offset=query.offset,
                    search=query.search,
                )
            return await self.products.list(
                category=query.category,
                sort_by=query.sort_by,
                sort_direction=query.sort_direction,
                limit=query.limit,
                offset=query.offset,
                search=query.search,
            )
        except Exception as e:
            self._fail("products", e)
            return []
        finally:
            self.is_loading = False

    async def load_product(self, product_id: str) -> Optional[Product]:
        """Single product by id; None if missing or on failure."""
        self._start()
        try:
            if self.uses_mock:
                return next((p for p in mock_catalog.mock_products() if p.id == product_id), None)
            return await self.products.get_by_id(product_id)
        except Exception as e:
            self._fail(f"product {sanitize_id_for_logging(product_id)}", e)
            return None
        finally:
            self.is_loading = False

    async def load_related(self, product_id: str, limit: int = 4) -> List[Product]:
        """Other products to show beside product_id; [] on failure."""
        self._start()
        try:
            if self.uses_mock:
                return [p for p in mock_catalog.mock_products() if p.id != product_id][:limit]
            return await self.products.get_related(product_id, limit=limit)
        except Exception as e:
            self._fail("related products", e)
            return []
        finally:
            self.is_loading = False

    async def load_categories(self) -> List[Category]:
        """Active categories; [] on failure."""
        self._start()
        try:
            if self.categories is None:
                return mock_catalog.mock_categories()
            return await self.categories.list()
        except Exception as e:
            self._fail("categories", e)
            return []
        finally:
            self.is_loading = False

    async def load_reviews(self, product_id: str) -> List[Review]:
        """Reviews for a product, newest first; [] on failure."""
        self._start()
        try:
            if self.reviews is None:
                return mock_catalog.mock_reviews(product_id)
            return await self.reviews.list_for_product(product_id)
        except Exception as e:
            self._fail("reviews", e)
            return []
        finally:
            self.is_loading = False

    def error_message(self) -> Optional[str]:
        """User-facing message for the last failure, if any."""
        return ERROR_PRODUCTS_LOAD if self.last_error else None
