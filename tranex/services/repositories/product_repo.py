"""Product Repository - Product catalog reads."""
from typing import List, Optional

from .base import BaseRepository
from tranex.services.models import Product

PRODUCTS_TABLE = "products"


class ProductRepository(BaseRepository):
    """Product database operations (read-only)."""

    async def list(
        self,
        category: Optional[str] = None,
        sort_by: str = "created_at",
        sort_direction: str = "desc",
        limit: int = 6,
        offset: int = 0,
        search: Optional[str] = None,
    ) -> List[Product]:
        """Active products, optionally filtered by category and name, sorted and paginated."""
        query = self.client.table(PRODUCTS_TABLE).select("*").eq("is_active", True)

        if category:
            query = query.eq("category", category)
        if search:
            query = query.ilike("name", f"%{search}%")

        result = await query.order(
            sort_by, desc=sort_direction == "desc"
        ).range(offset, offset + limit - 1).execute()

        return [Product(**p) for p in result.data or []]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table(PRODUCTS_TABLE).select("*").eq(
            "id", product_id
        ).limit(1).execute()

        return Product(**result.data[0]) if result.data else None

    async def get_related(self, product_id: str, limit: int = 4) -> List[Product]:
        """Other active products to show next to a product."""
        result = await self.client.table(PRODUCTS_TABLE).select("*").neq(
            "id", product_id
        ).eq("is_active", True).limit(limit).execute()

        return [Product(**p) for p in result.data or []]
