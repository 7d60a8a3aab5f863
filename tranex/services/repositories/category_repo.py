"""Category Repository."""
from typing import List

from .base import BaseRepository
from tranex.services.models import Category


class CategoryRepository(BaseRepository):
    """Category database operations (read-only)."""

    async def list(self) -> List[Category]:
        """Active categories in display order."""
        result = await self.client.table("categories").select("*").eq(
            "is_active", True
        ).order("sort_order").execute()

        return [Category(**c) for c in result.data or []]
