"""Review Repository."""
from typing import List

from .base import BaseRepository
from tranex.services.models import Review


class ReviewRepository(BaseRepository):
    """Review database operations (read-only)."""

    async def list_for_product(self, product_id: str) -> List[Review]:
        """Reviews for a product, newest first."""
        result = await self.client.table("reviews").select("*").eq(
            "product_id", product_id
        ).order("created_at", desc=True).execute()

        return [Review(**r) for r in result.data or []]
