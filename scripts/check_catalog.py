"""
Check catalog connectivity and print the first page of products
Usage: python scripts/check_catalog.py [sort-option] [category-slug]
"""
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env before tranex reads the environment
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)
    print(f"📄 Loaded .env from {env_path}")

from tranex.db import is_supabase_configured  # noqa: E402
from tranex.services.domains import CatalogService, ProductQuery  # noqa: E402
from tranex.services.money import format_money  # noqa: E402


async def check_catalog(sort_option: str = "newest", category: str | None = None) -> bool:
    """Load categories and one page of products"""
    if is_supabase_configured():
        print("📡 Supabase configured, querying live catalog")
    else:
        print("⚠️  SUPABASE_URL / SUPABASE_ANON_KEY not set, using mock catalog")

    catalog = await CatalogService.create()

    categories = await catalog.load_categories()
    print(f"\n=== CATEGORIES ({len(categories)}) ===")
    for c in categories:
        print(f"  {c.slug:25s} {c.name}")

    query = ProductQuery.from_sort_option(sort_option, category=category)
    products = await catalog.load_products(query)
    print(f"\n=== PRODUCTS ({len(products)}, sort={sort_option}) ===")
    for p in products:
        discount = f" (-{p.discount_percent}%)" if p.discount_percent else ""
        print(f"  {p.id:15s} {p.name:45s} {format_money(p.price):>12s}{discount}")

    if catalog.last_error:
        print(f"\n❌ Error: {catalog.last_error}")
        return False
    print("\n✅ Catalog OK")
    return True


if __name__ == "__main__":
    args = sys.argv[1:]
    ok = asyncio.run(check_catalog(*args[:2]))
    sys.exit(0 if ok else 1)
