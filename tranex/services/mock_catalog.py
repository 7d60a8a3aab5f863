"""
Mock catalog served when Supabase is not configured.

Generates the demo product set used on the store page and applies
filtering, sorting and pagination in-process.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional

from tranex.services.models import Category, Product, Review
from tranex.services.money import round_money

MOCK_CATEGORIES = [
    {
        "id": 1,
        "name": "Flywheel Training",
        "slug": "flywheel-training",
        "description": "Advanced flywheel resistance training systems",
        "sort_order": 1,
    },
    {
        "id": 2,
        "name": "Fencing Equipment",
        "slug": "fencing-equipment",
        "description": "Professional fencing gear and protective equipment",
        "sort_order": 2,
    },
    {
        "id": 3,
        "name": "Performance Analytics",
        "slug": "performance-analytics",
        "description": "Data analysis and tracking tools",
        "sort_order": 3,
    },
    {
        "id": 4,
        "name": "Accessories",
        "slug": "accessories",
        "description": "Training accessories and replacement parts",
        "sort_order": 4,
    },
]

MOCK_REVIEWS = [
    {
        "id": 1,
        "user_name": "John Smith",
        "rating": 5,
        "comment": "Excellent training equipment! The resistance control is precise and the app integration is seamless.",
        "created_at": "2024-01-15T00:00:00Z",
    },
    {
        "id": 2,
        "user_name": "Sarah Johnson",
        "rating": 4,
        "comment": "Great quality and durability. Perfect for our sports facility.",
        "created_at": "2024-01-10T00:00:00Z",
    },
    {
        "id": 3,
        "user_name": "Mike Chen",
        "rating": 5,
        "comment": "Best investment for our training center. Athletes love the real-time feedback.",
        "created_at": "2024-01-05T00:00:00Z",
    },
]

# Fixed reference time so mock ordering is stable
_MOCK_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def category_name_from_slug(slug: str) -> str:
    """Map a category slug to its display name, "" if unknown."""
    for category in MOCK_CATEGORIES:
        if category["slug"] == slug:
            return category["name"]
    return ""


def mock_categories() -> List[Category]:
    return [Category(**c) for c in MOCK_CATEGORIES]


def mock_products(count: int = 12) -> List[Product]:
    """Generate count demo products, newest first by id."""
    names = [c["name"] for c in MOCK_CATEGORIES]
    products = []
    for i in range(1, count + 1):
        category = names[i % len(names)]
        price = Decimal("99.99") + i * 50
        products.append(Product(
            id=f"product-{i}",
            name=f"TRANEX {category} Pro {i}",
            description=f"High-performance {category.lower()} for professional athletes and enthusiasts.",
            short_description=f"Premium {category.lower()} equipment.",
            price=price,
            original_price=round_money(price * Decimal("1.2")),
            category=category,
            brand="TRANEX",
            sku=f"TX-{category[:3].upper()}-{i}00",
            stock_quantity=10 + i,
            images={
                "main": f"/src/assets/images/products/product-{i}.jpg",
                "gallery": [
                    f"/src/assets/images/products/product-{i}-1.jpg",
                    f"/src/assets/images/products/product-{i}-2.jpg",
                ],
            },
            features=[
                "Professional grade construction",
                "Lightweight and durable",
                "Advanced performance metrics",
                "Customizable settings",
            ],
            specifications={
                "weight": f"{i + 0.5} kg",
                "dimensions": f"{30 + i}cm x {20 + i}cm x {10 + i}cm",
                "material": "Aircraft-grade aluminum",
                "warranty": "2 years",
            },
            created_at=_MOCK_EPOCH + timedelta(days=i),
        ))
    return products


def mock_reviews(product_id: str) -> List[Review]:
    return [Review(product_id=product_id, **r) for r in MOCK_REVIEWS]


def query_mock_products(
    category: Optional[str] = None,
    sort_by: str = "created_at",
    sort_direction: str = "desc",
    limit: int = 6,
    offset: int = 0,
    search: Optional[str] = None,
) -> List[Product]:
    """Same contract as ProductRepository.list, over the mock product set."""
    products = mock_products()

    if category:
        name = category_name_from_slug(category)
        products = [p for p in products if p.category == name]

    if search:
        term = search.lower()
        products = [p for p in products if term in p.name.lower()]

    def sort_key(product: Product):
        value = getattr(product, sort_by, None)
        return (value is None, value if value is not None else 0)

    products = sorted(products, key=sort_key, reverse=sort_direction == "desc")
    return products[offset:offset + limit]
