"""
Repository Pattern for Catalog Reads

- ProductRepository: product listing, lookup, related products
- CategoryRepository: category listing
- ReviewRepository: product reviews
"""
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .review_repo import ReviewRepository

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "ReviewRepository",
]
