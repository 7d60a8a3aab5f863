# Services Module
from .domains import CatalogService, ProductQuery
from .models import Category, Product, Review

__all__ = ["CatalogService", "ProductQuery", "Category", "Product", "Review"]
