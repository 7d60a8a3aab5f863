"""Domain services wrapping repositories."""
from .catalog import CatalogService, ProductQuery, sort_option_to_query

__all__ = [
    "CatalogService",
    "ProductQuery",
    "sort_option_to_query",
]
