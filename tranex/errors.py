"""
Common Error Constants and Exceptions

Centralized error messages to avoid string duplication, plus the small
exception hierarchy raised inside the package.
"""

# Cart errors
ERROR_PRODUCT_ID_REQUIRED = "Product id is required"
ERROR_INVALID_PRICE = "Product price must be a non-negative number"
ERROR_CART_REENTRANT = "Cart subscribers must not mutate the cart while being notified"

# Storage errors
ERROR_STORAGE_READ = "Failed to read from storage"
ERROR_STORAGE_WRITE = "Failed to write to storage"

# Catalog errors
ERROR_PRODUCTS_LOAD = "Failed to load products. Please try again later."

# Auth errors
ERROR_NOT_AUTHENTICATED = "Not authenticated"
ERROR_AUTH_UNAVAILABLE = "Authentication service is not configured"

# Component errors
ERROR_TARGET_NOT_FOUND = "Target element not found"
ERROR_COMPONENT_LOAD = "Failed to load component"


class TranexError(Exception):
    """Base class for all package errors."""


class StorageError(TranexError):
    """A key-value storage backend failed to read or write."""


class InvalidProductError(TranexError, ValueError):
    """A product record cannot be turned into a cart line item."""


class CartReentrancyError(TranexError, RuntimeError):
    """A subscriber tried to mutate the cart during notification."""


class ComponentLoadError(TranexError):
    """An HTML component could not be fetched or injected."""
