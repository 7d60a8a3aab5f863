"""
TRANEX Storefront Module

This package contains the storefront client logic:
- cart: cart store over durable key-value storage
- storage: memory, file and Redis storage backends
- services: catalog models, repositories and the catalog service
- auth: Supabase Auth wrapper
- preferences: theme and language state
- i18n: translations
- components: shared HTML fragment injection

Note: Imports are lazy so that importing one piece (e.g. the cart)
does not pull in the whole package.
"""

__all__ = [
    "CartStore",
    "MemoryStorage",
    "FileStorage",
    "RedisStorage",
    "CatalogService",
    "AuthService",
    "Preferences",
    "ComponentLoader",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from tranex.cart import CartStore
        return CartStore
    elif name in ("MemoryStorage", "FileStorage", "RedisStorage"):
        from tranex import storage
        return getattr(storage, name)
    elif name == "CatalogService":
        from tranex.services.domains import CatalogService
        return CatalogService
    elif name == "AuthService":
        from tranex.auth import AuthService
        return AuthService
    elif name == "Preferences":
        from tranex.preferences import Preferences
        return Preferences
    elif name == "ComponentLoader":
        from tranex.components import ComponentLoader
        return ComponentLoader
    raise AttributeError(f"module 'tranex' has no attribute '{name}'")
