"""Authentication package: Supabase Auth wrapper."""
from .service import AuthResult, AuthService

__all__ = ["AuthResult", "AuthService"]
