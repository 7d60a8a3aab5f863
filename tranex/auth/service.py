"""
Auth Service - Supabase Auth wrapper

Each call returns an AuthResult instead of raising, so the login and
register pages only need to branch on `success` and show `error`.
"""

from typing import Any, Optional

from pydantic import BaseModel
from supabase._async.client import AsyncClient

from tranex.db import SITE_URL, get_supabase, is_supabase_configured
from tranex.errors import ERROR_AUTH_UNAVAILABLE, ERROR_NOT_AUTHENTICATED
from tranex.logging import get_logger, mask_email_for_logging
from tranex.utils.validators import validate_form

logger = get_logger(__name__)

RESET_PASSWORD_PATH = "/src/pages/auth/update-password.html"


class AuthResult(BaseModel):
    """Success/error result of an auth call."""
    success: bool
    user: Optional[dict] = None
    session: Optional[dict] = None
    data: Optional[dict] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "AuthResult":
        return cls(success=False, error=error)


def _as_dict(value: Any) -> Optional[dict]:
    """Convert a gotrue model (User, Session) to a plain dict."""
    if value is None:
        return None
    if isinstance(value, dict):
        return value
    if hasattr(value, "model_dump"):
        dumped = value.model_dump(mode="json")
        return dumped if isinstance(dumped, dict) else None
    return None


class AuthService:
    """
    Authentication against Supabase Auth.

    Usage:
        auth = await AuthService.create()
        result = await auth.sign_in(email, password)
        if not result.success:
            show_error(result.error)
    """

    def __init__(self, client: Optional[AsyncClient]):
        self.client = client

    @classmethod
    async def create(cls) -> "AuthService":
        """Service bound to the shared client; unconfigured backends fail every call."""
        if not is_supabase_configured():
            logger.warning("Supabase not configured, auth calls will fail")
            return cls(None)
        return cls(await get_supabase())

    async def _call(self, action: str, coro_factory) -> AuthResult:
        if self.client is None:
            return AuthResult.failed(ERROR_AUTH_UNAVAILABLE)
        try:
            return await coro_factory()
        except Exception as e:
            logger.error(f"{action} failed: {e}")
            return AuthResult.failed(str(e))

    async def sign_up(self, email: str, password: str, metadata: Optional[dict] = None) -> AuthResult:
        """Create an account; metadata is stored as user metadata."""
        async def run():
            response = await self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": metadata or {}},
            })
            logger.info(f"Registration successful for {mask_email_for_logging(email)}")
            return AuthResult(success=True, user=_as_dict(response.user), session=_as_dict(response.session))

        return await self._call("Registration", run)

    async def register(self, email: str, password: str, full_name: str, lang: str = "en") -> AuthResult:
        """Validate the register form, then sign up with full_name in user metadata."""
        email = email.strip()
        errors = validate_form({"email": email, "password": password}, lang)
        if errors:
            return AuthResult(success=False, error=next(iter(errors.values())), data={"fields": errors})
        return await self.sign_up(email, password, {"full_name": full_name})

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password."""
        async def run():
            response = await self.client.auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
            logger.info(f"Login successful for {mask_email_for_logging(email)}")
            return AuthResult(success=True, user=_as_dict(response.user), session=_as_dict(response.session))

        return await self._call("Login", run)

    async def sign_out(self) -> AuthResult:
        async def run():
            await self.client.auth.sign_out()
            logger.info("Sign out successful")
            return AuthResult(success=True)

        return await self._call("Sign out", run)

    async def reset_password(self, email: str, redirect_to: Optional[str] = None) -> AuthResult:
        """Send the password reset email."""
        async def run():
            await self.client.auth.reset_password_for_email(
                email, {"redirect_to": redirect_to or f"{SITE_URL}{RESET_PASSWORD_PATH}"}
            )
            logger.info(f"Password reset email sent to {mask_email_for_logging(email)}")
            return AuthResult(success=True)

        return await self._call("Password reset", run)

    async def update_password(self, new_password: str) -> AuthResult:
        """Set a new password for the signed-in user."""
        async def run():
            response = await self.client.auth.update_user({"password": new_password})
            return AuthResult(success=True, user=_as_dict(response.user))

        return await self._call("Password update", run)

    async def get_current_user(self) -> AuthResult:
        async def run():
            response = await self.client.auth.get_user()
            user = _as_dict(response.user) if response is not None else None
            if user is None:
                return AuthResult.failed(ERROR_NOT_AUTHENTICATED)
            return AuthResult(success=True, user=user)

        return await self._call("Get user", run)

    async def get_session(self) -> AuthResult:
        async def run():
            session = _as_dict(await self.client.auth.get_session())
            if session is None:
                return AuthResult.failed(ERROR_NOT_AUTHENTICATED)
            return AuthResult(success=True, session=session)

        return await self._call("Get session", run)
