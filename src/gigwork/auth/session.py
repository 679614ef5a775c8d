"""Request-scoped session context backed by Supabase auth."""

import logging

from supabase import Client

from src.gigwork.auth.models import SessionUser, SignOutResult

logger = logging.getLogger(__name__)


class AuthSession:
    """
    The caller's session as seen by one request.

    Holds the (nullable) authenticated user and the access token it was
    resolved from, and exposes the sign-out capability. Nothing is cached
    between requests; every request resolves its own session.

    Example:
        >>> session = AuthSession(user=user, access_token=token, client=admin_client)
        >>> result = session.sign_out()
        >>> result.error is None
        True
    """

    def __init__(
        self,
        user: SessionUser | None,
        access_token: str | None = None,
        client: Client | None = None,
    ) -> None:
        self.user = user
        self.access_token = access_token
        self._client = client

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_out(self) -> SignOutResult:
        """
        Revoke the session's refresh tokens with Supabase auth.

        Returns:
            SignOutResult with error set if there is no session or the auth
            service rejected the call
        """
        if not self.access_token or self._client is None:
            return SignOutResult(error="No active session")

        try:
            self._client.auth.admin.sign_out(self.access_token)
        except Exception as e:
            logger.warning(
                f"Sign-out failed for user {self.user.id if self.user else 'unknown'}: {e}",
                extra={"error_type": "sign_out_failed"},
            )
            return SignOutResult(error=getattr(e, "message", None) or str(e))

        logger.info(f"User signed out: {self.user.id if self.user else 'unknown'}")
        return SignOutResult()
