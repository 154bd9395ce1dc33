from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import logging
import jwt

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """Base class for every token verification failure."""


class TokenMalformed(TokenError):
    pass


class TokenInvalidSignature(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class PasswordHasher:
    """Salted, adaptive password hashing backed by a passlib CryptContext."""

    def __init__(self, scheme: str = "pbkdf2_sha256", rounds: int = 29000):
        self.pwd_context = CryptContext(
            schemes=[scheme],
            deprecated="auto",
            **{f"{scheme}__rounds": rounds},
        )

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        # Unknown scheme, malformed digest and non-string input all count as a mismatch
        try:
            return self.pwd_context.verify(password, digest)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """Spend one verification's worth of time; used when there is no digest to check."""
        self.pwd_context.dummy_verify()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-limited session tokens.

    Tokens are JWTs carrying ``sub`` (the username), ``iat`` and ``exp``.
    Nothing is stored server side; expiry is the only way a token stops
    being valid.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 30,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("TokenService requires a non-empty secret")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(minutes=expire_minutes)
        self.clock = clock or _utcnow

    def issue(self, identity: str) -> str:
        now = self.clock()
        payload = {"sub": identity, "iat": now, "exp": now + self.expires_in}
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Return the identity embedded in ``token``.

        Raises:
            TokenInvalidSignature: signature does not match the secret
            TokenExpired: the token is past its ``exp``
            TokenMalformed: anything structurally wrong with the token
        """
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired("Token expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenInvalidSignature("Signature mismatch") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformed(f"Malformed token: {exc}") from exc

        username = data.get("sub")
        if not isinstance(username, str) or not username:
            raise TokenMalformed("Malformed token: invalid subject")
        return username
