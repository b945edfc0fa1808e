"""Credential Service — password hashing and stateless session tokens.

Invariants:
    - Plaintext passwords are never stored or logged; only argon2 hashes leave hash()
    - verify() fails closed: mismatch or malformed hash returns False, never raises
    - dummy_verify() costs the same as a real verify, so a missing account is
      not visible through signin latency
    - Tokens are HS256 JWTs carrying sub (user id), iat and exp; no server-side store
    - All primitive failures mapped to CredentialError / TokenError (core/errors.py)

Design Decisions:
    - passlib CryptContext(argon2) for hashing, PyJWT for signing: thin wrappers,
      no cryptography implemented here
    - issued_at passed in by the caller so the token's iat matches the caller's clock
    - Empty passwords rejected at hash time (policy), not only at the API schema
"""

import logging
from uuid import UUID

import jwt
from passlib.context import CryptContext

from conduit.core.errors import (
    CredentialError, ExpiredTokenError, InvalidTokenError, TokenSigningError,
)

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class CredentialService:
    """Hashes passwords and signs/verifies session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_ttl_seconds: int = 24 * 60 * 60,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_ttl_seconds = token_ttl_seconds

    # ─── Passwords ───────────────────────────────────────────────

    def hash(self, plaintext: str) -> str:
        if not plaintext:
            raise CredentialError("Password must not be empty")
        try:
            return pwd_context.hash(plaintext)
        except (ValueError, TypeError) as e:
            raise CredentialError(f"Password rejected by hasher: {e}")

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return pwd_context.verify(plaintext, hashed)
        except (ValueError, TypeError):
            logger.warning("Password verification against malformed hash")
            return False

    def dummy_verify(self) -> bool:
        """Spend one verify's worth of hashing when there is no stored hash."""
        pwd_context.dummy_verify()
        return False

    # ─── Tokens ──────────────────────────────────────────────────

    def issue_token(self, user_id: UUID, issued_at_seconds: int) -> str:
        if not self.secret_key:
            raise TokenSigningError()
        payload = {
            "sub": str(user_id),
            "iat": issued_at_seconds,
            "exp": issued_at_seconds + self.token_ttl_seconds,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> UUID:
        """Return the user id the token was issued for."""
        if not self.secret_key:
            raise TokenSigningError()
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()
        try:
            return UUID(payload["sub"])
        except (ValueError, TypeError, AttributeError):
            raise InvalidTokenError()
