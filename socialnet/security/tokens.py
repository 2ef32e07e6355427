"""
SocialNet Backend — Session Token Issuer/Verifier
=================================================

What:  Issues and verifies signed, time-limited identity tokens (JWT).
How:   python-jose signs `{"id", "iat", "exp"}` with an HMAC secret.
       Verification checks signature and expiry in one call.
Who:   UserService issues tokens at login; the Access Guard verifies them.

Failure policy:
    Every way a token can be wrong (bad signature, malformed, expired,
    missing or ill-typed `id` claim) raises the same InvalidTokenError with
    the same message. Tokens are stateless; expiry is the only revocation.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from socialnet.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

IDENTITY_CLAIM = "id"


class TokenService:
    """
    Issues and verifies identity tokens.

    Attributes:
        secret_key:    HMAC signing secret
        algorithm:     JWS algorithm (HS256 by default)
        expires_delta: Lifetime of an issued token
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=1),
    ):
        if not secret_key:
            raise ValueError("TokenService requires a non-empty secret key")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, identity: uuid.UUID) -> str:
        """Return a signed token for `identity`, valid for `expires_delta`."""
        now = datetime.now(timezone.utc)
        claims = {
            IDENTITY_CLAIM: str(identity),
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> uuid.UUID:
        """
        Return the identity embedded in `token`.

        Raises:
            InvalidTokenError: for any signature, structure or expiry problem
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except JWTError as e:
            # ExpiredSignatureError and JWTClaimsError are JWTError subclasses
            logger.debug("Token rejected: %s", type(e).__name__)
            raise InvalidTokenError() from e

        subject = payload.get(IDENTITY_CLAIM)
        if not isinstance(subject, str):
            raise InvalidTokenError()
        try:
            return uuid.UUID(subject)
        except ValueError as e:
            raise InvalidTokenError() from e
