"""
SocialNet Backend — Access Guard
================================

What:  FastAPI dependency gating every authenticated route.
How:   Reads the `Authorization` header, verifies it with the TokenService
       built at startup, and records the verified identity on
       `request.state.user_id` before the route body runs.

Outcomes:
    header absent or empty    → UnauthorizedError (401, "Access denied")
    header present, bad token → InvalidTokenError (400, "Invalid token")
    valid token               → Identity returned to the route

The header carries the raw token. A `Bearer ` scheme prefix is accepted
too and stripped before verification.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, Request

from socialnet.dependencies import get_token_service
from socialnet.exceptions import InvalidTokenError, UnauthorizedError
from socialnet.middleware.request_id import request_id_var
from socialnet.security.tokens import TokenService

logger = logging.getLogger(__name__)

TOKEN_HEADER = "Authorization"
_BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class Identity:
    """The verified caller attached to a request."""
    user_id: uuid.UUID


def extract_token(header_value: Optional[str]) -> Optional[str]:
    """Return the token carried by an Authorization header value, or None if empty."""
    if header_value is None:
        return None
    value = header_value.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == _BEARER_SCHEME:
        value = rest.strip()
    return value or None


async def require_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias=TOKEN_HEADER),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Verify the caller and attach the identity to the request.

    Raises:
        UnauthorizedError: no credential presented
        InvalidTokenError: credential presented but not verifiable
    """
    token = extract_token(authorization)
    if token is None:
        logger.warning(
            "[%s] Rejected %s %s: no credential",
            request_id_var.get(""), request.method, request.url.path,
        )
        raise UnauthorizedError()

    try:
        user_id = tokens.verify(token)
    except InvalidTokenError:
        logger.warning(
            "[%s] Rejected %s %s: invalid token",
            request_id_var.get(""), request.method, request.url.path,
        )
        raise

    request.state.user_id = user_id
    return Identity(user_id=user_id)
