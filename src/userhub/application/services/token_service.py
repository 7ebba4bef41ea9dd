"""Opaque bearer token issuance and verification."""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from userhub.domain.auth import TokenRepository
    from userhub.domain.user import User

logger = logging.getLogger(__name__)

TOKEN_BYTES = 16


def generate_token() -> str:
    """Return 16 random bytes, hex encoded (32 characters)."""
    return secrets.token_hex(TOKEN_BYTES)


class TokenService:
    """
    Issues, resolves and revokes bearer tokens.

    Tokens carry no claims; the store row is the credential. Verification
    is a single lookup that also requires the owner to be active, so
    an account that is not active cannot act through an old token.
    """

    def __init__(self, token_repository: TokenRepository):
        self._token_repo = token_repository

    async def issue(self, user: User) -> str:
        token = generate_token()
        await self._token_repo.add(token, user.id)
        logger.debug("Issued token for user: %s", user.id)
        return token

    async def verify(self, token: str) -> Optional[int]:
        if not token:
            return None
        return await self._token_repo.find_active_owner_id(token)

    async def revoke(self, token: str) -> None:
        await self._token_repo.delete(token)
