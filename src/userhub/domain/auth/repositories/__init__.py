from userhub.domain.auth.repositories.token_repository import TokenRepository

__all__ = ["TokenRepository"]
