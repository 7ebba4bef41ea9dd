from userhub.infrastructure.security.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
