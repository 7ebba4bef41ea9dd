"""Authentication router for login and logout."""

from fastapi import APIRouter

from userhub.presentation.api.dependencies import (
    AuthService,
    BearerToken,
    LanguageDep,
    TranslatorDep,
)
from userhub.presentation.api.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)

router = APIRouter()


@router.post(
    "/auth",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        403: {"model": ErrorResponse, "description": "Account not activated"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns an opaque bearer token to send as ``Authorization: Bearer <token>``.
    The token stays valid until logout or account deletion.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return LoginResponse(id=user.id, username=user.username, token=token)


@router.post("/logout", summary="Revoke the bearer token")
async def logout(
    token: BearerToken,
    auth_service: AuthService,
    translator: TranslatorDep,
    language: LanguageDep,
) -> MessageResponse:
    """Revoke the presented token. Succeeds without a token too."""
    if token:
        await auth_service.logout(token)
    return MessageResponse(message=translator.translate("logout_success", language))
