"""User account router: registration, activation, listing, update, delete."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from userhub.application.dtos import PageRequest
from userhub.application.policies import authorize_self
from userhub.domain.shared.exceptions import ErrorCode
from userhub.presentation.api.dependencies import (
    CallerId,
    LanguageDep,
    TranslatorDep,
    UserServiceDep,
)
from userhub.presentation.api.schemas import (
    ErrorResponse,
    MessageResponse,
    RegisterRequest,
    UserPageResponse,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    summary="Register a new user",
    responses={
        200: {"description": "User created, activation e-mail sent"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        502: {"model": ErrorResponse, "description": "Activation e-mail failed"},
    },
)
async def register(
    request: RegisterRequest,
    user_service: UserServiceDep,
    translator: TranslatorDep,
    language: LanguageDep,
) -> MessageResponse:
    """
    Register a new, inactive account.

    The account is persisted only if the activation e-mail could be sent.
    """
    await user_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return MessageResponse(message=translator.translate("user_create_success", language))


@router.post(
    "/token/{token}",
    summary="Activate an account",
    responses={
        200: {"description": "Account activated"},
        400: {"model": ErrorResponse, "description": "Unknown or used token"},
    },
)
async def activate(
    token: str,
    user_service: UserServiceDep,
    translator: TranslatorDep,
    language: LanguageDep,
) -> MessageResponse:
    await user_service.activate(token)
    return MessageResponse(
        message=translator.translate("account_activation_success", language),
    )


@router.get(
    "",
    summary="List active users",
)
async def list_users(
    user_service: UserServiceDep,
    caller_id: CallerId,
    page: Annotated[Optional[str], Query()] = None,
    size: Annotated[Optional[str], Query()] = None,
) -> UserPageResponse:
    """
    Page through active users ordered by id.

    Out-of-range or non-numeric ``page``/``size`` fall back to 0 and 10.
    An authenticated caller is left out of the listing.
    """
    result = await user_service.list_active(
        PageRequest.from_params(page, size),
        caller_id=caller_id,
    )
    return UserPageResponse.from_page(result)


@router.get(
    "/{user_id}",
    summary="Get an active user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(user_id: int, user_service: UserServiceDep) -> UserResponse:
    return UserResponse.from_summary(await user_service.get_active(user_id))


@router.put(
    "/{user_id}",
    summary="Update own account",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        403: {"model": ErrorResponse, "description": "Not the caller's account"},
    },
)
async def update_user(
    user_id: int,
    user_service: UserServiceDep,
    caller_id: CallerId,
    request: Optional[UserUpdateRequest] = None,
) -> UserResponse:
    authorize_self(caller_id, user_id, ErrorCode.UNAUTHORIZED_USER_UPDATE)

    summary = await user_service.update(
        user_id,
        username=request.username if request else None,
    )
    return UserResponse.from_summary(summary)


@router.delete(
    "/{user_id}",
    summary="Delete own account",
    responses={403: {"model": ErrorResponse, "description": "Not the caller's account"}},
)
async def delete_user(
    user_id: int,
    user_service: UserServiceDep,
    caller_id: CallerId,
    translator: TranslatorDep,
    language: LanguageDep,
) -> MessageResponse:
    """Delete the caller's account together with all of its bearer tokens."""
    authorize_self(caller_id, user_id, ErrorCode.UNAUTHORIZED_USER_DELETE)

    await user_service.delete(user_id)
    logger.info("User %s deleted own account", user_id)
    return MessageResponse(message=translator.translate("user_delete_success", language))
