"""Self-ownership authorization policy."""

from typing import Optional

from userhub.domain.shared.exceptions import ErrorCode, ForbiddenError


def authorize_self(
    caller_id: Optional[int],
    resource_id: int,
    code: ErrorCode = ErrorCode.FORBIDDEN,
) -> None:
    """
    Allow a caller to act only on their own account.

    Parameters
    ----------
    caller_id
        Authenticated user id, or None for anonymous requests
    resource_id
        Id of the user account addressed by the request
    code
        Error code carried by the raised error, so each route reports its
        own message

    Raises
    ------
    ForbiddenError
        If the caller is anonymous or addresses another account
    """
    if caller_id is None or caller_id != resource_id:
        raise ForbiddenError(
            f"User {caller_id} may not act on user {resource_id}",
            code=code,
            details={"caller_id": caller_id, "resource_id": resource_id},
        )
