from datetime import datetime
from typing import Optional

from userhub.domain.shared.time import utc_now
from userhub.domain.user.exceptions import UserAlreadyActiveError


class User:
    """
    User aggregate root.

    Holds identity, credential hash and activation state. A user is created
    inactive with an activation token; activating clears the token. The two
    fields always move together: ``inactive`` is true exactly when an
    activation token is present.

    The numeric id is assigned by the store on first save and is ``None``
    until then.
    """

    def __init__(  # NOQA: PLR0913
        self,
        username: str,
        email: str,
        password_hash: str,
        inactive: bool = True,
        activation_token: Optional[str] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if inactive != (activation_token is not None):
            msg = "inactive users need an activation token, active users must not have one"
            raise ValueError(msg)

        self._id = id
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._inactive = inactive
        self._activation_token = activation_token
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def inactive(self) -> bool:
        return self._inactive

    @property
    def activation_token(self) -> Optional[str]:
        return self._activation_token

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def activate(self) -> None:
        if not self._inactive:
            raise UserAlreadyActiveError(self._id)
        self._inactive = False
        self._activation_token = None
        self._updated_at = utc_now()

    def rename(self, username: str) -> None:
        self._username = username
        self._updated_at = utc_now()

    @classmethod
    def register(
        cls,
        username: str,
        email: str,
        password_hash: str,
        activation_token: str,
    ) -> "User":
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            inactive=True,
            activation_token=activation_token,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        username: str,
        email: str,
        password_hash: str,
        inactive: bool,
        activation_token: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            inactive=inactive,
            activation_token=activation_token,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username!r}, inactive={self._inactive})"
