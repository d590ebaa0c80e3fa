from enum import Enum

from pydantic import Field

from bindery.core.body import ApiModel

__all__ = (
    'DeferredTaskData',
    'DeferredTaskStatus',
    'GetUsersDeferredStatusIdResponse',
    'GetUsersResponse',
    'PageInfo',
    'PatchUsersIdRequest',
    'PostUsersDeferredRequest',
    'User',
    'UserRole',
    'UserStatus',
)


class UserRole(str, Enum):
    BUSINESS_ADMIN = 'BUSINESS_ADMIN'
    BUSINESS_BOOKKEEPER = 'BUSINESS_BOOKKEEPER'
    BUSINESS_OWNER = 'BUSINESS_OWNER'
    BUSINESS_USER = 'BUSINESS_USER'
    GUEST_USER = 'GUEST_USER'


class UserStatus(str, Enum):
    INVITE_PENDING = 'INVITE_PENDING'
    INVITE_EXPIRED = 'INVITE_EXPIRED'
    USER_ONBOARDING = 'USER_ONBOARDING'
    USER_ACTIVE = 'USER_ACTIVE'
    USER_SUSPENDED = 'USER_SUSPENDED'


class DeferredTaskStatus(str, Enum):
    STARTED = 'STARTED'
    IN_PROGRESS = 'IN_PROGRESS'
    SUCCESS = 'SUCCESS'
    ERROR = 'ERROR'


class User(ApiModel):
    id: str
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    email: str | None = Field(default=None)
    phone: str | None = Field(default=None)
    role: UserRole | None = Field(default=None)
    status: UserStatus | None = Field(default=None)
    business_id: str | None = Field(default=None)
    department_id: str | None = Field(default=None)
    location_id: str | None = Field(default=None)
    manager_id: str | None = Field(default=None)
    is_manager: bool | None = Field(default=None)


class PageInfo(ApiModel):
    next: str | None = Field(default=None)


class GetUsersResponse(ApiModel):
    """One page of users with the link to the following page."""

    data: list[User]
    page: PageInfo = Field(default_factory=PageInfo)


class PatchUsersIdRequest(ApiModel):
    """Changes to an existing user.

    Setting ``direct_manager_id`` to ``None`` explicitly removes the user's
    manager; leaving it unset keeps the current one.
    """

    __nullable_fields__ = frozenset({'direct_manager_id'})

    department_id: str | None = Field(default=None)
    direct_manager_id: str | None = Field(default=None)
    location_id: str | None = Field(default=None)
    role: UserRole | None = Field(default=None)


class PostUsersDeferredRequest(ApiModel):
    email: str
    first_name: str
    last_name: str
    role: UserRole
    department_id: str | None = Field(default=None)
    direct_manager_id: str | None = Field(default=None)
    location_id: str | None = Field(default=None)
    idempotency_key: str | None = Field(default=None)


class DeferredTaskData(ApiModel):
    user_id: str | None = Field(default=None)
    error: str | None = Field(default=None)


class GetUsersDeferredStatusIdResponse(ApiModel):
    id: str
    status: DeferredTaskStatus
    data: DeferredTaskData | None = Field(default=None)
