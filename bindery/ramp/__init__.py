"""Bindings for the Ramp users API."""

from bindery.ramp.client import RampClient
from bindery.ramp.models import (
    DeferredTaskData,
    DeferredTaskStatus,
    GetUsersDeferredStatusIdResponse,
    GetUsersResponse,
    PageInfo,
    PatchUsersIdRequest,
    PostUsersDeferredRequest,
    User,
    UserRole,
    UserStatus,
)
from bindery.ramp.users import Users

__all__ = [
    'DeferredTaskData',
    'DeferredTaskStatus',
    'GetUsersDeferredStatusIdResponse',
    'GetUsersResponse',
    'PageInfo',
    'PatchUsersIdRequest',
    'PostUsersDeferredRequest',
    'RampClient',
    'User',
    'UserRole',
    'UserStatus',
    'Users',
]
