from __future__ import annotations

from bindery.core.body import JsonBody
from bindery.core.client import AsyncResourceClient
from bindery.core.urls import expand_path, with_query
from bindery.ramp.models import (
    GetUsersDeferredStatusIdResponse,
    GetUsersResponse,
    PatchUsersIdRequest,
    PostUsersDeferredRequest,
    User,
)

__all__ = ('Users',)


class Users:
    """Endpoints of the Ramp users API."""

    def __init__(self, client: AsyncResourceClient) -> None:
        self.client = client

    async def get(self, user_id: str) -> User:
        """Retrieve the user with the matching user ID."""
        url = expand_path('/users/{id}', id=user_id)
        return await self.client.get(url, User)

    async def delete(self, user_id: str) -> None:
        """Suspend a user.

        The user's cards are kept. Suspension cannot be undone through the API.
        """
        url = expand_path('/users/{id}', id=user_id)
        await self.client.delete(url)

    async def update(self, user_id: str, body: PatchUsersIdRequest) -> None:
        url = expand_path('/users/{id}', id=user_id)
        await self.client.patch(url, JsonBody.from_model(body))

    async def list(
        self,
        start: str | None = None,
        page_size: int | None = None,
        department_id: str | None = None,
        location_id: str | None = None,
    ) -> list[User]:
        """List one page of the business's users.

        Args:
            start: ID of the last user of the previous page.
            page_size: Number of users per page, between 2 and 10,000.
                The API defaults to 1,000.
            department_id: Only users of this department.
            location_id: Only users at this location.
        """
        url = with_query(
            '/users',
            [
                ('department_id', department_id),
                ('location_id', location_id),
                ('page_size', page_size),
                ('start', start),
            ],
        )
        response = await self.client.get(url, GetUsersResponse)
        return response.data

    async def list_all(
        self,
        department_id: str | None = None,
        location_id: str | None = None,
        page_size: int | None = None,
    ) -> list[User]:
        """List all users of the business.

        As opposed to :meth:`list`, this follows ``page.next`` and returns
        every page at once.
        """
        url = with_query(
            '/users',
            [
                ('department_id', department_id),
                ('location_id', location_id),
                ('page_size', page_size),
            ],
        )
        return await self.client.get_all_pages(url, User)

    async def invite(self, body: PostUsersDeferredRequest) -> User:
        """Invite a new user.

        The user receives an invite to accept. Department, location and
        manager are set when given.
        """
        return await self.client.post('/users/deferred', JsonBody.from_model(body), User)

    async def get_deferred_status(self, task_id: str) -> GetUsersDeferredStatusIdResponse:
        url = expand_path('/users/deferred/status/{id}', id=task_id)
        return await self.client.get(url, GetUsersDeferredStatusIdResponse)
