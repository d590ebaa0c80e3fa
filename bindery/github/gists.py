from __future__ import annotations

from datetime import datetime

from bindery.core.body import EMPTY_BODY, JsonBody
from bindery.core.client import AsyncResourceClient
from bindery.core.urls import expand_path, with_query
from bindery.github.models import (
    BaseGist,
    GistComment,
    GistCommit,
    GistSimple,
    GistsCreateCommentRequest,
    GistsCreateRequest,
    GistsUpdateRequest,
)

__all__ = ('Gists',)


def _page_query(
    page: int | None, per_page: int | None, since: datetime | None = None
) -> list[tuple[str, object]]:
    return [('page', page), ('per_page', per_page), ('since', since)]


class Gists:
    """Endpoints of the gists API.

    List methods walk every page from ``page`` onwards by following the
    ``Link`` header, so they return the whole collection.
    """

    def __init__(self, client: AsyncResourceClient) -> None:
        self.client = client

    async def list(
        self,
        since: datetime | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[BaseGist]:
        """List gists for the authenticated user.

        Called anonymously, this returns all public gists.

        Args:
            since: Only show gists updated after the given time.
            per_page: Results per page (max 100).
            page: Page number of the results to fetch first.
        """
        url = with_query('/gists', _page_query(page, per_page, since))
        return await self.client.get_all_pages(url, BaseGist)

    async def create(self, body: GistsCreateRequest) -> GistSimple:
        """Create a gist with one or more files."""
        return await self.client.post('/gists', JsonBody.from_model(body), GistSimple)

    async def list_public(
        self,
        since: datetime | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[BaseGist]:
        """List public gists, most recently updated first.

        The API serves at most 3000 public gists through pagination.
        """
        url = with_query('/gists/public', _page_query(page, per_page, since))
        return await self.client.get_all_pages(url, BaseGist)

    async def list_starred(
        self,
        since: datetime | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[BaseGist]:
        """List the authenticated user's starred gists."""
        url = with_query('/gists/starred', _page_query(page, per_page, since))
        return await self.client.get_all_pages(url, BaseGist)

    async def get(self, gist_id: str) -> GistSimple:
        url = expand_path('/gists/{gist_id}', gist_id=gist_id)
        return await self.client.get(url, GistSimple)

    async def delete(self, gist_id: str) -> None:
        url = expand_path('/gists/{gist_id}', gist_id=gist_id)
        await self.client.delete(url)

    async def update(self, gist_id: str, body: GistsUpdateRequest) -> GistSimple:
        """Update a gist's description, or update, rename or delete its files.

        Files from the previous version that are not mentioned in ``body``
        are left unchanged.
        """
        url = expand_path('/gists/{gist_id}', gist_id=gist_id)
        return await self.client.patch(url, JsonBody.from_model(body), GistSimple)

    async def list_comments(
        self, gist_id: str, per_page: int | None = None, page: int | None = None
    ) -> list[GistComment]:
        url = with_query(
            expand_path('/gists/{gist_id}/comments', gist_id=gist_id),
            _page_query(page, per_page),
        )
        return await self.client.get_all_pages(url, GistComment)

    async def create_comment(
        self, gist_id: str, body: GistsCreateCommentRequest
    ) -> GistComment:
        url = expand_path('/gists/{gist_id}/comments', gist_id=gist_id)
        return await self.client.post(url, JsonBody.from_model(body), GistComment)

    async def get_comment(self, gist_id: str, comment_id: int) -> GistComment:
        url = expand_path(
            '/gists/{gist_id}/comments/{comment_id}',
            gist_id=gist_id,
            comment_id=comment_id,
        )
        return await self.client.get(url, GistComment)

    async def delete_comment(self, gist_id: str, comment_id: int) -> None:
        url = expand_path(
            '/gists/{gist_id}/comments/{comment_id}',
            gist_id=gist_id,
            comment_id=comment_id,
        )
        await self.client.delete(url)

    async def update_comment(
        self, gist_id: str, comment_id: int, body: GistsCreateCommentRequest
    ) -> GistComment:
        url = expand_path(
            '/gists/{gist_id}/comments/{comment_id}',
            gist_id=gist_id,
            comment_id=comment_id,
        )
        return await self.client.patch(url, JsonBody.from_model(body), GistComment)

    async def list_commits(
        self, gist_id: str, per_page: int | None = None, page: int | None = None
    ) -> list[GistCommit]:
        url = with_query(
            expand_path('/gists/{gist_id}/commits', gist_id=gist_id),
            _page_query(page, per_page),
        )
        return await self.client.get_all_pages(url, GistCommit)

    async def list_forks(
        self, gist_id: str, per_page: int | None = None, page: int | None = None
    ) -> list[GistSimple]:
        url = with_query(
            expand_path('/gists/{gist_id}/forks', gist_id=gist_id),
            _page_query(page, per_page),
        )
        return await self.client.get_all_pages(url, GistSimple)

    async def fork(self, gist_id: str) -> BaseGist:
        url = expand_path('/gists/{gist_id}/forks', gist_id=gist_id)
        return await self.client.post(url, response_type=BaseGist)

    async def check_is_starred(self, gist_id: str) -> None:
        """Check if a gist is starred.

        Returns normally when it is; a gist that is not starred answers
        with 404 and raises :class:`~bindery.exceptions.HttpError`.
        """
        url = expand_path('/gists/{gist_id}/star', gist_id=gist_id)
        await self.client.get(url)

    async def star(self, gist_id: str) -> None:
        """Star a gist.

        The endpoint requires ``Content-Length: 0``, so an explicit empty
        body is sent.
        """
        url = expand_path('/gists/{gist_id}/star', gist_id=gist_id)
        await self.client.put(url, EMPTY_BODY)

    async def unstar(self, gist_id: str) -> None:
        url = expand_path('/gists/{gist_id}/star', gist_id=gist_id)
        await self.client.delete(url)

    async def get_revision(self, gist_id: str, sha: str) -> GistSimple:
        url = expand_path('/gists/{gist_id}/{sha}', gist_id=gist_id, sha=sha)
        return await self.client.get(url, GistSimple)

    async def list_for_user(
        self,
        username: str,
        since: datetime | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[BaseGist]:
        """List public gists for the specified user."""
        url = with_query(
            expand_path('/users/{username}/gists', username=username),
            _page_query(page, per_page, since),
        )
        return await self.client.get_all_pages(url, BaseGist)
