"""Integration tests against a FastAPI mock of the GitHub and Ramp APIs."""

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.testclient import TestClient

from bindery.config import GithubConfig, RampConfig
from bindery.core.client import ResourceClient
from bindery.exceptions import HttpError, PaginationLimitError
from bindery.github import BaseGist, GistsCreateCommentRequest, GitHubClient
from bindery.ramp import PatchUsersIdRequest, RampClient

from .fixtures import comment_payload, gist_payload, gist_simple_payload, ramp_user_payload

BASE_URL = 'http://testserver'

# Mock API state
gist_ids = [f'gist{n}' for n in range(5)]
user_ids = [f'user{n}' for n in range(5)]
starred: set[str] = set()
star_requests: list[dict] = []
user_patches: list[dict] = []

app = FastAPI(title='Mock API')


@app.get('/gists')
def list_gists(request: Request, response: Response, page: int = 1, per_page: int = 2):
    """List gists with Link header pagination."""
    start = (page - 1) * per_page
    chunk = gist_ids[start : start + per_page]
    if start + per_page < len(gist_ids):
        next_url = request.url.include_query_params(page=page + 1, per_page=per_page)
        response.headers['Link'] = f'<{next_url}>; rel="next"'
    return [gist_payload(gist_id) for gist_id in chunk]


@app.get('/gists/endless')
def endless_gists(request: Request, response: Response, page: int = 1):
    """Announce another page forever."""
    next_url = request.url.include_query_params(page=page + 1)
    response.headers['Link'] = f'<{next_url}>; rel="next"'
    return [gist_payload(f'endless{page}')]


@app.get('/gists/{gist_id}')
def get_gist(gist_id: str):
    if gist_id not in gist_ids:
        raise HTTPException(status_code=404, detail='Not Found')
    return gist_simple_payload(gist_id)


@app.post('/gists/{gist_id}/comments', status_code=201)
async def create_comment(gist_id: str, request: Request):
    payload = await request.json()
    return comment_payload(42, payload['body'])


@app.put('/gists/{gist_id}/star', status_code=204)
def star_gist(gist_id: str, request: Request):
    star_requests.append(dict(request.headers))
    starred.add(gist_id)
    return Response(status_code=204)


@app.get('/gists/{gist_id}/star', status_code=204)
def check_star(gist_id: str):
    if gist_id not in starred:
        raise HTTPException(status_code=404, detail='Not Found')
    return Response(status_code=204)


@app.get('/users')
def list_users(request: Request, start: str | None = None, page_size: int = 2):
    """List users with Ramp-style cursor pagination."""
    offset = user_ids.index(start) + 1 if start else 0
    chunk = user_ids[offset : offset + page_size]
    next_url = None
    if offset + page_size < len(user_ids):
        next_url = str(request.url.include_query_params(start=chunk[-1]))
    return {
        'data': [ramp_user_payload(user_id) for user_id in chunk],
        'page': {'next': next_url},
    }


@app.patch('/users/{user_id}')
async def patch_user(user_id: str, request: Request):
    user_patches.append(await request.json())
    return {}


@pytest.fixture
def github():
    """Fixture providing a GitHub client routed to the mock app."""
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    return GitHubClient(GithubConfig(base_url=BASE_URL), http_client=http_client)


@pytest.fixture
def ramp():
    """Fixture providing a Ramp client routed to the mock app."""
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    return RampClient(RampConfig(base_url=BASE_URL), http_client=http_client)


class TestGitHubIntegration:
    """Test the gists bindings against the mock app."""

    @pytest.mark.asyncio
    async def test_list_walks_all_pages(self, github):
        gists = await github.gists.list(per_page=2)
        assert [gist.id for gist in gists] == gist_ids

    @pytest.mark.asyncio
    async def test_list_from_later_page(self, github):
        gists = await github.gists.list(per_page=2, page=2)
        assert [gist.id for gist in gists] == gist_ids[2:]

    @pytest.mark.asyncio
    async def test_get(self, github):
        gist = await github.gists.get('gist3')
        assert gist.id == 'gist3'
        assert gist.files['hello_world.rb'].content

    @pytest.mark.asyncio
    async def test_get_missing(self, github):
        with pytest.raises(HttpError) as exc_info:
            await github.gists.get('nope')
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == {'detail': 'Not Found'}

    @pytest.mark.asyncio
    async def test_create_comment(self, github):
        comment = await github.gists.create_comment(
            'gist1', GistsCreateCommentRequest(body='Looks good')
        )
        assert comment.id == 42
        assert comment.body == 'Looks good'

    @pytest.mark.asyncio
    async def test_star_then_check(self, github):
        with pytest.raises(HttpError):
            await github.gists.check_is_starred('gist4')
        await github.gists.star('gist4')
        assert star_requests[-1]['content-length'] == '0'
        assert await github.gists.check_is_starred('gist4') is None

    @pytest.mark.asyncio
    async def test_endless_pagination_is_bounded(self):
        http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
        github = GitHubClient(
            GithubConfig(base_url=BASE_URL, max_pages=3), http_client=http_client
        )
        with pytest.raises(PaginationLimitError) as exc_info:
            await github.get_all_pages('/gists/endless', BaseGist)
        assert exc_info.value.max_pages == 3


class TestRampIntegration:
    """Test the users bindings against the mock app."""

    @pytest.mark.asyncio
    async def test_list_all_follows_cursor(self, ramp):
        users = await ramp.users.list_all(page_size=2)
        assert [user.id for user in users] == user_ids

    @pytest.mark.asyncio
    async def test_list_single_page(self, ramp):
        users = await ramp.users.list(start='user1', page_size=2)
        assert [user.id for user in users] == ['user2', 'user3']

    @pytest.mark.asyncio
    async def test_update_clears_manager(self, ramp):
        await ramp.users.update('user1', PatchUsersIdRequest(direct_manager_id=None))
        assert user_patches[-1] == {'direct_manager_id': None}


class TestBlockingClient:
    """Test the blocking resource client through FastAPI's TestClient."""

    def test_get_all_pages(self):
        with ResourceClient(BASE_URL, http_client=TestClient(app)) as client:
            gists = client.get_all_pages('/gists', BaseGist, params=[('per_page', 2)])
        assert [gist.id for gist in gists] == gist_ids

    def test_http_error(self):
        client = ResourceClient(BASE_URL, http_client=TestClient(app))
        with pytest.raises(HttpError) as exc_info:
            client.get('/gists/nope')
        assert exc_info.value.status_code == 404
