"""Test fixtures for bindery tests.

This module provides sample API payloads and helpers that route httpx
clients to in-process request handlers.
"""

from collections.abc import Callable

import httpx

GITHUB_URL = 'https://api.github.com'
RAMP_URL = 'https://api.ramp.com/developer/v1'

OCTOCAT = {
    'login': 'octocat',
    'id': 1,
    'node_id': 'MDQ6VXNlcjE=',
    'avatar_url': 'https://github.com/images/error/octocat_happy.gif',
    'html_url': 'https://github.com/octocat',
    'type': 'User',
    'site_admin': False,
}


def gist_payload(gist_id: str = 'aa5a315d61ae9438b18d', **overrides) -> dict:
    """A gist as returned by the list endpoints."""
    payload = {
        'id': gist_id,
        'url': f'{GITHUB_URL}/gists/{gist_id}',
        'node_id': 'MDQ6R2lzdGFhNWEzMTVkNjFhZTk0MzhiMThk',
        'forks_url': f'{GITHUB_URL}/gists/{gist_id}/forks',
        'commits_url': f'{GITHUB_URL}/gists/{gist_id}/commits',
        'html_url': f'https://gist.github.com/{gist_id}',
        'files': {
            'hello_world.rb': {
                'filename': 'hello_world.rb',
                'type': 'application/x-ruby',
                'language': 'Ruby',
                'raw_url': f'https://gist.githubusercontent.com/octocat/{gist_id}/raw/hello_world.rb',
                'size': 167,
            }
        },
        'public': True,
        'created_at': '2010-04-14T02:15:15Z',
        'updated_at': '2011-06-20T11:34:15Z',
        'description': 'Hello World Examples',
        'comments': 0,
        'user': None,
        'owner': OCTOCAT,
        'truncated': False,
    }
    payload.update(overrides)
    return payload


def gist_simple_payload(gist_id: str = 'aa5a315d61ae9438b18d', **overrides) -> dict:
    """A single gist with its file contents and history."""
    payload = gist_payload(gist_id)
    payload['files']['hello_world.rb']['content'] = 'class HelloWorld\nend\n'
    payload['history'] = [commit_payload()]
    payload['forks'] = []
    payload.update(overrides)
    return payload


def comment_payload(comment_id: int = 1, body: str = 'Just commenting for the sake of commenting') -> dict:
    return {
        'id': comment_id,
        'node_id': 'MDExOkdpc3RDb21tZW50MQ==',
        'url': f'{GITHUB_URL}/gists/a6db0bec360bb87e9418/comments/{comment_id}',
        'body': body,
        'user': OCTOCAT,
        'created_at': '2011-04-18T23:23:56Z',
        'updated_at': '2011-04-18T23:23:56Z',
        'author_association': 'COLLABORATOR',
    }


def commit_payload(version: str = '57a7f021a713b1c5a6a199b54cc514735d2d462f') -> dict:
    return {
        'url': f'{GITHUB_URL}/gists/aa5a315d61ae9438b18d/{version}',
        'version': version,
        'user': OCTOCAT,
        'change_status': {'deletions': 0, 'additions': 180, 'total': 180},
        'committed_at': '2010-04-14T02:15:15Z',
    }


def ramp_user_payload(user_id: str = 'a1b2c3', **overrides) -> dict:
    payload = {
        'id': user_id,
        'first_name': 'Ada',
        'last_name': 'Lovelace',
        'email': f'{user_id}@example.com',
        'role': 'BUSINESS_USER',
        'status': 'USER_ACTIVE',
        'business_id': 'biz-1',
        'department_id': 'dep-1',
        'location_id': 'loc-1',
        'manager_id': None,
        'is_manager': False,
    }
    payload.update(overrides)
    return payload


Handler = Callable[[httpx.Request], httpx.Response]


def mock_client(handler: Handler) -> httpx.Client:
    """A blocking httpx client answering every request with ``handler``."""
    return httpx.Client(transport=httpx.MockTransport(handler))


def mock_async_client(handler: Handler) -> httpx.AsyncClient:
    """An async httpx client answering every request with ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class RecordingHandler:
    """Answers requests from a list of responses and records the requests."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f'Unexpected request: {request.method} {request.url}')
        return self.responses.pop(0)
