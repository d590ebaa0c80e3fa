"""Bindings for the GitHub gists API."""

from bindery.github.client import GitHubClient
from bindery.github.gists import Gists
from bindery.github.models import (
    BaseGist,
    GistComment,
    GistCommit,
    GistFile,
    GistFileContent,
    GistFileUpdate,
    GistSimple,
    GistsCreateCommentRequest,
    GistsCreateRequest,
    GistsUpdateRequest,
    SimpleUser,
)

__all__ = [
    'BaseGist',
    'GistComment',
    'GistCommit',
    'GistFile',
    'GistFileContent',
    'GistFileUpdate',
    'GistSimple',
    'Gists',
    'GistsCreateCommentRequest',
    'GistsCreateRequest',
    'GistsUpdateRequest',
    'GitHubClient',
    'SimpleUser',
]
