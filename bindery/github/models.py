from datetime import datetime

from pydantic import Field

from bindery.core.body import ApiModel

__all__ = (
    'BaseGist',
    'ChangeStatus',
    'GistComment',
    'GistCommit',
    'GistFile',
    'GistFileContent',
    'GistFileUpdate',
    'GistSimple',
    'GistsCreateCommentRequest',
    'GistsCreateRequest',
    'GistsUpdateRequest',
    'SimpleUser',
)


class SimpleUser(ApiModel):
    login: str
    id: int
    node_id: str | None = Field(default=None)
    avatar_url: str | None = Field(default=None)
    html_url: str | None = Field(default=None)
    type: str | None = Field(default=None)
    site_admin: bool | None = Field(default=None)


class GistFile(ApiModel):
    filename: str | None = Field(default=None)
    type: str | None = Field(default=None)
    language: str | None = Field(default=None)
    raw_url: str | None = Field(default=None)
    size: int | None = Field(default=None)
    truncated: bool | None = Field(default=None)
    content: str | None = Field(default=None)


class ChangeStatus(ApiModel):
    total: int | None = Field(default=None)
    additions: int | None = Field(default=None)
    deletions: int | None = Field(default=None)


class GistCommit(ApiModel):
    url: str | None = Field(default=None)
    version: str
    user: SimpleUser | None = Field(default=None)
    change_status: ChangeStatus = Field(default_factory=ChangeStatus)
    committed_at: datetime


class BaseGist(ApiModel):
    id: str
    url: str
    node_id: str | None = Field(default=None)
    forks_url: str | None = Field(default=None)
    commits_url: str | None = Field(default=None)
    git_pull_url: str | None = Field(default=None)
    git_push_url: str | None = Field(default=None)
    html_url: str | None = Field(default=None)
    comments_url: str | None = Field(default=None)
    files: dict[str, GistFile]
    public: bool
    created_at: datetime
    updated_at: datetime
    description: str | None = Field(default=None)
    comments: int | None = Field(default=None)
    user: SimpleUser | None = Field(default=None)
    owner: SimpleUser | None = Field(default=None)
    truncated: bool | None = Field(default=None)


class GistSimple(BaseGist):
    """A gist including its history and, for forks, the parent gist."""

    forks: list[dict] | None = Field(default=None)
    history: list[GistCommit] | None = Field(default=None)
    fork_of: BaseGist | None = Field(default=None)


class GistComment(ApiModel):
    id: int
    node_id: str | None = Field(default=None)
    url: str | None = Field(default=None)
    body: str
    user: SimpleUser | None = Field(default=None)
    created_at: datetime
    updated_at: datetime
    author_association: str | None = Field(default=None)


class GistFileContent(ApiModel):
    content: str


class GistsCreateRequest(ApiModel):
    files: dict[str, GistFileContent]
    description: str | None = Field(default=None)
    public: bool | None = Field(default=None)


class GistFileUpdate(ApiModel):
    content: str | None = Field(default=None)
    filename: str | None = Field(default=None)


class GistsUpdateRequest(ApiModel):
    """Changes to a gist.

    A file mapped to ``None`` is deleted from the gist; files that are not
    mentioned are left unchanged.
    """

    description: str | None = Field(default=None)
    files: dict[str, GistFileUpdate | None] | None = Field(default=None)


class GistsCreateCommentRequest(ApiModel):
    body: str
