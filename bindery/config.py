import json
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bindery.core.pagination import DEFAULT_MAX_PAGES
from bindery.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['bindery.yaml', 'bindery.yml']

GITHUB_API_URL = 'https://api.github.com'
RAMP_API_URL = 'https://api.ramp.com/developer/v1'


class ServiceConfig(BaseModel):
    """Connection settings for one remote API."""

    base_url: str = Field(..., description='Base URL of the API.')

    token: SecretStr | None = Field(
        None, description='Bearer token sent in the Authorization header.'
    )

    timeout: float = Field(
        30.0, gt=0, description='Per-request timeout in seconds.'
    )

    max_pages: int = Field(
        DEFAULT_MAX_PAGES,
        ge=1,
        description='Maximum number of pages fetched for one collection.',
    )

    user_agent: str = Field('bindery', description='User-Agent header value.')


class GithubConfig(ServiceConfig):
    base_url: str = Field(GITHUB_API_URL, description='Base URL of the GitHub REST API.')


class RampConfig(ServiceConfig):
    base_url: str = Field(RAMP_API_URL, description='Base URL of the Ramp developer API.')


class BinderyConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='BINDERY_', env_nested_delimiter='__', extra='ignore'
    )

    github: GithubConfig = Field(
        default_factory=GithubConfig,
        description='Settings for the GitHub REST API.',
    )

    ramp: RampConfig = Field(
        default_factory=RampConfig,
        description='Settings for the Ramp developer API.',
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load(path: str | Path) -> dict:
    try:
        if str(path).endswith('.json'):
            return load_json(path)
        return load_yaml(path)
    except (yaml.YAMLError, json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(
            f'Failed to read configuration: {e}', config_path=str(path)
        ) from e


def _validate(data: dict, source: str) -> BinderyConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(
            f'Expected a mapping, got {type(data).__name__}', config_path=source
        )
    try:
        return BinderyConfig(**data)
    except ValidationError as e:
        fields = ', '.join('.'.join(str(p) for p in err['loc']) for err in e.errors())
        raise ConfigurationError(
            'Invalid configuration', config_path=source, field=fields
        ) from e


def get_config(path: str | None = None) -> BinderyConfig:
    """Load configuration from a file, pyproject.toml or the environment.

    Values from the environment (``BINDERY_GITHUB__TOKEN`` and friends) fill
    in whatever the file leaves out.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(_load(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(_load(path), str(path))

    path = Path(cwd) / 'pyproject.toml'

    if path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f'Failed to read configuration: {e}', config_path=str(path)
            ) from e
        tools = pyproject.get('tool', {})

        if 'bindery' in tools:
            return _validate(tools['bindery'], str(path))

    return _validate({}, 'environment')
