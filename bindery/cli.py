import asyncio
import logging
from datetime import datetime
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from bindery.config import BinderyConfig, get_config
from bindery.exceptions import BinderyError
from bindery.github import GitHubClient
from bindery.ramp import RampClient

console = Console()
app = typer.Typer(
    name='bindery',
    help='Query the GitHub gists and Ramp users APIs from the command line',
    no_args_is_help=True,
)
gists_app = typer.Typer(help='GitHub gists', no_args_is_help=True)
ramp_app = typer.Typer(help='Ramp developer API', no_args_is_help=True)
app.add_typer(gists_app, name='gists')
app.add_typer(ramp_app, name='ramp')


def _config(ctx: typer.Context) -> BinderyConfig:
    return ctx.obj['config']


def _run(coro) -> Any:
    try:
        return asyncio.run(coro)
    except BinderyError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


def _print_models(models: Any) -> None:
    if isinstance(models, list):
        data = [model.model_dump(mode='json') for model in models]
    else:
        data = models.model_dump(mode='json')
    console.print_json(data=data)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log every HTTP request')
    ] = False,
) -> None:
    """Load configuration shared by all commands."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(message)s',
            handlers=[RichHandler(console=console, show_path=False)],
        )
    try:
        ctx.obj = {'config': get_config(config)}
    except BinderyError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@gists_app.command('list')
def list_gists(
    ctx: typer.Context,
    user: Annotated[
        str | None, typer.Option('--user', '-u', help='List public gists of this user')
    ] = None,
    since: Annotated[
        datetime | None, typer.Option(help='Only gists updated after this time')
    ] = None,
    public: Annotated[bool, typer.Option('--public', help='List public gists')] = False,
    starred: Annotated[
        bool, typer.Option('--starred', help='List starred gists')
    ] = False,
) -> None:
    """List gists, every page at once.

    Examples:
        bindery gists list
        bindery gists list --user octocat --since 2024-01-01
        bindery gists list --starred
    """

    async def fetch():
        async with GitHubClient(_config(ctx).github) as github:
            if user:
                return await github.gists.list_for_user(user, since=since)
            if public:
                return await github.gists.list_public(since=since)
            if starred:
                return await github.gists.list_starred(since=since)
            return await github.gists.list(since=since)

    _print_models(_run(fetch()))


@gists_app.command('get')
def get_gist(
    ctx: typer.Context,
    gist_id: Annotated[str, typer.Argument(help='ID of the gist')],
) -> None:
    """Show a single gist."""

    async def fetch():
        async with GitHubClient(_config(ctx).github) as github:
            return await github.gists.get(gist_id)

    _print_models(_run(fetch()))


@ramp_app.command('users')
def list_users(
    ctx: typer.Context,
    department_id: Annotated[
        str | None, typer.Option(help='Only users of this department')
    ] = None,
    location_id: Annotated[
        str | None, typer.Option(help='Only users at this location')
    ] = None,
) -> None:
    """List all users of the business."""

    async def fetch():
        async with RampClient(_config(ctx).ramp) as ramp:
            return await ramp.users.list_all(
                department_id=department_id, location_id=location_id
            )

    _print_models(_run(fetch()))


@app.command()
def version() -> None:
    """Show the version of bindery."""
    from bindery import __version__

    console.print(f'bindery version: {__version__}')


if __name__ == '__main__':
    app()
