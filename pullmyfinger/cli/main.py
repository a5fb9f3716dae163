# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
pullmyfinger CLI - Main entry point

Usage:
    pullmyfinger <base-branch>                   - Open a pull request into <base-branch>
    pullmyfinger --base <branch> --head <branch> - Explicit base and head
    pullmyfinger --list-pull-requests <remote>   - List open pull requests
    pullmyfinger --list-milestones <remote>      - List open milestones
    pullmyfinger --debug ...                     - Verbose tracing for any of the above
"""

import json
import logging
from typing import Optional, Tuple

import click

from pullmyfinger.branch_resolver import BranchResolver
from pullmyfinger.classes import Command
from pullmyfinger.config import Config
from pullmyfinger.constants import MILESTONES_ITEM_TYPE, OPEN_STATE_QUERY, PROG_NAME, PULL_REQUESTS_ITEM_TYPE, VERSION
from pullmyfinger.errors import PullMyFingerError
from pullmyfinger.request_builder import build_pull_request
from pullmyfinger.utils.git_tools import GitRepository
from pullmyfinger.utils.github_api_tools import create_pull_request, list_repository_items
from pullmyfinger.utils.logging import setup_logging

from .helpers import (
    complete_remote_branches,
    complete_remotes,
    err_console,
    open_in_browser,
    print_error,
    print_success,
)

logger = logging.getLogger(__name__)

LIST_ITEM_TYPES = {
    Command.LIST_PULL_REQUESTS: PULL_REQUESTS_ITEM_TYPE,
    Command.LIST_MILESTONES: MILESTONES_ITEM_TYPE,
}


def select_command(pulls_remote: Optional[str], milestones_remote: Optional[str]) -> Tuple[Command, Optional[str]]:
    """Pick the single action to run; anything without a listing option creates."""
    if pulls_remote:
        return Command.LIST_PULL_REQUESTS, pulls_remote
    if milestones_remote:
        return Command.LIST_MILESTONES, milestones_remote
    return Command.CREATE, None


def run_create(
    config: Config,
    repo: GitRepository,
    base: Optional[str],
    head: Optional[str],
    dry_run: bool = False,
    open_browser: bool = True,
) -> None:
    """Resolve branches, build the payload and create the pull request."""
    spec = BranchResolver(repo).resolve(base, head)
    payload = build_pull_request(spec, config, repo)

    if dry_run:
        click.echo(json.dumps(payload, indent=2))
        err_console.print(f'[dim]Dry run: would POST to {spec.repository_full_name}[/dim]')
        return

    result = create_pull_request(spec, payload, config)
    result.raise_for_failure()

    print_success(f'Created pull request #{result.number} on {spec.repository_full_name}')
    click.echo(result.url)
    if open_browser and config.open_browser:
        open_in_browser(result.url)


def run_list(config: Config, repo: GitRepository, command: Command, remote: str) -> None:
    """Print the open items of one kind for the repository behind `remote`."""
    account, project = BranchResolver(repo).resolve_project(remote)
    output = list_repository_items(account, project, LIST_ITEM_TYPES[command], config, query=OPEN_STATE_QUERY)
    click.echo(output)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('base_branch', required=False, metavar='[BASE]', shell_complete=complete_remote_branches)
@click.option(
    '--base', '-b', 'base_option', metavar='BRANCH', shell_complete=complete_remote_branches,
    help='Branch to merge into, e.g. origin/main',
)
@click.option(
    '--head', '-H', 'head_option', metavar='BRANCH', shell_complete=complete_remote_branches,
    help='Branch holding the changes (default: current branch)',
)
@click.option(
    '--list-pull-requests', 'pulls_remote', metavar='REMOTE', shell_complete=complete_remotes,
    help='List open pull requests for REMOTE',
)
@click.option(
    '--list-milestones', 'milestones_remote', metavar='REMOTE', shell_complete=complete_remotes,
    help='List open milestones for REMOTE',
)
@click.option('--debug', is_flag=True, help='Verbose tracing of git and HTTP calls')
@click.option('--dry-run', is_flag=True, help='Print the pull request payload without sending it')
@click.option('--no-browser', is_flag=True, help='Do not open the created pull request')
@click.version_option(version=VERSION, prog_name=PROG_NAME)
@click.pass_context
def cli(
    ctx,
    base_branch: Optional[str],
    base_option: Optional[str],
    head_option: Optional[str],
    pulls_remote: Optional[str],
    milestones_remote: Optional[str],
    debug: bool,
    dry_run: bool,
    no_browser: bool,
):
    """Open a GitHub pull request from the current branch into BASE.

    \b
    Environment:
        GITHUB_LOGIN              GitHub login (required)
        GITHUB_PASSWORD           Password or token (required)
        PULLMYFINGER_SIGNATURE    Appended to every pull request body

    \b
    Examples:
        pullmyfinger origin/main
        pullmyfinger --base upstream/release --head origin/feature-x
        pullmyfinger --list-pull-requests origin
        pullmyfinger --debug --list-milestones upstream
    """
    setup_logging(debug)
    command, remote = select_command(pulls_remote, milestones_remote)
    logger.debug(f'Dispatching {command.value}')

    try:
        config = Config.from_env()
        config.validate()
        repo = GitRepository()

        if command == Command.CREATE:
            run_create(
                config,
                repo,
                base=base_option or base_branch,
                head=head_option,
                dry_run=dry_run,
                open_browser=not no_browser,
            )
        else:
            run_list(config, repo, command, remote)
    except PullMyFingerError as e:
        logger.debug(f'{type(e).__name__}: {e}')
        print_error(str(e))
        ctx.exit(e.exit_code)


def main():
    """Main entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
