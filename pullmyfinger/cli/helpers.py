# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared helper functions for CLI commands
"""

import logging
import sys
import webbrowser
from typing import List

from rich.console import Console
from rich.markup import escape

from pullmyfinger.utils.git_tools import GitRepository

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a standardized success message."""
    console.print(f'[green]✓[/green] {escape(message)}')


def print_error(message: str) -> None:
    """Print a standardized error message to stderr."""
    err_console.print(f'[red]✗[/red] {escape(message)}')


def _is_interactive() -> bool:
    """Return True if stdout is a TTY (interactive session)."""
    return getattr(sys.stdout, 'isatty', lambda: False)()


def open_in_browser(url: str) -> bool:
    """Open `url` in the default viewer when running interactively."""
    if not _is_interactive():
        logger.debug('Not a TTY, skipping browser')
        return False
    try:
        return webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning(f'Could not open browser: {e}')
        return False


# ---------------------------------------------------------------------------
# Shell completion
# ---------------------------------------------------------------------------


def complete_remote_branches(ctx, param, incomplete: str) -> List[str]:
    return [b for b in GitRepository().list_remote_branches() if b.startswith(incomplete)]


def complete_remotes(ctx, param, incomplete: str) -> List[str]:
    return [r for r in GitRepository().list_remotes() if r.startswith(incomplete)]
