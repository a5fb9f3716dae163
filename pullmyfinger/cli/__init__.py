# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
pullmyfinger CLI

Usage:
    pullmyfinger <base-branch>                   # Open a pull request from the current branch
    pullmyfinger --base <branch> --head <branch> # Explicit base and head
    pullmyfinger --list-pull-requests <remote>   # List open pull requests
    pullmyfinger --list-milestones <remote>      # List open milestones
"""

from .main import cli, main

__all__ = ['cli', 'main']
