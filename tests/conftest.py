# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures: a throwaway git repository with a bare remote."""

import shutil
import subprocess

import pytest

from pullmyfinger.utils.git_tools import GitRepository

GITHUB_LOGIN = 'octocat'
REMOTE_URL = 'git@github.com:acme/widgets.git'


def _git(cwd, *args):
    return subprocess.run(
        ['git', '-c', 'commit.gpgsign=false', *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    ).stdout.strip()


def _commit(cwd, filename, message):
    (cwd / filename).write_text(message)
    _git(cwd, 'add', filename)
    _git(cwd, 'commit', '-q', '-m', message)


@pytest.fixture
def git_repo(tmp_path):
    """Working copy with origin/main, origin/release and origin/feature-x.

    feature-x is checked out; its latest commit subject contains quotes.
    The push URL of origin points at GitHub so the project can be derived.
    """
    if shutil.which('git') is None:
        pytest.skip('git is not installed')

    bare = tmp_path / 'remote.git'
    work = tmp_path / 'work'
    work.mkdir()
    _git(tmp_path, 'init', '-q', '--bare', str(bare))

    _git(work, 'init', '-q')
    _git(work, 'config', 'user.email', 'dev@example.com')
    _git(work, 'config', 'user.name', 'Dev')
    _git(work, 'symbolic-ref', 'HEAD', 'refs/heads/main')
    _commit(work, 'README', 'Initial commit')
    _git(work, 'remote', 'add', 'origin', str(bare))
    _git(work, 'push', '-q', 'origin', 'main')

    _git(work, 'checkout', '-q', '-b', 'release')
    _commit(work, 'CHANGES', 'Prepare release')
    _git(work, 'push', '-q', '-u', 'origin', 'release')

    _git(work, 'checkout', '-q', '-b', 'feature-x')
    _commit(work, 'feature.txt', 'Fix "quoted" bug')
    _git(work, 'push', '-q', '-u', 'origin', 'feature-x')

    # Set after pushing so pushes above still go to the bare repo
    _git(work, 'config', 'remote.origin.pushurl', REMOTE_URL)
    return work


@pytest.fixture
def repo(git_repo):
    return GitRepository(str(git_repo))


@pytest.fixture
def detach_head(git_repo):
    def _detach():
        _git(git_repo, 'checkout', '-q', '--detach', 'HEAD')

    return _detach


@pytest.fixture
def new_branch_with_commit(git_repo):
    """Check out a new local branch and commit one file on it."""

    def _create(branch, path, message):
        _git(git_repo, 'checkout', '-q', '-b', branch)
        target = git_repo / path
        target.parent.mkdir(parents=True, exist_ok=True)
        _commit(git_repo, path, message)

    return _create
