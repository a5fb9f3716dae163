# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for CLI tests."""

import json
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from pullmyfinger.cli.main import cli


@pytest.fixture
def cli_root():
    return cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def github_env(monkeypatch):
    """Credentials present, no signature, browser enabled."""
    monkeypatch.setenv('GITHUB_LOGIN', 'octocat')
    monkeypatch.setenv('GITHUB_PASSWORD', 'hunter2')
    monkeypatch.delenv('PULLMYFINGER_SIGNATURE', raising=False)
    monkeypatch.delenv('PULLMYFINGER_API_URL', raising=False)
    monkeypatch.delenv('PULLMYFINGER_NO_BROWSER', raising=False)


@pytest.fixture
def in_repo(git_repo, monkeypatch):
    monkeypatch.chdir(git_repo)
    return git_repo


@pytest.fixture
def api_response():
    def _make(status_code=201, body=None, text=None):
        response = Mock()
        response.status_code = status_code
        response.headers = {}
        response.text = text if text is not None else ('' if body is None else json.dumps(body))
        response.json.return_value = body
        return response

    return _make


@pytest.fixture
def created_pr():
    return {
        'number': 42,
        'html_url': 'https://github.com/acme/widgets/pull/42',
        'title': 'Merge octocat:feature-x into release',
    }
