# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Tests for environment configuration loading and validation.
"""

from unittest.mock import patch

import pytest

from pullmyfinger.config import Config
from pullmyfinger.constants import BASE_GITHUB_API_URL, EXIT_PRECONDITION_FAILURE
from pullmyfinger.errors import ConfigurationError

FULL_ENV = {
    'GITHUB_LOGIN': 'octocat',
    'GITHUB_PASSWORD': 'hunter2',
    'PULLMYFINGER_SIGNATURE': 'Cheers',
}


class TestFromEnv:
    def test_reads_variables(self):
        config = Config.from_env(FULL_ENV)
        assert config.login == 'octocat'
        assert config.password == 'hunter2'
        assert config.signature == 'Cheers'
        assert config.api_url == BASE_GITHUB_API_URL
        assert config.open_browser is True
        assert config.auth == ('octocat', 'hunter2')

    def test_api_url_override(self):
        config = Config.from_env({**FULL_ENV, 'PULLMYFINGER_API_URL': 'https://ghe.example.com/api/v3/'})
        assert config.api_url == 'https://ghe.example.com/api/v3'

    @pytest.mark.parametrize('value, expected', [('1', False), ('yes', False), ('0', True), ('false', True)])
    def test_no_browser(self, value, expected):
        config = Config.from_env({**FULL_ENV, 'PULLMYFINGER_NO_BROWSER': value})
        assert config.open_browser is expected

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv('GITHUB_LOGIN', 'from-env')
        monkeypatch.delenv('GITHUB_PASSWORD', raising=False)
        config = Config.from_env()
        assert config.login == 'from-env'
        assert config.password == ''


class TestValidate:
    @patch('pullmyfinger.config.shutil.which', return_value='/usr/bin/git')
    def test_valid(self, mock_which):
        Config.from_env(FULL_ENV).validate()
        mock_which.assert_called_with('git')

    @patch('pullmyfinger.config.shutil.which', return_value='/usr/bin/git')
    def test_missing_credentials_listed(self, mock_which):
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env({}).validate()
        assert 'GITHUB_LOGIN' in str(exc_info.value)
        assert 'GITHUB_PASSWORD' in str(exc_info.value)
        assert exc_info.value.exit_code == EXIT_PRECONDITION_FAILURE

    @patch('pullmyfinger.config.shutil.which', return_value='/usr/bin/git')
    def test_missing_password_only(self, mock_which):
        with pytest.raises(ConfigurationError, match='GITHUB_PASSWORD'):
            Config.from_env({'GITHUB_LOGIN': 'octocat'}).validate()

    @patch('pullmyfinger.config.shutil.which', return_value=None)
    def test_missing_git(self, mock_which):
        with pytest.raises(ConfigurationError, match='git'):
            Config.from_env(FULL_ENV).validate()
