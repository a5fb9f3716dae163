#!/usr/bin/env python3
# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Pytest configuration for utils tests.
"""

import json
from unittest.mock import Mock

import pytest

from pullmyfinger.classes import PullRequestSpec
from pullmyfinger.config import Config


@pytest.fixture
def config():
    return Config(login='octocat', password='hunter2', api_url='https://api.github.com')


@pytest.fixture
def spec():
    return PullRequestSpec(
        remote='origin',
        account='acme',
        project='widgets',
        base='release',
        head='feature-x',
        head_ref='feature-x',
    )


@pytest.fixture
def make_response():
    """Build a requests.Response stand-in with a JSON (or raw) body."""

    def _make(status_code=200, body=None, text=None, headers=None):
        response = Mock()
        response.status_code = status_code
        response.headers = headers or {}
        if text is None:
            text = '' if body is None else json.dumps(body)
        response.text = text
        if body is not None:
            response.json.return_value = body
        else:
            response.json.side_effect = ValueError('No JSON object could be decoded')
        return response

    return _make
