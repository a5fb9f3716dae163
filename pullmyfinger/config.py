# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Runtime configuration read from the environment.

Recognized variables:
    GITHUB_LOGIN              Account used for basic auth and the head prefix (required)
    GITHUB_PASSWORD           Password or token for basic auth (required)
    PULLMYFINGER_SIGNATURE    Text appended verbatim to every pull request body
    PULLMYFINGER_API_URL      API root, for GitHub Enterprise hosts
    PULLMYFINGER_NO_BROWSER   Set to disable opening the created pull request
"""

import logging
import os
import shutil
from dataclasses import dataclass
from typing import List, Mapping, Optional

from pullmyfinger.constants import (
    BASE_GITHUB_API_URL,
    ENV_API_URL,
    ENV_LOGIN,
    ENV_NO_BROWSER,
    ENV_PASSWORD,
    ENV_SIGNATURE,
    REQUIRED_TOOLS,
)
from pullmyfinger.errors import ConfigurationError
from pullmyfinger.utils.utils import mask_secret

logger = logging.getLogger(__name__)

_FALSY = ('', '0', 'false', 'no', 'off')


@dataclass(frozen=True)
class Config:
    """Settings for one invocation, populated once at startup."""

    login: str = ''
    password: str = ''
    signature: str = ''
    api_url: str = BASE_GITHUB_API_URL
    open_browser: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        env = os.environ if environ is None else environ
        no_browser = env.get(ENV_NO_BROWSER, '').strip().lower()
        return cls(
            login=env.get(ENV_LOGIN, '').strip(),
            password=env.get(ENV_PASSWORD, ''),
            signature=env.get(ENV_SIGNATURE, ''),
            api_url=(env.get(ENV_API_URL, '').strip() or BASE_GITHUB_API_URL).rstrip('/'),
            open_browser=no_browser in _FALSY,
        )

    @property
    def auth(self):
        return (self.login, self.password)

    def missing_variables(self) -> List[str]:
        missing = []
        if not self.login:
            missing.append(ENV_LOGIN)
        if not self.password:
            missing.append(ENV_PASSWORD)
        return missing

    def validate(self) -> None:
        """Check credentials and required tools.

        Raises:
            ConfigurationError: naming every missing variable or tool.
        """
        missing = self.missing_variables()
        if missing:
            raise ConfigurationError(f'Missing required environment variable(s): {", ".join(missing)}')

        missing_tools = [tool for tool in REQUIRED_TOOLS if shutil.which(tool) is None]
        if missing_tools:
            raise ConfigurationError(f'Required tool(s) not found on PATH: {", ".join(missing_tools)}')

        logger.debug(f'Config: login={self.login} password={mask_secret(self.password)} api_url={self.api_url}')
