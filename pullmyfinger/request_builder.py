# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Build the pull request creation payload from a resolved PullRequestSpec.
"""

import logging
from typing import Dict, Optional

from pullmyfinger.classes import PullRequestSpec
from pullmyfinger.config import Config
from pullmyfinger.constants import PR_BODY_TEMPLATE, PR_TITLE_TEMPLATE
from pullmyfinger.errors import InvalidBranchReference
from pullmyfinger.utils.git_tools import GitRepository

logger = logging.getLogger(__name__)

# Characters removed from commit subjects before they are embedded in the body
STRIPPED_SUBJECT_CHARS = '"'


def clean_subject(subject: Optional[str]) -> str:
    """Remove quote characters and surrounding whitespace from a commit subject."""
    if not subject:
        return ''
    return subject.translate({ord(c): None for c in STRIPPED_SUBJECT_CHARS}).strip()


def build_title(spec: PullRequestSpec, login: str) -> str:
    return PR_TITLE_TEMPLATE.format(login=login, head=spec.head, base=spec.base)


def build_body(spec: PullRequestSpec, subject: str, signature: str = '') -> str:
    body = PR_BODY_TEMPLATE.format(base=spec.base, subject=clean_subject(subject))
    if signature:
        body = f'{body}\n\n{signature}'
    return body


def build_payload(spec: PullRequestSpec, config: Config, subject: str) -> Dict[str, str]:
    """Fill title/body on `spec` and return the JSON payload for the API.

    `head` is sent as `<login>:<branch>` so the request works from forks.
    """
    spec.title = build_title(spec, config.login)
    spec.body = build_body(spec, subject, config.signature)
    return {
        'title': spec.title,
        'body': spec.body,
        'head': f'{config.login}:{spec.head}',
        'base': spec.base,
    }


def build_pull_request(spec: PullRequestSpec, config: Config, repo: Optional[GitRepository] = None) -> Dict[str, str]:
    """Read the latest commit subject on the head branch and build the payload.

    Raises:
        InvalidBranchReference: when the head has no readable commit.
    """
    repo = repo or GitRepository()
    head_ref = spec.head_ref or spec.head
    subject = repo.get_commit_subject(head_ref)
    if subject is None:
        raise InvalidBranchReference(head_ref, 'has no readable commit')
    logger.debug(f'Latest commit on {head_ref}: {subject}')
    return build_payload(spec, config, subject)
