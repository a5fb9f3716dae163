# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Parsing helpers for remote-tracking refs and repository URLs.

Nothing here touches the repository or the network.
"""

import re
from typing import Tuple

from pullmyfinger.classes import BranchRef
from pullmyfinger.constants import LOCAL_REF_PREFIX, REMOTE_REF_PREFIX
from pullmyfinger.errors import InvalidBranchReference, UnresolvableRemote

# https://host/account/project.git, ssh://git@host:22/account/project.git, ...
URL_REMOTE_RE = re.compile(r'^(?:https?|ssh|git|git\+ssh)://(?:[^@/\s]+@)?(?P<host>[^/\s]+)/(?P<path>\S+)$')
# git@host:account/project.git
SCP_REMOTE_RE = re.compile(r'^(?:[\w.+-]+@)?(?P<host>[\w.-]+):(?P<path>[^/\s]\S*)$')


def split_remote_ref(ref: str) -> BranchRef:
    """Split a remote-tracking ref into remote and branch at the first '/'.

    Accepts both `refs/remotes/origin/main` and `origin/main`. Remote names
    are assumed not to contain '/', branch names may.

    Raises:
        InvalidBranchReference: if there is no remote or branch part.
    """
    name = ref[len(REMOTE_REF_PREFIX):] if ref.startswith(REMOTE_REF_PREFIX) else ref
    remote, sep, branch = name.partition('/')
    if not sep or not remote or not branch:
        raise InvalidBranchReference(ref, 'is not a remote-tracking branch (expected <remote>/<branch>)')
    return BranchRef(remote=remote, branch=branch)


def branch_name_from_ref(full_ref: str) -> str:
    """Plain branch name for a local or remote-tracking ref."""
    if full_ref.startswith(LOCAL_REF_PREFIX):
        return full_ref[len(LOCAL_REF_PREFIX):]
    if full_ref.startswith(REMOTE_REF_PREFIX):
        return split_remote_ref(full_ref).branch
    return full_ref


def parse_remote_url(url: str) -> Tuple[str, str]:
    """Extract (account, project) from a repository URL.

    Args:
        url (str): SSH-style `git@host:account/project.git` or URL-style
            `https://host/account/project.git`.

    Returns:
        Tuple[str, str]: The owning account and the project name.

    Raises:
        UnresolvableRemote: for URL shapes that are not recognized.
    """
    url = url.strip()
    match = URL_REMOTE_RE.match(url) or SCP_REMOTE_RE.match(url)
    if not match:
        raise UnresolvableRemote(f"Unrecognized repository URL: '{url}'")

    path = match.group('path').rstrip('/')
    if path.endswith('.git'):
        path = path[: -len('.git')]
    segments = [s for s in path.split('/') if s]
    if len(segments) < 2:
        raise UnresolvableRemote(f"Repository URL has no account/project path: '{url}'")

    return segments[-2], segments[-1]
