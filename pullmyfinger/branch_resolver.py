# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Turn user-supplied branch tokens and local repository state into a
partially filled PullRequestSpec (remote, account, project, base, head).
"""

import logging
from typing import Optional, Tuple

from pullmyfinger.classes import BranchRef, PullRequestSpec
from pullmyfinger.constants import LOCAL_REF_PREFIX, REMOTE_REF_PREFIX
from pullmyfinger.errors import (
    DetachedHeadError,
    InvalidBranchReference,
    MissingTargetBranch,
    UnresolvableRemote,
)
from pullmyfinger.utils.git_tools import GitRepository
from pullmyfinger.utils.remotes import branch_name_from_ref, parse_remote_url, split_remote_ref

logger = logging.getLogger(__name__)


class BranchResolver:
    """Resolves base/head branches and the owning project from a git repository."""

    def __init__(self, repo: Optional[GitRepository] = None):
        self.repo = repo or GitRepository()

    def resolve(self, base_token: Optional[str], head_token: Optional[str] = None) -> PullRequestSpec:
        """Resolve the base and head branches for a new pull request.

        Args:
            base_token: Branch to merge into, e.g. `origin/main`.
            head_token: Branch holding the changes; defaults to the current branch.

        Raises:
            MissingTargetBranch: when no base token is given.
            InvalidBranchReference: when a token is not a usable branch.
            DetachedHeadError: when no head is given and HEAD is detached.
            UnresolvableRemote: when the base's remote has no usable URL.
        """
        if not base_token or not base_token.strip():
            raise MissingTargetBranch()
        base_token = base_token.strip()

        base = self.resolve_base(base_token)
        head, head_ref = self.resolve_head(head_token)
        account, project = self.resolve_project(base.remote)

        spec = PullRequestSpec(
            remote=base.remote,
            account=account,
            project=project,
            base=base.branch,
            head=head,
            head_ref=head_ref,
        )
        logger.debug(f'Resolved {head_ref} -> {base} on {spec.repository_full_name}')
        return spec

    def resolve_base(self, token: str) -> BranchRef:
        """Resolve a base token to a remote-tracking branch.

        A local branch resolves through its configured upstream.
        """
        if not self.repo.verify_ref(token):
            raise InvalidBranchReference(token)

        full_name = self.repo.symbolic_full_name(token)
        logger.debug(f"Base '{token}' resolves to {full_name}")
        if full_name is None:
            raise InvalidBranchReference(token, 'is not a branch')

        if full_name.startswith(LOCAL_REF_PREFIX):
            upstream = self.repo.upstream_of(full_name[len(LOCAL_REF_PREFIX):])
            if upstream is None or not upstream.startswith(REMOTE_REF_PREFIX):
                raise InvalidBranchReference(token, 'is a local branch with no remote upstream')
            full_name = upstream

        if not full_name.startswith(REMOTE_REF_PREFIX):
            raise InvalidBranchReference(token, 'is not a remote-tracking branch')

        return split_remote_ref(full_name)

    def resolve_head(self, token: Optional[str] = None) -> Tuple[str, str]:
        """Resolve the head branch.

        Returns:
            Tuple[str, str]: The plain branch name and the ref to read commits from.
        """
        if token:
            if not self.repo.verify_ref(token):
                raise InvalidBranchReference(token)
            full_name = self.repo.symbolic_full_name(token)
            if full_name is None or not full_name.startswith((LOCAL_REF_PREFIX, REMOTE_REF_PREFIX)):
                raise InvalidBranchReference(token, 'is not a branch')
            return branch_name_from_ref(full_name), full_name

        current = self.repo.get_current_branch()
        if current is None:
            raise DetachedHeadError()
        return current, f'{LOCAL_REF_PREFIX}{current}'

    def resolve_project(self, remote: str) -> Tuple[str, str]:
        """Get (account, project) from the URL configured for `remote`."""
        url = self.repo.get_remote_url(remote)
        if not url:
            raise UnresolvableRemote(f"No URL configured for remote '{remote}'")
        return parse_remote_url(url)
