# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import subprocess
from typing import List, Optional, Tuple

from pullmyfinger.constants import REMOTE_REF_PREFIX


class GitRepository:
    """Read-only queries against a local git repository."""

    def __init__(self, repo_path: Optional[str] = None):
        self.repo_path = repo_path
        self.logger = logging.getLogger(__name__)

    def _run_git_command(self, args: List[str]) -> Tuple[bool, str]:
        """Run a git command and return success status and output."""
        cmd = ["git", *args]
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True
            )
            return True, result.stdout.strip()
        except subprocess.CalledProcessError as e:
            self.logger.debug(f"Git command failed: {' '.join(cmd)}, Error: {e.stderr}")
            return False, e.stderr.strip() if e.stderr else str(e)

    def verify_ref(self, ref: str) -> bool:
        """Check that `ref` names an existing commit."""
        if not ref or ref.startswith("-"):
            return False
        success, _ = self._run_git_command(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"])
        return success

    def symbolic_full_name(self, ref: str) -> Optional[str]:
        """Resolve `ref` to its fully-qualified name, e.g. refs/remotes/origin/main.

        Returns None for refs with no symbolic name (plain commit ids).
        """
        success, output = self._run_git_command(["rev-parse", "--symbolic-full-name", ref])
        return output if success and output else None

    def upstream_of(self, branch: str) -> Optional[str]:
        """Get the fully-qualified upstream ref configured for a local branch."""
        success, output = self._run_git_command(["rev-parse", "--symbolic-full-name", f"{branch}@{{upstream}}"])
        return output if success and output else None

    def get_current_branch(self) -> Optional[str]:
        """Get the checked-out branch name, or None when HEAD is detached."""
        success, output = self._run_git_command(["symbolic-ref", "--quiet", "--short", "HEAD"])
        return output if success and output else None

    def get_commit_subject(self, ref: str) -> Optional[str]:
        """Get the subject line of the latest commit on `ref`."""
        success, output = self._run_git_command(["log", "-1", "--format=%s", ref, "--"])
        return output if success else None

    def get_remote_url(self, remote: str) -> Optional[str]:
        """Get the push URL for a remote, falling back to its fetch URL."""
        for key in (f"remote.{remote}.pushurl", f"remote.{remote}.url"):
            success, output = self._run_git_command(["config", "--get", key])
            if success and output:
                return output
        return None

    def list_remotes(self) -> List[str]:
        success, output = self._run_git_command(["remote"])
        return output.splitlines() if success and output else []

    def list_remote_branches(self) -> List[str]:
        """List remote-tracking branches as <remote>/<branch> names."""
        success, output = self._run_git_command(
            ["for-each-ref", "--format=%(refname)", REMOTE_REF_PREFIX]
        )
        if not success or not output:
            return []
        branches = []
        for line in output.splitlines():
            name = line[len(REMOTE_REF_PREFIX):]
            # Skip symbolic refs such as origin/HEAD
            if not name.endswith("/HEAD"):
                branches.append(name)
        return branches
