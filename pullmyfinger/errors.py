# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Errors raised while resolving branches and talking to the API.

Every error carries the process exit code the CLI should use for it.
"""

from typing import Optional

from pullmyfinger.constants import EXIT_FAILURE, EXIT_PRECONDITION_FAILURE


class PullMyFingerError(Exception):
    """Base class for all errors that end an invocation."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PullMyFingerError):
    """Missing credentials or required external tools."""

    exit_code = EXIT_PRECONDITION_FAILURE


class MissingTargetBranch(PullMyFingerError):
    def __init__(self, message: str = 'No target branch given'):
        super().__init__(message)


class InvalidBranchReference(PullMyFingerError):
    def __init__(self, ref: str, reason: str = 'is not a valid reference'):
        super().__init__(f"'{ref}' {reason}")
        self.ref = ref


class UnresolvableRemote(PullMyFingerError):
    pass


class DetachedHeadError(PullMyFingerError):
    def __init__(self, message: str = 'HEAD is detached; check out a branch or pass --head'):
        super().__init__(message)


class ApiError(PullMyFingerError):
    """The API rejected the request; `message` is the API's own text."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(PullMyFingerError):
    """The API could not be reached or returned nothing."""

    pass
