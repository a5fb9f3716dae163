from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pullmyfinger.errors import ApiError, TransportError


class Command(Enum):
    """Terminal actions the dispatcher can run"""

    CREATE = "create"
    LIST_PULL_REQUESTS = "list-pull-requests"
    LIST_MILESTONES = "list-milestones"


class ResponseKind(Enum):
    """Classification of a pull-request creation response"""

    SUCCESS = "SUCCESS"
    API_ERROR = "API_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


@dataclass(frozen=True)
class BranchRef:
    """A remote-tracking branch split into its remote and branch parts"""

    remote: str
    branch: str

    @property
    def name(self) -> str:
        return f"{self.remote}/{self.branch}"

    def __str__(self) -> str:
        return self.name


@dataclass
class PullRequestSpec:
    """Everything needed to open one pull request.

    `base` and `head` are plain branch names; `account` and `project`
    identify the repository the request is sent to.
    """

    remote: str
    account: str
    project: str
    base: str
    head: str
    head_ref: str = ""
    title: str = ""
    body: str = ""

    @property
    def repository_full_name(self) -> str:
        return f"{self.account}/{self.project}"


@dataclass
class ApiResponse:
    """Result of a single pull-request creation call"""

    kind: ResponseKind
    url: Optional[str] = None
    number: Optional[int] = None
    message: str = ""
    status_code: Optional[int] = None
    data: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.kind == ResponseKind.SUCCESS

    def raise_for_failure(self) -> None:
        """Raise the matching error for a failed response; no-op on success."""
        if self.ok:
            return
        if self.kind == ResponseKind.API_ERROR:
            raise ApiError(self.message, status_code=self.status_code)
        if self.kind == ResponseKind.TRANSPORT_ERROR:
            raise TransportError(self.message or "Empty response from the API")
