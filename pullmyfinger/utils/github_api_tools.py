# Entrius 2025
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from pullmyfinger.classes import ApiResponse, PullRequestSpec, ResponseKind
from pullmyfinger.config import Config
from pullmyfinger.constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_TIMEOUT,
    OPEN_STATE_QUERY,
    RATE_LIMIT_MIN_REMAINING,
    USER_AGENT,
)
from pullmyfinger.errors import ApiError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class RateLimitInfo:
    """Represents GitHub API rate limit information extracted from response headers."""

    limit: int  # Maximum requests allowed per hour
    remaining: int  # Requests remaining in current window
    reset_timestamp: int  # Unix timestamp when the rate limit resets
    used: int  # Requests used in current window

    @property
    def is_exceeded(self) -> bool:
        return self.remaining == 0

    @property
    def seconds_until_reset(self) -> int:
        current_time = int(time.time())
        return max(0, self.reset_timestamp - current_time)

    def __str__(self) -> str:
        return f"RateLimit(remaining={self.remaining}/{self.limit}, resets_in={self.seconds_until_reset}s)"


def parse_rate_limit_headers(response: requests.Response) -> Optional[RateLimitInfo]:
    """
    Parse GitHub API rate limit information from response headers.

    Args:
        response: The HTTP response from GitHub API

    Returns:
        RateLimitInfo object if headers are present, None otherwise
    """
    headers = response.headers or {}

    try:
        limit = int(headers.get('X-RateLimit-Limit', 0))
        remaining = int(headers.get('X-RateLimit-Remaining', 0))
        reset_timestamp = int(headers.get('X-RateLimit-Reset', 0))
        used = int(headers.get('X-RateLimit-Used', 0))

        if limit == 0 and reset_timestamp == 0:
            return None

        return RateLimitInfo(limit=limit, remaining=remaining, reset_timestamp=reset_timestamp, used=used)
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not parse rate limit headers: {e}")
        return None


def check_preemptive_rate_limit(response: requests.Response) -> None:
    """Log a warning when the remaining request budget is running low."""
    rate_limit_info = parse_rate_limit_headers(response)

    if rate_limit_info:
        logger.debug(str(rate_limit_info))
        if rate_limit_info.is_exceeded:
            logger.warning(f"GitHub API rate limit exceeded, resets in {rate_limit_info.seconds_until_reset}s")
        elif rate_limit_info.remaining <= RATE_LIMIT_MIN_REMAINING:
            logger.warning(
                f"Approaching GitHub API rate limit: {rate_limit_info.remaining} requests remaining, "
                f"resets in {rate_limit_info.seconds_until_reset}s"
            )


def make_headers() -> Dict[str, str]:
    """Build standard GitHub HTTP headers.

    Credentials travel as HTTP basic auth, not as a header here.

    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    return {
        "Accept": GITHUB_ACCEPT_HEADER,
        "User-Agent": USER_AGENT,
    }


def repository_endpoint(api_url: str, account: str, project: str, item_type: str) -> str:
    """URL of a repository collection, e.g. https://api.github.com/repos/acme/widgets/pulls."""
    return f"{api_url.rstrip('/')}/repos/{account}/{project}/{item_type}"


def _decode_body(response: requests.Response) -> Optional[Any]:
    """Decode a JSON body; None when the body is empty.

    Raises:
        ApiError: when the body is not JSON.
    """
    text = response.text or ""
    if not text.strip():
        return None
    try:
        return response.json()
    except ValueError:
        raise ApiError(
            f"Unexpected non-JSON response (HTTP {response.status_code})",
            status_code=response.status_code,
        )


def format_api_error(data: Dict[str, Any]) -> str:
    """Combine the top-level API message with the details in `errors`.

    GitHub puts the actionable reason of a 422 in `errors[].message`, e.g.
    "Validation Failed: A pull request already exists for octocat:feature-x".
    Entries without a message are rendered from their resource, field and code.
    """
    message = str(data.get("message", ""))
    details = []
    for error in data.get("errors") or []:
        if isinstance(error, dict):
            detail = error.get("message") or " ".join(
                str(error[key]) for key in ("resource", "field", "code") if error.get(key)
            )
        else:
            detail = str(error)
        if detail:
            details.append(detail)
    if details:
        return f"{message}: {'; '.join(details)}"
    return message


def classify_create_response(response: requests.Response) -> ApiResponse:
    """Classify a pull request creation response.

    Args:
        response: The HTTP response from the create call

    Returns:
        ApiResponse tagged TRANSPORT_ERROR for an empty body, API_ERROR when the
        body carries an error message, SUCCESS otherwise.
    """
    status = response.status_code
    try:
        data = _decode_body(response)
    except ApiError as e:
        return ApiResponse(kind=ResponseKind.API_ERROR, message=e.message, status_code=status)

    if data is None:
        return ApiResponse(
            kind=ResponseKind.TRANSPORT_ERROR,
            message=f"Empty response from the API (HTTP {status})",
            status_code=status,
        )

    if not isinstance(data, dict):
        return ApiResponse(kind=ResponseKind.API_ERROR, message="Unexpected response shape", status_code=status)

    if data.get("message"):
        return ApiResponse(kind=ResponseKind.API_ERROR, message=format_api_error(data), status_code=status, data=data)

    url = data.get("html_url")
    number = data.get("number")
    if not url or number is None:
        return ApiResponse(
            kind=ResponseKind.API_ERROR,
            message="Response did not include the pull request URL",
            status_code=status,
            data=data,
        )

    return ApiResponse(kind=ResponseKind.SUCCESS, url=url, number=number, status_code=status, data=data)


def create_pull_request(spec: PullRequestSpec, payload: Dict[str, str], config: Config) -> ApiResponse:
    """Create a pull request on the repository identified by `spec`.

    Args:
        spec: Resolved pull request (account/project select the endpoint)
        payload: Body built by the request builder
        config: Credentials and API root

    Returns:
        ApiResponse: The classified result; never raises for API or transport failures.
    """
    url = repository_endpoint(config.api_url, spec.account, spec.project, "pulls")
    logger.debug(f"POST {url} {json.dumps(payload)}")

    try:
        response = requests.post(
            url,
            json=payload,
            headers=make_headers(),
            auth=config.auth,
            timeout=GITHUB_API_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        logger.debug(f"Request to {url} failed: {e}")
        return ApiResponse(kind=ResponseKind.TRANSPORT_ERROR, message=f"Could not reach {config.api_url}: {e}")

    logger.debug(f"HTTP {response.status_code} from {url}")
    check_preemptive_rate_limit(response)
    return classify_create_response(response)


def list_repository_items(
    account: str,
    project: str,
    item_type: str,
    config: Config,
    query: Optional[Dict[str, str]] = None,
) -> str:
    """Fetch a repository collection and return it as indented JSON.

    Args:
        account: Owning account or organization
        project: Repository name
        item_type: Collection name, e.g. "pulls" or "milestones"
        config: Credentials and API root
        query: Query filter, defaults to open items only

    Returns:
        str: The response body re-indented for display.

    Raises:
        TransportError: when the API is unreachable or returns an empty body.
        ApiError: when the API answers with an error message.
    """
    url = repository_endpoint(config.api_url, account, project, item_type)
    params = OPEN_STATE_QUERY if query is None else query
    logger.debug(f"GET {url} params={params}")

    try:
        response = requests.get(
            url,
            params=params,
            headers=make_headers(),
            auth=config.auth,
            timeout=GITHUB_API_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Could not reach {config.api_url}: {e}")

    logger.debug(f"HTTP {response.status_code} from {url}")
    check_preemptive_rate_limit(response)

    data = _decode_body(response)
    if data is None:
        raise TransportError(f"Empty response from the API (HTTP {response.status_code})")
    if isinstance(data, dict) and data.get("message"):
        raise ApiError(format_api_error(data), status_code=response.status_code)

    return json.dumps(data, indent=2)
