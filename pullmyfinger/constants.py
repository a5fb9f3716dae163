# The MIT License (MIT)
# Copyright © 2025 Entrius

# =============================================================================
# General
# =============================================================================
VERSION = "1.0.0"
PROG_NAME = "pullmyfinger"

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_TIMEOUT = 30  # seconds
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
USER_AGENT = f"{PROG_NAME}-cli"

# Rate limit
RATE_LIMIT_MIN_REMAINING = 10  # Warn when fewer requests than this remain

# Listing
PULL_REQUESTS_ITEM_TYPE = "pulls"
MILESTONES_ITEM_TYPE = "milestones"
OPEN_STATE_QUERY = {"state": "open"}

# =============================================================================
# Environment
# =============================================================================
ENV_LOGIN = "GITHUB_LOGIN"
ENV_PASSWORD = "GITHUB_PASSWORD"
ENV_SIGNATURE = "PULLMYFINGER_SIGNATURE"
ENV_API_URL = "PULLMYFINGER_API_URL"
ENV_NO_BROWSER = "PULLMYFINGER_NO_BROWSER"

REQUIRED_TOOLS = ["git"]

# =============================================================================
# Exit codes
# =============================================================================
EXIT_FAILURE = 1
EXIT_PRECONDITION_FAILURE = 99

# =============================================================================
# Git
# =============================================================================
REMOTE_REF_PREFIX = "refs/remotes/"
LOCAL_REF_PREFIX = "refs/heads/"

# =============================================================================
# Payload templates
# =============================================================================
PR_TITLE_TEMPLATE = "Merge {login}:{head} into {base}"
PR_BODY_TEMPLATE = "Merge into {base}: {subject}"
