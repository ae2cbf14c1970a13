"""
Portal Configuration - Single Source of Truth

Default portal settings live here. Do not duplicate elsewhere.
The core client only ever sees the WebLinkConfig built from these values;
environment overrides are resolved once, at the entry point.
"""

import os
from collections.abc import Mapping

from models import ErrorKind, WebLinkConfig, WeblinkError

# City of Arcadia public repository
DEFAULT_BASE_URL = "https://laserfiche.arcadiaca.gov/WebLink"
DEFAULT_REPO_NAME = "CityofArcadia"
DEFAULT_DBID = 0

DEFAULT_CONFIG = WebLinkConfig(
    base_url=DEFAULT_BASE_URL,
    repo_name=DEFAULT_REPO_NAME,
    dbid=DEFAULT_DBID,
)

# Folder fetched when no folder ID is given
DEFAULT_FOLDER_ID = 874714

# Snapshot filenames: {prefix}-entries.json, {prefix}-{slug}-{id}.json
DEFAULT_OUTPUT_PREFIX = "arcadia"

DEFAULT_LOG_LEVEL = "WARNING"

# Environment overrides
ENV_BASE_URL = "WEBLINK_BASE_URL"
ENV_REPO_NAME = "WEBLINK_REPO"
ENV_DBID = "WEBLINK_DBID"
ENV_FOLDER_ID = "WEBLINK_FOLDER_ID"
ENV_OUTPUT_PREFIX = "WEBLINK_OUTPUT_PREFIX"
ENV_LOG_LEVEL = "WEBLINK_LOG_LEVEL"


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise WeblinkError(
            ErrorKind.INVALID_INPUT,
            f"{name} must be an integer, got {raw!r}",
        )


def load_config(env: Mapping[str, str] | None = None) -> WebLinkConfig:
    """
    Build the portal config, applying environment overrides.

    Checks WEBLINK_BASE_URL, WEBLINK_REPO and WEBLINK_DBID; anything unset
    falls back to the Arcadia defaults. A trailing slash on the base URL is
    dropped so path joins stay single-slashed.

    Raises:
        WeblinkError: If WEBLINK_DBID is not an integer
    """
    env = os.environ if env is None else env

    base_url = (env.get(ENV_BASE_URL) or DEFAULT_BASE_URL).rstrip("/")
    repo_name = env.get(ENV_REPO_NAME) or DEFAULT_REPO_NAME
    dbid = _parse_int(env, ENV_DBID, DEFAULT_DBID)

    return WebLinkConfig(base_url=base_url, repo_name=repo_name, dbid=dbid)


def default_folder_id(env: Mapping[str, str] | None = None) -> int:
    """Folder fetched when the CLI gets no folder ID."""
    env = os.environ if env is None else env
    return _parse_int(env, ENV_FOLDER_ID, DEFAULT_FOLDER_ID)


def output_prefix(env: Mapping[str, str] | None = None) -> str:
    env = os.environ if env is None else env
    return env.get(ENV_OUTPUT_PREFIX) or DEFAULT_OUTPUT_PREFIX


def default_log_level(env: Mapping[str, str] | None = None) -> str:
    env = os.environ if env is None else env
    return env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
