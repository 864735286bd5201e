"""Heroku API credential lookup."""

import netrc
import os
from pathlib import Path
from typing import Optional, Tuple

import structlog
from dotenv import load_dotenv

logger = structlog.get_logger()

Credentials = Tuple[Optional[str], str]


def get_credentials(host: str = "api.heroku.com", method: str = "auto") -> Optional[Credentials]:
    """
    Get (email, api key) for the API host from the configured sources.

    Priority for method "auto":
    1. Environment variables (HEROKU_API_KEY, optionally HEROKU_EMAIL),
       after loading a local .env file
    2. The ~/.netrc entry for the host

    Args:
        host: API host name
        method: "auto", "env" or "netrc"

    Returns:
        (email or None, api key) if found, None otherwise
    """
    if method in ("auto", "env"):
        credentials = get_credentials_from_env()
        if credentials:
            return credentials

    if method in ("auto", "netrc"):
        credentials = get_credentials_from_netrc(host)
        if credentials:
            return credentials

    return None


def get_credentials_from_env() -> Optional[Credentials]:
    """
    Get credentials from environment variables.

    A .env file in the working directory is loaded first without
    overriding variables that are already set.

    Returns:
        (HEROKU_EMAIL or None, HEROKU_API_KEY) if the key is set, None otherwise
    """
    load_dotenv()

    api_key = os.getenv("HEROKU_API_KEY", "").strip()
    if not _is_valid_api_key(api_key):
        return None

    logger.debug("credentials_from_env")
    return os.getenv("HEROKU_EMAIL") or None, api_key


def get_credentials_from_netrc(
    host: str, netrc_path: Optional[Path] = None
) -> Optional[Credentials]:
    """
    Get credentials from a netrc file.

    Args:
        host: Machine entry to look up
        netrc_path: File to read, defaults to ~/.netrc

    Returns:
        (login, password) for the host if present and well-formed, None otherwise
    """
    path = netrc_path or Path.home() / ".netrc"
    if not path.exists():
        return None

    try:
        entry = netrc.netrc(str(path)).authenticators(host)
    except (netrc.NetrcParseError, OSError) as e:
        logger.warning("netrc_unreadable", path=str(path), error=str(e))
        return None

    if not entry:
        return None

    login, _, password = entry
    if not _is_valid_api_key(password or ""):
        return None

    logger.debug("credentials_from_netrc", host=host)
    return login or None, password


def _is_valid_api_key(api_key: str) -> bool:
    """API keys are opaque, but never short or containing whitespace."""
    return len(api_key) >= 16 and not any(c.isspace() for c in api_key)
