"""Build the remote client and git registry from configuration."""

from typing import Optional

from .config import Config
from .errors import RemoteUnauthorized
from app_manager.providers.git import GitRemoteRegistry
from app_manager.providers.heroku.core import HerokuClient
from app_manager.providers.heroku.heroku_auth import get_credentials


def get_client(config: Config) -> HerokuClient:
    """Get an authenticated API client."""
    host = config.api_host
    credentials = get_credentials(host, config.get("auth.method", "auto"))
    if not credentials:
        raise RemoteUnauthorized(
            "Not logged in.",
            hint=f"Set HEROKU_API_KEY or add a '{host}' entry to ~/.netrc.",
        )

    user, api_key = credentials
    return HerokuClient(
        api_key,
        host=host,
        user=user,
        timeout=config.get("api.timeout", 10),
    )


def get_registry(config: Config, path: Optional[str] = None) -> GitRemoteRegistry:
    """Get the git remote registry for the working copy."""
    return GitRemoteRegistry(path, git_host=config.git_host)
