"""apps:rename orchestration."""

from typing import Optional

import structlog

from .app_resolver import normalize_name
from .client_base import RemoteClient, RemoteRegistry, Reporter
from .errors import InvalidArgument
from .models import RenameResult

logger = structlog.get_logger()


def rename_app(
    client: RemoteClient,
    registry: RemoteRegistry,
    reporter: Reporter,
    current_name: str,
    new_name: Optional[str],
) -> RenameResult:
    """Rename an app and repoint every local git remote bound to the old name.

    Only remotes of the current working copy are touched; other checkouts
    have to be updated by hand.
    """
    name = normalize_name(new_name)
    if not name:
        raise InvalidArgument("Must specify a new name.")

    client.update(current_name, {"name": name})
    info = client.info(name)
    logger.info("app_renamed", old=current_name, new=name)

    web_url = info.get("web_url")
    git_url = info.get("git_url")
    reporter.line(f"{web_url} | {git_url}")

    remotes = registry.list_remotes()
    if not remotes:
        reporter.line("Don't forget to update your Git remotes on any local checkouts.")
        return RenameResult(current_name, name, web_url, git_url)

    updated = []
    for alias, bound_app in sorted(remotes.items()):
        if bound_app != current_name:
            continue
        registry.remove_remote(alias)
        registry.add_remote(alias, git_url)
        logger.info("git_remote_updated", alias=alias, app=name)
        reporter.line(f"Git remote {alias} updated")
        updated.append(alias)

    return RenameResult(current_name, name, web_url, git_url, tuple(updated))
