"""apps:destroy orchestration."""

from typing import Callable

import structlog

from .client_base import RemoteClient, RemoteRegistry, Reporter
from .errors import ConfirmationDeclined
from .models import DestructionResult

logger = structlog.get_logger()

Confirm = Callable[[str, str], bool]


def destroy_message(name: str) -> str:
    return (
        "WARNING: Potentially Destructive Action\n"
        f"This command will destroy {name} (including all add-ons)."
    )


def destroy_app(
    client: RemoteClient,
    registry: RemoteRegistry,
    reporter: Reporter,
    name: str,
    confirm: Confirm,
) -> DestructionResult:
    """
    Destroy an app after confirmation and drop its local git remotes.

    Args:
        client: Remote API facade
        registry: Local git remotes
        reporter: Progress output
        name: App to destroy
        confirm: Called with (name, warning); returns True to proceed

    Raises:
        RemoteFailure: the app does not exist or is not accessible; raised
            before anything is destroyed
        ConfirmationDeclined: the user did not confirm; nothing changed
    """
    client.info(name)

    if not confirm(name, destroy_message(name)):
        logger.info("app_destroy_declined", app=name)
        raise ConfirmationDeclined(f"Confirmation did not match {name}. Aborted.")

    reporter.write(f"Destroying {name} (including all add-ons)... ")
    client.destroy(name)
    logger.info("app_destroyed", app=name)

    removed = []
    for alias, bound_app in sorted((registry.list_remotes() or {}).items()):
        if bound_app != name:
            continue
        registry.remove_remote(alias)
        logger.info("git_remote_removed", alias=alias, app=name)
        removed.append(alias)

    reporter.line("done")
    return DestructionResult(name=name, removed_remotes=tuple(removed))
