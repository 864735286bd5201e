"""apps:create orchestration."""

import time
from typing import Callable, List, Optional

import structlog

from .app_resolver import normalize_name
from .client_base import RemoteClient, RemoteRegistry, Reporter
from .errors import TimeoutExceeded
from .models import CreationResult
from .polling import wait_until

logger = structlog.get_logger()

DEFAULT_REMOTE = "heroku"
DEFAULT_TIMEOUT = 30
POLL_INTERVAL = 1.0


def parse_addons(addons: Optional[str]) -> List[str]:
    """Split a comma-delimited addon list, dropping blank entries."""
    if not addons:
        return []
    return [addon.strip() for addon in addons.split(",") if addon.strip()]


def create_app(
    client: RemoteClient,
    registry: RemoteRegistry,
    reporter: Reporter,
    name: Optional[str] = None,
    addons: Optional[str] = None,
    buildpack: Optional[str] = None,
    stack: Optional[str] = None,
    remote: Optional[str] = None,
    timeout: int = DEFAULT_TIMEOUT,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> CreationResult:
    """
    Create an app and run the post-creation steps.

    A provisioning timeout is reported and the remaining steps still run
    against the (possibly still provisioning) app. Addons are installed in
    order; the first failing install aborts the command and nothing that
    already happened is rolled back.

    Args:
        client: Remote API facade
        registry: Local git remotes
        reporter: Progress output
        name: Requested app name, None or blank for a generated one
        addons: Comma-delimited addon names
        buildpack: Buildpack URL stored as BUILDPACK_URL
        stack: Stack to create the app on
        remote: Git remote alias to add, defaults to "heroku"
        timeout: Seconds to wait for provisioning
        clock: Time source for the provisioning wait
        sleep: Wait function for the provisioning wait

    Returns:
        CreationResult describing the new app
    """
    info = client.create(normalize_name(name), stack=stack)
    app = info["name"]
    logger.info("app_created", app=app, status=info.get("create_status"))

    reporter.write(f"Creating {app}...")
    timed_out = False
    try:
        if info.get("create_status") == "creating":
            wait_until(
                lambda: client.create_complete(app),
                timeout,
                interval=POLL_INTERVAL,
                on_tick=lambda: reporter.write("."),
                clock=clock,
                sleep=sleep,
            )
        reporter.line(f" done, stack is {info.get('stack')}")
    except TimeoutExceeded:
        timed_out = True
        logger.warning("app_create_timed_out", app=app, timeout=timeout)
        reporter.line(" Timed Out! Check heroku status for known issues.")

    installed = []
    for addon in parse_addons(addons):
        reporter.write(f"Adding {addon} to {app}... ")
        client.install_addon(app, addon)
        reporter.line("done")
        installed.append(addon)

    if buildpack:
        client.add_config_vars(app, {"BUILDPACK_URL": buildpack})
        logger.info("buildpack_set", app=app, buildpack=buildpack)

    web_url = info.get("web_url")
    git_url = info.get("git_url")
    reporter.line(f"{web_url} | {git_url}")

    alias = remote or DEFAULT_REMOTE
    added = False
    if git_url:
        added = registry.add_remote(alias, git_url)
        if added:
            reporter.line(f"Git remote {alias} added")

    return CreationResult(
        name=app,
        stack=info.get("stack"),
        web_url=web_url,
        git_url=git_url,
        addons=tuple(installed),
        remote=alias if added else None,
        timed_out=timed_out,
    )
