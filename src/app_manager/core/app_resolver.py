"""Resolve which app a command targets, once, at the CLI boundary."""

from typing import Dict, Optional

from .errors import InvalidArgument

NO_APP_HINT = "Run this command from an app folder or specify which app to use with --app APP."


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Lowercase and trim an app name; empty names become None."""
    if name is None:
        return None
    name = name.strip().lower()
    return name or None


def resolve_app(
    app_option: Optional[str],
    remote_option: Optional[str],
    remotes: Optional[Dict[str, str]],
) -> str:
    """
    Pick the target app for a command.

    Args:
        app_option: Value of --app
        remote_option: Value of --remote, an alias among the git remotes
        remotes: alias -> app name bindings of the working copy, or None

    Returns:
        App name

    Raises:
        InvalidArgument: no app could be determined
    """
    app = normalize_name(app_option)
    if app:
        return app

    if remotes:
        if remote_option:
            if remote_option in remotes:
                return remotes[remote_option]
            raise InvalidArgument(
                f"No app found for git remote '{remote_option}'.", hint=NO_APP_HINT
            )

        apps = sorted(set(remotes.values()))
        if len(apps) == 1:
            return apps[0]
        raise InvalidArgument(
            f"Multiple apps in folder and no app specified ({', '.join(apps)}).",
            hint="Specify which app to use with --app APP or --remote REMOTE.",
        )

    raise InvalidArgument("No app specified.", hint=NO_APP_HINT)


def resolve_destroy_target(
    positional: Optional[str],
    app_option: Optional[str],
    confirm_option: Optional[str],
) -> str:
    """Target of apps:destroy: positional name, then --app, then --confirm."""
    for candidate in (positional, app_option, confirm_option):
        name = normalize_name(candidate)
        if name:
            return name
    raise InvalidArgument("Usage: app-manager apps:destroy --app APP")
