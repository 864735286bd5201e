"""Interfaces the app orchestration layer depends on."""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

AppAttributes = Mapping[str, Any]


class RemoteClient(Protocol):
    """Remote API facade for app lifecycle calls.

    Every method may raise a RemoteFailure subclass.
    """

    @property
    def user(self) -> Optional[str]:
        """Email of the authenticated account, if known."""
        ...

    def list(self) -> List[Tuple[str, str]]:
        """
        List apps visible to the current account.

        Returns:
            List of (app name, owner email) pairs
        """
        ...

    def info(self, name: str) -> AppAttributes:
        """
        Fetch the full attribute set of an app.

        Args:
            name: App name

        Returns:
            Read-only mapping including "addons" and "collaborators" lists
        """
        ...

    def create(self, name: Optional[str] = None, stack: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a new app.

        Args:
            name: Requested name, or None for a server-assigned one
            stack: Stack to create the app on, or None for the default

        Returns:
            Dict with name, stack, create_status, web_url and git_url
        """
        ...

    def create_complete(self, name: str) -> bool:
        """Return True once asynchronous provisioning of the app is finished."""
        ...

    def update(self, name: str, attrs: Dict[str, Any]) -> None:
        """Update app attributes (e.g. {"name": new_name})."""
        ...

    def destroy(self, name: str) -> None:
        """Permanently delete the app and its add-ons."""
        ...

    def install_addon(self, name: str, addon: str) -> None:
        """Install a single add-on on the app."""
        ...

    def add_config_vars(self, name: str, config_vars: Dict[str, str]) -> None:
        """Merge config vars into the app's environment."""
        ...


class RemoteRegistry(Protocol):
    """Local git remotes bound to apps."""

    def list_remotes(self, path: Optional[str] = None) -> Optional[Dict[str, str]]:
        """
        Map remote aliases to the app names they point at.

        Args:
            path: Working directory, defaults to the registry's own

        Returns:
            Dict of alias -> app name, or None when there is no repository
        """
        ...

    def add_remote(self, alias: str, url: str, path: Optional[str] = None) -> bool:
        """Add a remote. Returns False when nothing was added."""
        ...

    def remove_remote(self, alias: str, path: Optional[str] = None) -> None:
        """Remove a remote."""
        ...


class Reporter(Protocol):
    """Progress sink; cleo commands satisfy this directly."""

    def write(self, text: str) -> None:
        ...

    def line(self, text: str) -> None:
        ...
