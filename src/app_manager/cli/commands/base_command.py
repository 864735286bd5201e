"""Shared plumbing for app manager commands."""

from typing import List

from cleo.commands.command import Command
from cleo.helpers import option
from cleo.io.inputs.option import Option

from ...core.app_resolver import normalize_name, resolve_app
from ...core.client_getter import get_client, get_registry
from ...core.config import Config, ConfigManager
from ...core.errors import AppManagerError, ConfirmationDeclined
from ...providers.git import GitRemoteRegistry
from ...providers.heroku.core import HerokuClient


def app_options() -> List[Option]:
    """--app/--remote, for commands that act on an existing app."""
    return [
        option("app", "a", "The app to run the command against", flag=False),
        option(
            "remote",
            "r",
            "The git remote whose app to run the command against",
            flag=False,
        ),
    ]


class AppCommand(Command):
    """Base command with the error boundary and collaborator factories."""

    def handle(self) -> int:
        """Handle the command."""
        try:
            return self._dispatch() or 0
        except ConfirmationDeclined as e:
            self.line(str(e))
            return 0
        except AppManagerError as e:
            self.line_error(f"Error: {e}")
            if e.hint:
                self.line_error(f"Hint: {e.hint}")
            return 1

    def _dispatch(self) -> int:
        raise NotImplementedError

    def _resolve_app(self, registry: GitRemoteRegistry) -> str:
        """Resolve the target app from --app, --remote or the git remotes."""
        app = normalize_name(self.option("app"))
        if app:
            return app
        return resolve_app(None, self.option("remote"), registry.list_remotes())

    def _get_config(self) -> Config:
        return self._get_config_manager().load_or_default()

    def _get_client(self, config: Config) -> HerokuClient:
        return get_client(config)

    def _get_registry(self, config: Config) -> GitRemoteRegistry:
        return get_registry(config)

    def _get_config_manager(self) -> ConfigManager:
        """Get configuration manager."""
        return ConfigManager()
