"""apps:destroy command implementation."""

from cleo.helpers import argument, option

from ...core.app_resolver import normalize_name, resolve_destroy_target
from ...core.destruction import destroy_app
from ...core.errors import InvalidArgument
from .base_command import AppCommand


class AppsDestroyCommand(AppCommand):
    """Permanently destroy an app."""

    name = "apps:destroy"
    description = "Permanently destroy an app"
    aliases = ["destroy", "apps:delete"]

    arguments = [
        argument("name", "Name of the app to destroy", optional=True),
    ]

    options = [
        option("app", "a", "The app to destroy", flag=False),
        option("confirm", None, "Skip the prompt by repeating the app name", flag=False),
    ]

    def _dispatch(self) -> int:
        app = resolve_destroy_target(
            self.argument("name"), self.option("app"), self.option("confirm")
        )

        config = self._get_config()
        client = self._get_client(config)
        registry = self._get_registry(config)

        destroy_app(client, registry, self, app, self._confirm)
        return 0

    def _confirm(self, app: str, message: str) -> bool:
        """Accept --confirm APP, otherwise ask the user to type the name."""
        confirmation = self.option("confirm")
        if confirmation:
            if normalize_name(confirmation) != app:
                raise InvalidArgument(f"Confirmation did not match {app}. Aborted.")
            return True

        self.line("")
        for text in message.splitlines():
            self.line(f" !    {text}")
        self.line(f' !    To proceed, type "{app}" or re-run this command with --confirm {app}')
        self.line("")

        return normalize_name(self.ask("> ")) == app
