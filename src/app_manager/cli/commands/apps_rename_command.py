"""apps:rename command implementation."""

from cleo.helpers import argument

from ...core.rename import rename_app
from .base_command import AppCommand, app_options


class AppsRenameCommand(AppCommand):
    """Rename the app."""

    name = "apps:rename"
    description = "Rename the app"
    aliases = ["rename"]

    arguments = [
        argument("newname", "New name of the app", optional=True),
    ]

    options = app_options()

    def _dispatch(self) -> int:
        config = self._get_config()
        client = self._get_client(config)
        registry = self._get_registry(config)

        app = self._resolve_app(registry)
        rename_app(client, registry, self, app, self.argument("newname"))
        return 0
