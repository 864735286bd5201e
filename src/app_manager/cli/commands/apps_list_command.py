"""apps:list command implementation."""

from .base_command import AppCommand


class AppsListCommand(AppCommand):
    """List your apps."""

    name = "apps:list"
    description = "List your apps"
    aliases = ["apps"]

    def _dispatch(self) -> int:
        config = self._get_config()
        client = self._get_client(config)

        apps = client.list()
        if not apps:
            self.line("You have no apps.")
            return 0

        for app_name, owner in apps:
            if owner == client.user:
                self.line(app_name)
            else:
                self.line(f"{app_name.ljust(25)} {owner}")
        return 0
