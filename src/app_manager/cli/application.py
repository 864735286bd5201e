"""App manager CLI application."""

from cleo.application import Application

from ..core.config import ConfigManager
from ..core.errors import ConfigError
from ..logging import configure_logging, resolve_level
from .commands.apps_create_command import AppsCreateCommand
from .commands.apps_destroy_command import AppsDestroyCommand
from .commands.apps_info_command import AppsInfoCommand
from .commands.apps_list_command import AppsListCommand
from .commands.apps_open_command import AppsOpenCommand
from .commands.apps_rename_command import AppsRenameCommand
from .commands.config_command import ConfigCommand


class AppManagerApplication(Application):
    """App Manager CLI application."""

    def __init__(self):
        super().__init__("app-manager", "0.1.0")

        self.add(AppsListCommand())
        self.add(AppsInfoCommand())
        self.add(AppsCreateCommand())
        self.add(AppsRenameCommand())
        self.add(AppsOpenCommand())
        self.add(AppsDestroyCommand())
        self.add(ConfigCommand())


def main():
    """Main entry point."""
    try:
        config = ConfigManager().load_config()
    except ConfigError:
        # reported by the command that needs the config
        config = None
    configure_logging(resolve_level(config.get("logging.level") if config else None))

    app = AppManagerApplication()
    app.run()
