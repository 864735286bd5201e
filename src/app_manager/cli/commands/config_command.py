"""Config command implementation."""

from cleo.helpers import argument, option

from ...core.config import Config, ConfigManager
from .base_command import AppCommand


class ConfigCommand(AppCommand):
    """Manage configuration."""

    name = "config"
    description = "Manage configuration"

    arguments = [
        argument(
            "action",
            "Action to perform (init, show, validate)",
            optional=False,
        ),
    ]

    options = [
        option(
            "force",
            "f",
            "Force initialization even if config exists",
            flag=True,
        ),
        option(
            "pretty",
            "p",
            "Pretty print configuration",
            flag=True,
        ),
    ]

    def _dispatch(self) -> int:
        action = self.argument("action")
        config_manager = self._get_config_manager()

        if action == "init":
            return self._init_config(config_manager)
        elif action == "show":
            return self._show_config(config_manager)
        elif action == "validate":
            return self._validate_config(config_manager)

        self.line_error(f"Unknown action: {action}")
        self.line("Available actions: init, show, validate")
        return 1

    def _init_config(self, config_manager: ConfigManager) -> int:
        """Initialize configuration."""
        if config_manager.config_path.exists() and not self.option("force"):
            self.line_error("Configuration already exists. Use --force to overwrite.")
            return 1

        config_path = config_manager.create_sample_config()
        self.info(f"Configuration initialized at: {config_path}")
        return 0

    def _show_config(self, config_manager: ConfigManager) -> int:
        """Show current configuration."""
        config = config_manager.load_config()

        if not config:
            self.line("No configuration found. Use 'config init' to create configuration.")
            return 1

        if self.option("pretty"):
            self._print_config_pretty(config)
        else:
            self._print_dict(config.to_dict(), 0)

        return 0

    def _validate_config(self, config_manager: ConfigManager) -> int:
        """Validate configuration."""
        config = config_manager.load_config()
        if not config:
            self.line_error("No configuration found to validate")
            return 1

        if config_manager.validate_config(config):
            self.info("Configuration is valid")
            return 0

        self.line_error("Configuration is invalid")
        return 1

    def _print_dict(self, data: dict, indent: int = 0):
        """Print dictionary recursively."""
        for key, value in data.items():
            if isinstance(value, dict):
                self.line(" " * indent + f"{key}:")
                self._print_dict(value, indent + 2)
            else:
                self.line(" " * indent + f"{key}: {value}")

    def _print_config_pretty(self, config: Config):
        """Print configuration in a pretty format."""
        self.line("\n<info>Configuration:</info>")

        self.line("\n<comment>API:</comment>")
        self.line(f"  Host: {config.api_host}")
        self.line(f"  Timeout: {config.get('api.timeout')}s")
        self.line(f"  Auth Method: {config.get('auth.method')}")

        self.line("\n<comment>Git:</comment>")
        self.line(f"  Host: {config.git_host}")

        self.line("\n<comment>Apps:</comment>")
        self.line(f"  Default Remote: {config.default_remote}")
        self.line(f"  Create Timeout: {config.create_timeout}s")
        self.line(f"  Default Stack: {config.get('apps.default_stack') or '(server default)'}")

        self.line("\n<comment>Logging:</comment>")
        self.line(f"  Level: {config.get('logging.level')}")
