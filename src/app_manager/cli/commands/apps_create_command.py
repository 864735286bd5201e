"""apps:create command implementation."""

from typing import Optional

from cleo.helpers import argument, option

from ...core.creation import create_app
from ...core.errors import InvalidArgument
from .base_command import AppCommand


class AppsCreateCommand(AppCommand):
    """Create a new app."""

    name = "apps:create"
    description = "Create a new app"
    aliases = ["create"]

    arguments = [
        argument("name", "Name of the app, generated when omitted", optional=True),
    ]

    options = [
        option("addons", None, "A comma-delimited list of addons to install", flag=False),
        option("buildpack", "b", "A buildpack url to use for this app", flag=False),
        option("remote", "r", 'The git remote to create, default "heroku"', flag=False),
        option("stack", "s", "The stack on which to create the app", flag=False),
        option(
            "timeout",
            "t",
            "Seconds to wait for the app to finish provisioning",
            flag=False,
        ),
    ]

    def _dispatch(self) -> int:
        config = self._get_config()
        timeout = self._parse_timeout(self.option("timeout"), config.create_timeout)

        client = self._get_client(config)
        registry = self._get_registry(config)

        create_app(
            client,
            registry,
            self,
            name=self.argument("name"),
            addons=self.option("addons"),
            buildpack=self.option("buildpack"),
            stack=self.option("stack") or config.get("apps.default_stack"),
            remote=self.option("remote") or config.default_remote,
            timeout=timeout,
        )
        return 0

    @staticmethod
    def _parse_timeout(value: Optional[str], default: int) -> int:
        if value is None:
            return default
        try:
            timeout = int(value)
        except ValueError:
            timeout = 0
        if timeout <= 0:
            raise InvalidArgument(f"--timeout must be a positive number of seconds, got '{value}'")
        return timeout
