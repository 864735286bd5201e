"""apps:info command implementation."""

from cleo.helpers import option

from ...core.info import aggregate
from ...utils.formatting import styled_hash, styled_header
from .base_command import AppCommand, app_options


class AppsInfoCommand(AppCommand):
    """Show detailed app information."""

    name = "apps:info"
    description = "Show detailed app information"
    aliases = ["info"]

    options = [
        option("raw", None, "Output info as raw key/value pairs", flag=True),
    ] + app_options()

    def _dispatch(self) -> int:
        config = self._get_config()
        client = self._get_client(config)
        registry = self._get_registry(config)

        app = self._resolve_app(registry)
        record = aggregate(client.info(app), raw=self.option("raw"))

        if record.raw:
            for key, value in record.items:
                self.line(f"{key}={value}")
            return 0

        self.line(styled_header(record.title or app))
        for text in styled_hash(record.items):
            self.line(text)
        return 0
