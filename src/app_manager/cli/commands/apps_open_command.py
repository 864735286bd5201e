"""apps:open command implementation."""

import webbrowser

from .base_command import AppCommand, app_options


class AppsOpenCommand(AppCommand):
    """Open the app in a web browser."""

    name = "apps:open"
    description = "Open the app in a web browser"
    aliases = ["open"]

    options = app_options()

    def _dispatch(self) -> int:
        config = self._get_config()
        client = self._get_client(config)
        registry = self._get_registry(config)

        app = self._resolve_app(registry)
        url = client.info(app).get("web_url")
        self.line(f"Opening {url}")
        webbrowser.open(url)
        return 0
