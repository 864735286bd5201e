import json
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
import structlog

from app_manager.core.client_base import AppAttributes
from app_manager.core.errors import (
    RemoteFailure,
    RemoteNotFound,
    RemoteUnauthorized,
    RemoteUnavailable,
    RemoteValidationFailed,
)

logger = structlog.get_logger()


class HerokuClient:
    """Heroku API client for the app lifecycle calls."""

    def __init__(
        self,
        api_key: str,
        host: str = "api.heroku.com",
        user: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.host = host
        self.timeout = timeout
        self._user = user
        self._session = session or requests.Session()
        self._session.auth = ("", api_key)
        self._session.headers.update(
            {
                "Accept": "application/json",
                "X-Heroku-API-Version": "2",
                "User-Agent": "cleo-app-manager",
            }
        )

    @property
    def user(self) -> Optional[str]:
        return self._user

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    def list(self) -> List[Tuple[str, str]]:
        """List apps as (name, owner email) pairs."""
        apps = self._request("GET", "/apps").json()
        return [(app["name"], app.get("owner_email") or app.get("owner", "")) for app in apps]

    def info(self, name: str) -> AppAttributes:
        """Fetch app attributes along with its collaborators and addons."""
        app = quote(name, safe="")
        attrs = dict(self._request("GET", f"/apps/{app}").json())
        attrs["collaborators"] = self._request("GET", f"/apps/{app}/collaborators").json()
        attrs["addons"] = self._request("GET", f"/apps/{app}/addons").json()
        return MappingProxyType(attrs)

    def create(self, name: Optional[str] = None, stack: Optional[str] = None) -> Dict[str, Any]:
        """Create an app; the response may still be provisioning."""
        data = {}
        if name:
            data["app[name]"] = name
        if stack:
            data["app[stack]"] = stack
        return self._request("POST", "/apps", data=data).json()

    def create_complete(self, name: str) -> bool:
        """Provisioning is finished once the status endpoint answers 201."""
        response = self._request("PUT", f"/apps/{quote(name, safe='')}/status")
        return response.status_code == 201

    def update(self, name: str, attrs: Dict[str, Any]) -> None:
        data = {f"app[{key}]": value for key, value in attrs.items()}
        self._request("PUT", f"/apps/{quote(name, safe='')}", data=data)

    def destroy(self, name: str) -> None:
        self._request("DELETE", f"/apps/{quote(name, safe='')}")

    def install_addon(self, name: str, addon: str) -> None:
        self._request("POST", f"/apps/{quote(name, safe='')}/addons/{quote(addon, safe='')}")

    def add_config_vars(self, name: str, config_vars: Dict[str, str]) -> None:
        self._request(
            "PUT",
            f"/apps/{quote(name, safe='')}/config_vars",
            data=json.dumps(config_vars),
            headers={"Content-Type": "application/json"},
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("heroku_request", method=method, path=path)

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise RemoteUnavailable(
                f"Unable to connect to {self.host}", hint=str(e)
            ) from e
        except requests.RequestException as e:
            raise RemoteFailure(f"Request to {self.host} failed: {e}") from e

        logger.debug("heroku_response", method=method, path=path, status=response.status_code)
        if response.status_code >= 400:
            raise self._failure(response)
        return response

    def _failure(self, response: requests.Response) -> RemoteFailure:
        status = response.status_code
        message = self._error_message(response)

        if status in (401, 403):
            return RemoteUnauthorized(
                message or "Invalid credentials provided.",
                status=status,
                hint="Check HEROKU_API_KEY or the api.heroku.com entry in ~/.netrc.",
            )
        if status == 404:
            return RemoteNotFound(message or "App not found.", status=status)
        if status == 422:
            return RemoteValidationFailed(message or "Invalid request.", status=status)
        return RemoteFailure(message or f"Remote API error ({status}).", status=status)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip()
        if isinstance(body, dict):
            return str(body.get("error") or body.get("message") or "").strip()
        return ""
