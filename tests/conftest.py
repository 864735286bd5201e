"""Common test fixtures."""

import logging
from types import MappingProxyType

import pytest
import structlog

from app_manager.core.errors import RemoteNotFound


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class FakeClient:
    """In-memory remote API that records every call."""

    def __init__(self, apps=None, user="me@example.com"):
        self.user = user
        self.apps = {name: dict(attrs) for name, attrs in (apps or {}).items()}
        self.calls = []
        self.failures = {}
        self.create_status = "complete"
        self.complete_when = lambda: True

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        failure = self.failures.get(method)
        if failure is not None:
            raise failure

    def calls_to(self, method):
        return [call for call in self.calls if call[0] == method]

    def list(self):
        self._record("list")
        return [(name, attrs.get("owner", "")) for name, attrs in self.apps.items()]

    def info(self, name):
        self._record("info", name)
        if name not in self.apps:
            raise RemoteNotFound("App not found.", status=404)
        return MappingProxyType(dict(self.apps[name]))

    def create(self, name=None, stack=None):
        self._record("create", name, stack)
        name = name or "sushi-1234"
        attrs = {
            "name": name,
            "stack": stack or "bamboo-mri-1.9.2",
            "create_status": self.create_status,
            "web_url": f"http://{name}.herokuapp.com/",
            "git_url": f"git@heroku.com:{name}.git",
        }
        self.apps[name] = dict(attrs)
        return attrs

    def create_complete(self, name):
        self._record("create_complete", name)
        return self.complete_when()

    def update(self, name, attrs):
        self._record("update", name, attrs)
        app = self.apps.pop(name)
        new_name = attrs.get("name", name)
        app.update(attrs)
        app["web_url"] = f"http://{new_name}.herokuapp.com/"
        app["git_url"] = f"git@heroku.com:{new_name}.git"
        self.apps[new_name] = app

    def destroy(self, name):
        self._record("destroy", name)
        self.apps.pop(name)

    def install_addon(self, name, addon):
        self._record("install_addon", name, addon)

    def add_config_vars(self, name, config_vars):
        self._record("add_config_vars", name, config_vars)


class FakeRegistry:
    """In-memory git remotes; repository=False behaves like a plain directory."""

    def __init__(self, remotes=None, repository=True):
        self.remotes = dict(remotes or {})
        self.urls = {}
        self.repository = repository
        self.calls = []

    def list_remotes(self, path=None):
        self.calls.append(("list_remotes",))
        return dict(self.remotes) if self.repository else None

    def add_remote(self, alias, url, path=None):
        self.calls.append(("add_remote", alias, url))
        if not self.repository or alias in self.remotes:
            return False
        self.remotes[alias] = url.rsplit(":", 1)[-1][: -len(".git")]
        self.urls[alias] = url
        return True

    def remove_remote(self, alias, path=None):
        self.calls.append(("remove_remote", alias))
        del self.remotes[alias]
        self.urls.pop(alias, None)

    def calls_to(self, method):
        return [call for call in self.calls if call[0] == method]


class RecordingReporter:
    """Collects write()/line() output as one string."""

    def __init__(self):
        self.output = ""

    def write(self, text):
        self.output += text

    def line(self, text):
        self.output += text + "\n"

    @property
    def lines(self):
        return self.output.splitlines()


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def sample_attrs():
    """Attributes as returned by the remote API for a legacy-stack app."""
    return {
        "name": "myapp",
        "owner": "me@example.com",
        "stack": "bamboo-mri-1.9.2",
        "domain_name": "myapp.herokuapp.com",
        "create_status": "complete",
        "web_url": "http://myapp.herokuapp.com/",
        "git_url": "git@heroku.com:myapp.git",
        "repo_size": 2 * 1024 * 1024,
        "slug_size": 512 * 1024,
        "database_size": 0,
        "dynos": 1,
        "workers": 0,
        "addons": [
            {"name": "shared-database:5mb", "description": "Shared Database 5MB"},
            {"name": "logging:basic", "description": "Logging Basic"},
        ],
        "collaborators": [
            {"email": "me@example.com", "access": "edit"},
            {"email": "zed@example.com", "access": "edit"},
            {"email": "amy@example.com", "access": "edit"},
        ],
    }


@pytest.fixture
def client(sample_attrs):
    return FakeClient(apps={"myapp": sample_attrs})


@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def clock():
    return FakeClock()
