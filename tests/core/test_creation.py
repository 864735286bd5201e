"""Tests for apps:create orchestration."""

import pytest

from app_manager.core.creation import create_app, parse_addons
from app_manager.core.errors import RemoteValidationFailed


def test_parse_addons():
    assert parse_addons("pg, redis") == ["pg", "redis"]
    assert parse_addons(" pg ,, ") == ["pg"]
    assert parse_addons("") == []
    assert parse_addons(None) == []


def test_create_without_name_installs_addons_in_order(client, registry, reporter, clock):
    """Auto-named app on cedar: two trimmed installs, then one remote add."""
    result = create_app(
        client,
        registry,
        reporter,
        stack="cedar",
        addons="pg, redis",
        clock=clock,
        sleep=clock.sleep,
    )

    assert client.calls_to("create") == [("create", None, "cedar")]
    assert client.calls_to("install_addon") == [
        ("install_addon", "sushi-1234", "pg"),
        ("install_addon", "sushi-1234", "redis"),
    ]
    assert registry.calls_to("add_remote") == [
        ("add_remote", "heroku", "git@heroku.com:sushi-1234.git")
    ]
    assert result.addons == ("pg", "redis")
    assert result.remote == "heroku"
    assert result.remote_added
    assert not result.timed_out


def test_create_normalizes_requested_name(client, registry, reporter):
    result = create_app(client, registry, reporter, name="  MyNewApp ")

    assert client.calls_to("create") == [("create", "mynewapp", None)]
    assert result.name == "mynewapp"


def test_blank_name_requests_generated_name(client, registry, reporter):
    create_app(client, registry, reporter, name="   ")

    assert client.calls_to("create") == [("create", None, None)]


def test_output(client, registry, reporter):
    create_app(client, registry, reporter, name="newapp", addons="pg")

    assert reporter.lines == [
        "Creating newapp... done, stack is bamboo-mri-1.9.2",
        "Adding pg to newapp... done",
        "http://newapp.herokuapp.com/ | git@heroku.com:newapp.git",
        "Git remote heroku added",
    ]


def test_no_polling_when_already_complete(client, registry, reporter, clock):
    create_app(client, registry, reporter, name="newapp", clock=clock, sleep=clock.sleep)

    assert client.calls_to("create_complete") == []
    assert clock.sleeps == []


def test_polls_until_complete(client, registry, reporter, clock):
    """Provisioning that finishes after 4 seconds prints 4 progress dots."""
    client.create_status = "creating"
    client.complete_when = lambda: clock.now >= 4

    result = create_app(
        client, registry, reporter, name="newapp", timeout=30, clock=clock, sleep=clock.sleep
    )

    assert reporter.lines[0] == "Creating newapp....... done, stack is bamboo-mri-1.9.2"
    assert len(client.calls_to("create_complete")) == 5
    assert not result.timed_out


def test_timeout_is_reported_and_creation_continues(client, registry, reporter, clock):
    """A timed out create still installs addons and adds the remote."""
    client.create_status = "creating"
    client.complete_when = lambda: False

    result = create_app(
        client,
        registry,
        reporter,
        name="slowapp",
        addons="pg",
        buildpack="https://github.com/heroku/heroku-buildpack-ruby.git",
        timeout=3,
        clock=clock,
        sleep=clock.sleep,
    )

    assert result.timed_out
    assert "Timed Out!" in reporter.lines[0]
    assert "done, stack is" not in reporter.output
    assert client.calls_to("install_addon") == [("install_addon", "slowapp", "pg")]
    assert len(client.calls_to("add_config_vars")) == 1
    assert registry.calls_to("add_remote") == [
        ("add_remote", "heroku", "git@heroku.com:slowapp.git")
    ]


def test_buildpack_sets_config_var(client, registry, reporter):
    url = "https://github.com/heroku/heroku-buildpack-python.git"

    create_app(client, registry, reporter, name="newapp", buildpack=url)

    assert client.calls_to("add_config_vars") == [
        ("add_config_vars", "newapp", {"BUILDPACK_URL": url})
    ]


def test_no_buildpack_no_config_vars(client, registry, reporter):
    create_app(client, registry, reporter, name="newapp")

    assert client.calls_to("add_config_vars") == []


def test_custom_remote_alias(client, registry, reporter):
    result = create_app(client, registry, reporter, name="newapp", remote="staging")

    assert registry.remotes == {"staging": "newapp"}
    assert result.remote == "staging"


def test_existing_remote_alias_is_left_alone(client, registry, reporter):
    registry.remotes = {"heroku": "otherapp"}

    result = create_app(client, registry, reporter, name="newapp")

    assert registry.remotes == {"heroku": "otherapp"}
    assert result.remote is None
    assert not result.remote_added
    assert "Git remote heroku added" not in reporter.output


def test_addon_failure_stops_remaining_installs(client, registry, reporter):
    """First failing addon aborts; the app stays created."""
    client.failures["install_addon"] = RemoteValidationFailed("Add-on not found.")

    with pytest.raises(RemoteValidationFailed):
        create_app(client, registry, reporter, name="newapp", addons="bogus, pg")

    assert client.calls_to("install_addon") == [("install_addon", "newapp", "bogus")]
    assert "newapp" in client.apps
    assert registry.calls_to("add_remote") == []
