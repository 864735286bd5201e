"""Tests for the git remote registry."""

import subprocess
from unittest.mock import patch

import pytest

from app_manager.core.errors import VcsFailure
from app_manager.providers.git import GitRemoteRegistry

REMOTE_V = (
    "heroku\tgit@heroku.com:myapp.git (fetch)\n"
    "heroku\tgit@heroku.com:myapp.git (push)\n"
    "staging\thttps://git.heroku.com/myapp-staging.git (fetch)\n"
    "origin\tgit@github.com:me/myapp.git (fetch)\n"
)


class FakeGit:
    """Stands in for subprocess.run, answering a few git commands."""

    def __init__(self, inside=True, remote_v=REMOTE_V, fail=()):
        self.inside = inside
        self.remote_v = remote_v
        self.fail = fail
        self.commands = []

    def __call__(self, cmd, cwd=None, capture_output=True, text=True, timeout=None):
        args = cmd[1:]
        self.commands.append(args)
        if args[:2] == ["rev-parse", "--is-inside-work-tree"]:
            if self.inside:
                return self._done(args, "true\n")
            return self._done(args, "", returncode=128, stderr="fatal: not a git repository")
        if tuple(args[:2]) in self.fail:
            return self._done(args, "", returncode=1, stderr="error: boom")
        if args == ["remote", "-v"]:
            return self._done(args, self.remote_v)
        if args == ["remote"]:
            names = sorted({line.split()[0] for line in self.remote_v.splitlines()})
            return self._done(args, "\n".join(names) + "\n")
        return self._done(args, "")

    @staticmethod
    def _done(args, stdout, returncode=0, stderr=""):
        return subprocess.CompletedProcess(["git", *args], returncode, stdout, stderr)


@pytest.fixture
def git_registry(tmp_path):
    return GitRemoteRegistry(str(tmp_path))


def test_list_remotes_maps_app_urls(git_registry):
    with patch("app_manager.providers.git.subprocess.run", FakeGit()):
        remotes = git_registry.list_remotes()

    assert remotes == {"heroku": "myapp", "staging": "myapp-staging"}


def test_list_remotes_outside_repository(git_registry):
    with patch("app_manager.providers.git.subprocess.run", FakeGit(inside=False)):
        assert git_registry.list_remotes() is None


def test_list_remotes_without_git_installed(git_registry):
    with patch("app_manager.providers.git.subprocess.run", side_effect=FileNotFoundError):
        assert git_registry.list_remotes() is None


def test_add_remote(git_registry):
    fake = FakeGit()
    with patch("app_manager.providers.git.subprocess.run", fake):
        added = git_registry.add_remote("production", "git@heroku.com:newapp.git")

    assert added
    assert fake.commands[-1] == ["remote", "add", "production", "git@heroku.com:newapp.git"]


def test_add_existing_remote_is_noop(git_registry):
    fake = FakeGit()
    with patch("app_manager.providers.git.subprocess.run", fake):
        added = git_registry.add_remote("heroku", "git@heroku.com:newapp.git")

    assert not added
    assert ["remote", "add", "heroku", "git@heroku.com:newapp.git"] not in fake.commands


def test_add_remote_outside_repository(git_registry):
    fake = FakeGit(inside=False)
    with patch("app_manager.providers.git.subprocess.run", fake):
        assert not git_registry.add_remote("heroku", "git@heroku.com:newapp.git")

    assert fake.commands == [["rev-parse", "--is-inside-work-tree"]]


def test_remove_remote(git_registry):
    fake = FakeGit()
    with patch("app_manager.providers.git.subprocess.run", fake):
        git_registry.remove_remote("heroku")

    assert fake.commands == [["remote", "rm", "heroku"]]


def test_remove_remote_failure(git_registry):
    with patch("app_manager.providers.git.subprocess.run", FakeGit(fail={("remote", "rm")})):
        with pytest.raises(VcsFailure, match="boom"):
            git_registry.remove_remote("heroku")


def test_custom_git_host(tmp_path):
    git_registry = GitRemoteRegistry(str(tmp_path), git_host="git.example.com")

    assert git_registry.git_url("myapp") == "git@git.example.com:myapp.git"
    assert git_registry.app_for_url("git@git.example.com:myapp.git") == "myapp"
    assert git_registry.app_for_url("git@heroku.com:myapp.git") is None


@pytest.mark.integration
def test_real_repository(tmp_path):
    """Round trip against an actual git binary, when one is available."""
    try:
        subprocess.run(["git", "init", "-q", str(tmp_path)], check=True, capture_output=True)
    except (FileNotFoundError, subprocess.CalledProcessError):
        pytest.skip("git is not available")

    git_registry = GitRemoteRegistry(str(tmp_path))
    assert git_registry.list_remotes() == {}

    assert git_registry.add_remote("heroku", "git@heroku.com:myapp.git")
    assert git_registry.list_remotes() == {"heroku": "myapp"}

    git_registry.remove_remote("heroku")
    assert git_registry.list_remotes() == {}
