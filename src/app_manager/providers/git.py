import re
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import structlog

from app_manager.core.errors import VcsFailure

logger = structlog.get_logger()


class GitRemoteRegistry:
    """Git remotes of a working copy that point at apps on the git host."""

    def __init__(self, path: Optional[str] = None, git_host: str = "heroku.com"):
        self.path = Path(path) if path else Path.cwd()
        self.git_host = git_host
        host = re.escape(git_host)
        self._url_patterns = [
            re.compile(rf"^git@{host}:([\w\d-]+)\.git$"),
            re.compile(rf"^https://git\.{host}/([\w\d-]+)\.git$"),
        ]

    def git_url(self, app: str) -> str:
        return f"git@{self.git_host}:{app}.git"

    def app_for_url(self, url: str) -> Optional[str]:
        """Return the app name encoded in a remote URL, if it is one of ours."""
        for pattern in self._url_patterns:
            match = pattern.match(url)
            if match:
                return match.group(1)
        return None

    def is_repository(self, path: Optional[str] = None) -> bool:
        try:
            result = self._run(["rev-parse", "--is-inside-work-tree"], path)
        except (FileNotFoundError, subprocess.SubprocessError) as e:
            logger.debug("git_unavailable", error=str(e))
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def list_remotes(self, path: Optional[str] = None) -> Optional[Dict[str, str]]:
        """Map alias -> app name; None when the directory is not a git work tree."""
        if not self.is_repository(path):
            return None

        output = self._git(["remote", "-v"], path)
        remotes = {}
        for line in output.splitlines():
            parts = line.split()
            if len(parts) < 2:
                continue
            alias, url = parts[0], parts[1]
            app = self.app_for_url(url)
            if app:
                remotes[alias] = app
        return remotes

    def add_remote(self, alias: str, url: str, path: Optional[str] = None) -> bool:
        """Add a remote unless outside a repository or the alias is taken."""
        if not self.is_repository(path):
            return False

        existing = self._git(["remote"], path).split()
        if alias in existing:
            logger.debug("git_remote_exists", alias=alias)
            return False

        self._git(["remote", "add", alias, url], path)
        logger.info("git_remote_added", alias=alias, url=url)
        return True

    def remove_remote(self, alias: str, path: Optional[str] = None) -> None:
        self._git(["remote", "rm", alias], path)
        logger.info("git_remote_removed", alias=alias)

    def _git(self, args: List[str], path: Optional[str] = None) -> str:
        """Run git and return stdout, raising VcsFailure on any error."""
        try:
            result = self._run(args, path)
        except FileNotFoundError as e:
            raise VcsFailure("git is not installed or not on PATH") from e
        except subprocess.SubprocessError as e:
            raise VcsFailure(f"git {' '.join(args)} failed: {e}") from e

        if result.returncode != 0:
            raise VcsFailure(
                f"git {' '.join(args)} failed: {result.stderr.strip() or result.returncode}"
            )
        return result.stdout

    def _run(self, args: List[str], path: Optional[str] = None) -> subprocess.CompletedProcess:
        cwd = Path(path) if path else self.path
        logger.debug("git_command", args=args, cwd=str(cwd))
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=10,
        )
