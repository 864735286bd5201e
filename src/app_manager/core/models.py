"""Result types returned by the app orchestrators."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CreationResult:
    name: str
    stack: Optional[str]
    web_url: Optional[str]
    git_url: Optional[str]
    addons: Tuple[str, ...] = ()
    remote: Optional[str] = None
    timed_out: bool = False

    @property
    def remote_added(self) -> bool:
        return self.remote is not None


@dataclass(frozen=True)
class RenameResult:
    old_name: str
    name: str
    web_url: Optional[str]
    git_url: Optional[str]
    updated_remotes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DestructionResult:
    name: str
    removed_remotes: Tuple[str, ...] = ()
