"""Base types for registered actions and build results."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Tuple

Status = Any
Option = Any
# Called with the action key; returns a status and fails only by raising.
ActionFn = Callable[..., Status]


@dataclass(frozen=True)
class ActionEntry:
    """A registered unit of work."""

    key: str
    func: ActionFn
    options: Tuple[Option, ...] = ()


@dataclass
class BuildResult:
    """Result of a build pass.

    Unpacks as ``status, error`` so callers can treat it as the pair the
    build contract returns.
    """

    status: Status
    error: Optional[Exception] = None
    statuses: List[Status] = field(default_factory=list)
    executed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if every action in the pass succeeded."""
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        yield self.status
        yield self.error


class Action(ABC):
    """Interface for anything that chains registered actions."""

    @abstractmethod
    def register(self, key: str, func: ActionFn, *options: Option) -> None:
        """Add or replace the action stored under ``key``.

        Args:
            key: Caller-chosen unique identifier
            func: Callable invoked with the action key during a build
            *options: Extra values appended to the key's option list
        """

    @abstractmethod
    def build(self) -> BuildResult:
        """Invoke every registered action, stopping at the first failure.

        Returns:
            The last successful status and the failure, if any
        """
