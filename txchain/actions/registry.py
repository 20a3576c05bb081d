"""Thread-safe registry of keyed actions and their options."""

import threading
from typing import Any, Dict, List, Optional, Tuple

import structlog

from .base import ActionEntry, ActionFn, Option, Status


logger = structlog.get_logger(__name__)


class ActionRegistry:
    """Registry mapping action keys to callables and accumulated options.

    Keys keep the slot of their first registration, so snapshots list
    entries in registration order.
    """

    def __init__(self, status: Status = 0) -> None:
        """Initialize the action registry.

        Args:
            status: Seed status for build passes
        """
        self._entries: Optional[Dict[str, ActionFn]] = None
        self._options: Optional[Dict[str, List[Option]]] = None
        self._status = status
        self._lock = threading.Lock()

        logger.debug("Initialized ActionRegistry", status=status)

    def register(self, key: str, func: ActionFn, *options: Option) -> None:
        """Register an action under ``key``.

        A second registration under the same key replaces the callable and
        appends its options to the ones already stored.

        Args:
            key: Caller-chosen unique identifier
            func: Callable invoked with the key during a build
            *options: Extra values appended to the key's option list
        """
        if not isinstance(key, str):
            raise TypeError(f"Action key must be a string, got {type(key).__name__}")
        if not key:
            raise ValueError("Action key must not be empty")
        if not callable(func):
            raise TypeError(f"Action '{key}' is not callable")

        with self._lock:
            if self._entries is None:
                self._entries = {}
            if self._options is None:
                self._options = {}

            if key in self._entries:
                logger.warning("Overriding existing action", action=key)

            self._entries[key] = func
            self._options.setdefault(key, []).extend(options)

            logger.info(
                "Registered action",
                action=key,
                options=len(self._options[key])
            )

    def options(self, key: str) -> List[Option]:
        """Get a copy of the options accumulated for ``key``.

        Raises:
            KeyError: If no action is registered under ``key``
        """
        with self._lock:
            if not self._options or key not in self._options:
                raise KeyError(key)
            return list(self._options[key])

    @property
    def status(self) -> Status:
        """Seed status for the next build pass."""
        with self._lock:
            return self._status

    def set_status(self, status: Status) -> None:
        with self._lock:
            self._status = status

    def snapshot(self) -> Tuple[Status, List[ActionEntry]]:
        """Take a consistent copy of the seed status and all entries.

        Returns:
            Seed status and entries in registration order
        """
        with self._lock:
            entries = [
                ActionEntry(key=key, func=func, options=tuple(self._options[key]))
                for key, func in (self._entries or {}).items()
            ]
            return self._status, entries

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries or {})

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries or {})

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return bool(self._entries) and key in self._entries

    def list_actions(self) -> List[Dict[str, Any]]:
        """List all registered actions.

        Returns:
            List of action info dictionaries
        """
        with self._lock:
            return [
                {
                    "name": key,
                    "options": len(self._options[key])
                }
                for key in (self._entries or {})
            ]

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics.

        Returns:
            Dictionary with statistics
        """
        with self._lock:
            entries = self._entries or {}
            return {
                "registered_actions": len(entries),
                "action_names": list(entries),
                "status": self._status
            }
