"""Build pass that chains registered actions until the first failure."""

import time
from typing import Callable, Optional

import structlog
from prometheus_client import Counter, Histogram

from ..config import ChainSettings
from .base import Action, ActionFn, BuildResult, Option, Status
from .registry import ActionRegistry

logger = structlog.get_logger(__name__)

# Prometheus metrics
BUILDS_TOTAL = Counter(
    "txchain_builds_total",
    "Total number of build passes executed",
    ["result"],
)

# One series per registered key; keep action keys to a bounded set when
# metrics are enabled.
ACTIONS_EXECUTED = Counter(
    "txchain_actions_executed_total",
    "Total number of actions invoked during build passes",
    ["action", "status"],
)

BUILD_DURATION = Histogram(
    "txchain_build_duration_seconds",
    "Time spent in a single build pass",
)


class ActionChain(Action):
    """Registry-backed action chain with a synchronous build pass."""

    def __init__(
        self,
        status: Status = 0,
        *,
        persist_status: Optional[bool] = None,
        metrics_enabled: Optional[bool] = None,
        settings: Optional[ChainSettings] = None,
    ) -> None:
        """Initialize the action chain.

        Args:
            status: Seed status for build passes
            persist_status: Write a successful build's final status back as
                the next seed. Defaults to ``settings.persist_status``.
            metrics_enabled: Record Prometheus metrics. Defaults to
                ``settings.metrics_enabled``.
            settings: Settings used for any option not passed explicitly;
                loaded from the environment only when one is missing
        """
        if settings is None and (persist_status is None or metrics_enabled is None):
            settings = ChainSettings()
        self.registry = ActionRegistry(status)
        self.persist_status = (
            settings.persist_status if persist_status is None else persist_status
        )
        self.metrics_enabled = (
            settings.metrics_enabled if metrics_enabled is None else metrics_enabled
        )

        logger.info(
            "Initialized ActionChain",
            status=status,
            persist_status=self.persist_status,
        )

    @property
    def status(self) -> Status:
        """Seed status of the next build pass."""
        return self.registry.status

    def register(self, key: str, func: ActionFn, *options: Option) -> None:
        self.registry.register(key, func, *options)

    def action(self, key: str, *options: Option) -> Callable[[ActionFn], ActionFn]:
        """Decorator to register a function as an action.

        Args:
            key: Unique key for the action
            *options: Extra values stored with the action

        Returns:
            Decorator that registers the function and returns it unchanged
        """
        def decorator(func: ActionFn) -> ActionFn:
            self.register(key, func, *options)
            return func

        return decorator

    def build(self) -> BuildResult:
        """Invoke every registered action in registration order.

        Each action is called with its own key as the only argument and
        fails only by raising. Whatever it returns, including a tuple or an
        exception object, is recorded as its status. The first exception
        stops the pass; it is returned unwrapped together with the status
        produced by the action before it (or the seed).

        With ``persist_status`` enabled, a successful pass that invoked at
        least one action writes its final status back as the next seed.
        Concurrent builds are last-writer-wins: a ``set_status`` made while
        a pass is running is overwritten when that pass completes.

        Returns:
            Build result unpackable as ``status, error``
        """
        start_time = time.time()
        seed, entries = self.registry.snapshot()
        result = BuildResult(status=seed, statuses=[seed])

        logger.debug("Starting build pass", status=seed, actions=len(entries))

        for entry in entries:
            try:
                status = entry.func(entry.key)
            except Exception as e:
                result.error = e
                self._record_action(entry.key, "failed")
                logger.error(
                    "Action failed, aborting build",
                    action=entry.key,
                    error=str(e),
                    error_type=type(e).__name__,
                    status=result.status,
                    executed=len(result.executed),
                )
                break

            result.statuses.append(status)
            result.status = status
            result.executed.append(entry.key)
            self._record_action(entry.key, "success")
            logger.debug("Action completed", action=entry.key, status=status)

        execution_time = time.time() - start_time

        if result.ok:
            if self.persist_status and result.executed:
                self.registry.set_status(result.status)
            logger.info(
                "Build completed",
                status=result.status,
                executed=len(result.executed),
                execution_time=execution_time,
            )

        if self.metrics_enabled:
            BUILDS_TOTAL.labels(result="success" if result.ok else "failed").inc()
            BUILD_DURATION.observe(execution_time)

        return result

    def _record_action(self, key: str, status: str) -> None:
        if self.metrics_enabled:
            ACTIONS_EXECUTED.labels(action=key, status=status).inc()
