"""Action registration and chained build passes."""

from .base import Action, ActionEntry, ActionFn, BuildResult
from .builder import ActionChain
from .registry import ActionRegistry

__all__ = ["Action", "ActionEntry", "ActionFn", "BuildResult", "ActionChain", "ActionRegistry"]
