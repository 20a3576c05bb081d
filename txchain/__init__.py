"""Register keyed actions and chain them in a single build pass."""

from .actions import Action, ActionChain, ActionEntry, ActionRegistry, BuildResult
from .config import ChainSettings
from .utils import configure_logging, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionChain",
    "ActionEntry",
    "ActionRegistry",
    "BuildResult",
    "ChainSettings",
    "configure_logging",
    "setup_logging",
    "__version__",
]
