"""Pytest configuration and fixtures for txchain tests."""

import pytest

from txchain.actions import ActionChain, ActionRegistry
from txchain.config import ChainSettings


@pytest.fixture
def chain_settings():
    """Provide test chain settings."""
    return ChainSettings(
        log_level="DEBUG",
        metrics_enabled=False,
        persist_status=False,
    )


@pytest.fixture
def registry():
    """Provide an empty ActionRegistry seeded with status 0."""
    return ActionRegistry(status=0)


@pytest.fixture
def chain(chain_settings):
    """Provide an empty ActionChain seeded with status 0."""
    return ActionChain(0, settings=chain_settings)


@pytest.fixture
def calls():
    """Collect the keys passed to recording actions."""
    return []


@pytest.fixture
def returning(calls):
    """Build an action that records its call and returns ``status``."""
    def factory(status):
        def action(*options):
            calls.append(options)
            return status
        return action
    return factory


@pytest.fixture
def failing(calls):
    """Build an action that records its call and raises ``error``."""
    def factory(error):
        def action(*options):
            calls.append(options)
            raise error
        return action
    return factory
