"""Configuration management with Pydantic models."""

from .settings import ChainSettings

__all__ = ["ChainSettings"]
