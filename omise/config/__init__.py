"""Configuration module."""

from omise.config.settings import OmiseSettings

__all__ = [
    "OmiseSettings",
]
