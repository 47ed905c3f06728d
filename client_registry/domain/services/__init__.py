"""Domain services package."""

from .clients import ClientService

__all__ = ["ClientService"]
