"""Client repository interface."""

from __future__ import annotations

from client_registry.domain.models.clients import Client, ClientCriteria

from .base import Repository


class ClientRepository(Repository[Client, int, ClientCriteria]):
    """Read/write interface for Client entities.

    search_by() filters on any combination of ClientCriteria fields and
    orders pages by username.
    """
