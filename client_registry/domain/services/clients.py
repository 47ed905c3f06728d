"""Client creation flow.

The boundary between untrusted input and the persisted shape: callers hand
over a NewClient (no identifier, no active flag) and the service builds the
full Client before it reaches the repository.
"""

from __future__ import annotations

import logging

from client_registry.domain.models.clients import Client, NewClient
from client_registry.domain.repositories.clients import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, repository: ClientRepository) -> None:
        self._repository = repository

    async def add_client(self, payload: NewClient) -> Client:
        """Persist a new active client and return it with its assigned id.

        Raises ItemValidationError when the repository's validation hook
        rejects the client, StorageError / StoreConnectionError when the
        store does.
        """
        client = Client.from_new(payload)
        await self._repository.add(client)
        logger.info("Registered client %s (%s)", client.client_id, client.username)
        return client
