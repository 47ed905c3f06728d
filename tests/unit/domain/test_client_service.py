"""Tests for client_registry/domain/services/clients.py."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from client_registry.domain.exceptions import ItemValidationError
from client_registry.domain.models import Client, NewClient
from client_registry.domain.services import ClientService


def _payload():
    return NewClient(username="alice", pwd="pw", birth_date=date(1990, 1, 1))


async def test_add_client_passes_full_client_to_repository():
    repository = AsyncMock()
    await ClientService(repository).add_client(_payload())
    (client,), _ = repository.add.call_args
    assert isinstance(client, Client)
    assert client.client_id is None
    assert client.active is True
    assert client.username == "alice"


async def test_add_client_returns_client_with_assigned_id():
    async def _assign(client):
        client.client_id = 42

    repository = AsyncMock()
    repository.add.side_effect = _assign
    client = await ClientService(repository).add_client(_payload())
    assert client.client_id == 42


async def test_add_client_propagates_validation_error():
    repository = AsyncMock()
    repository.add.side_effect = ItemValidationError("Client", "nope")
    with pytest.raises(ItemValidationError):
        await ClientService(repository).add_client(_payload())
