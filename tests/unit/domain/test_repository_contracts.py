"""Tests for client_registry/domain/repositories/base.py."""

import pytest

from client_registry.domain.repositories import (
    Adder,
    Checker,
    ClientRepository,
    Finder,
    LogicalDeleter,
    PermanentlyDeleter,
    Repository,
    Updater,
)


@pytest.mark.parametrize(
    "contract",
    [Adder, Updater, LogicalDeleter, PermanentlyDeleter, Finder, Checker, Repository],
)
def test_contract_cannot_be_instantiated_directly(contract):
    with pytest.raises(TypeError):
        contract()  # type: ignore[abstract]


def test_single_contract_can_be_implemented_alone():
    class _AddOnly(Adder):
        async def add(self, item): return None

    assert _AddOnly() is not None


def test_repository_is_every_contract():
    for contract in (Adder, Updater, LogicalDeleter, PermanentlyDeleter, Finder, Checker):
        assert issubclass(Repository, contract)


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def add(self, item): return None
        async def update(self, item): return None
        # missing deletes, finders and item_is_valid

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    class _Full(ClientRepository):
        async def add(self, item): return None
        async def update(self, item): return None
        async def logically_delete(self, item): return None
        async def permanently_delete(self, item): return None
        async def search_by_id(self, id): return None
        async def search_by(self, criteria, page_number): return None
        def item_is_valid(self, item): return None

    assert isinstance(_Full(), Repository)
