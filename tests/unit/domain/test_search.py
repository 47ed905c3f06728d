"""Tests for client_registry/domain/models/search.py."""

import pytest
from pydantic import ValidationError

from client_registry.domain.models import (
    DEFAULT_PAGE_SIZE,
    ClientCriteria,
    FinderConfig,
    SearchResult,
)


def _result(**overrides):
    defaults = dict(
        page=1,
        total_pages=2,
        criteria=ClientCriteria(username="alice"),
        result='[{"client_id": 1, "username": "alice"}]',
    )
    defaults.update(overrides)
    return SearchResult[ClientCriteria].new(**defaults)


def test_new_sets_every_field():
    result = _result()
    assert result.page == 1
    assert result.total_pages == 2
    assert result.criteria == ClientCriteria(username="alice")


def test_page_is_not_checked_against_total_pages():
    assert _result(page=9, total_pages=2).page == 9


def test_total_pages_cannot_be_negative():
    with pytest.raises(ValidationError):
        _result(total_pages=-1)


def test_records_decodes_result():
    assert _result().records() == [{"client_id": 1, "username": "alice"}]


def test_records_of_empty_page():
    assert _result(result="[]").records() == []


def test_equality_is_structural():
    assert _result() == _result()


def test_copy_is_equal_but_distinct():
    original = _result()
    copy = original.model_copy()
    assert copy == original
    assert copy is not original


def test_parametrised_result_validates_criteria():
    restored = SearchResult[ClientCriteria].model_validate(
        {"page": 1, "total_pages": 0, "criteria": {"active": True}, "result": "[]"}
    )
    assert restored.criteria == ClientCriteria(active=True)


# --- FinderConfig ---

def test_finder_config_default_page_size():
    assert FinderConfig(order_by="username").page_size == DEFAULT_PAGE_SIZE == 15


def test_finder_config_rejects_non_positive_page_size():
    with pytest.raises(ValidationError):
        FinderConfig(page_size=0, order_by="username")


def test_finder_config_is_frozen():
    with pytest.raises(ValidationError):
        FinderConfig(order_by="username").page_size = 5
