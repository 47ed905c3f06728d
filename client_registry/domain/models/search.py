"""Search result and finder configuration models."""

from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

CriteriaT = TypeVar("CriteriaT")

DEFAULT_PAGE_SIZE = 15


class SearchResult(BaseModel, Generic[CriteriaT]):
    """One page of a filtered search, plus the criteria that produced it.

    result holds the page's rows as a JSON array string so the result type
    stays independent of the entity's shape.  page is whatever the caller
    asked for; it is not checked against total_pages, so an out-of-range page
    simply carries an empty array.
    """

    page: int
    total_pages: int = Field(ge=0)
    criteria: CriteriaT
    result: str

    @classmethod
    def new(
        cls, page: int, total_pages: int, criteria: CriteriaT, result: str
    ) -> SearchResult[CriteriaT]:
        return cls(page=page, total_pages=total_pages, criteria=criteria, result=result)

    def records(self) -> list[dict[str, Any]]:
        """Decode result into plain dicts."""
        return json.loads(self.result)


class FinderConfig(BaseModel):
    """Paging knobs for a Finder.

    order_by names the column rows are sorted on (ascending).  It should be
    the entity's natural display key so pages stay stable between calls.
    """

    model_config = ConfigDict(frozen=True)

    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    order_by: str
