"""Client domain models.

Pure domain objects with no ORM or persistence concerns.  Client is mutable:
repositories write the store-assigned identifier back onto it on insert and
flip its active flag on logical delete.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class Client(BaseModel):
    """A registered client.

    client_id is None until the client has been persisted.  active=False
    marks a logically deleted client whose row is still in the store.
    """

    model_config = ConfigDict(validate_assignment=True)

    client_id: int | None = None
    active: bool = True
    username: str
    pwd: str
    birth_date: date

    @classmethod
    def from_new(cls, payload: NewClient) -> Client:
        """Build an unpersisted, active client from a creation payload."""
        return cls(
            client_id=None,
            active=True,
            username=payload.username,
            pwd=payload.pwd,
            birth_date=payload.birth_date,
        )

    # Identifiable
    @property
    def id(self) -> int | None:
        return self.client_id

    # SoftDeletable
    @property
    def is_deleted(self) -> bool:
        return not self.active

    def set_deleted(self, deleted: bool) -> None:
        self.active = not deleted


class NewClient(BaseModel):
    """Creation payload: what an untrusted caller may supply."""

    model_config = ConfigDict(frozen=True)

    username: str
    pwd: str
    birth_date: date


class ClientCriteria(BaseModel):
    """Equality filters for a client search.  None means "don't filter"."""

    model_config = ConfigDict(frozen=True)

    client_id: int | None = None
    active: bool | None = None
    username: str | None = None
    pwd: str | None = None
    birth_date: date | None = None
