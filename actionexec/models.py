from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReadParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int


class User(BaseModel):
    """A user record as returned by the reader collaborator."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
